"""
Custom exceptions for the Problem Coach engine.
"""

class CoachError(Exception):
    """Base class for all Problem Coach errors."""
    pass

class KnowledgeLoadError(CoachError):
    """Raised when a knowledge base file cannot be loaded or is malformed."""
    pass

class MalformedQueryError(CoachError):
    """Raised when a query has no tokens left after normalization."""
    pass

class UnknownSkillError(CoachError):
    """Raised when no skill profile is registered under the requested name."""
    pass
