"""
Text normalization utilities.
"""
import re

from .errors import MalformedQueryError

WHITESPACE_PATTERN = re.compile(r'\s+')

def normalize_query(text):
    """Lower-case the query and strip commas."""
    if not text:
        return ""
    return str(text).lower().replace(',', '')

def tokenize(text):
    """Split normalized text into its ordered, non-empty tokens."""
    return [tok for tok in WHITESPACE_PATTERN.split(normalize_query(text)) if tok]

def require_tokens(text):
    """
    Tokenize a query and reject it when nothing is left.
    Raises MalformedQueryError so the caller can ask for the issue again.
    """
    tokens = tokenize(text)
    if not tokens:
        raise MalformedQueryError(f"No issue named in query: {text!r}")
    return tokens

def label_token_count(label):
    """Number of whitespace-separated words in a knowledge base label."""
    return len([tok for tok in WHITESPACE_PATTERN.split(str(label)) if tok])

def sanitize_text(text):
    """Normalize whitespace for display."""
    if text is None:
        return ""
    return " ".join(str(text).strip().split())
