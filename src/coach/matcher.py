"""
Token matching and ranking of knowledge base entries.
Pure functions, no session state.
"""
import re
from dataclasses import dataclass

from .app_logger import get_logger
from .config import ANCHOR_MATCH_WEIGHT, STRONG_MATCH_THRESHOLD, TOKEN_COUNT_BONUS
from .loader import KnowledgeEntry
from .utils import label_token_count, tokenize

logger = get_logger("matcher")


@dataclass(frozen=True)
class ScoredCandidate:
    entry: KnowledgeEntry
    weight: int


def anchor_patterns(tokens):
    """Two label-start patterns per token: plural-tolerant whole word, then bare prefix."""
    patterns = []
    for token in tokens:
        escaped = re.escape(token)
        patterns.append(re.compile(rf'^{escaped}(es|s)?\b', re.ASCII))
        patterns.append(re.compile(rf'^{escaped}', re.ASCII))
    return patterns


def contains_all(label, tokens):
    """True when every token occurs somewhere in the label."""
    return all(token in label for token in tokens)


def score(knowledge_base, query):
    """
    Score every entry that contains all query tokens.
    Returns ScoredCandidate objects in knowledge base order.
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    patterns = anchor_patterns(tokens)
    candidates = []
    for entry in knowledge_base:
        label = entry.label
        if not contains_all(label, tokens):
            continue

        weight = sum(ANCHOR_MATCH_WEIGHT for pattern in patterns if pattern.match(label))
        if label_token_count(label) == len(tokens):
            weight += TOKEN_COUNT_BONUS
        candidates.append(ScoredCandidate(entry=entry, weight=weight))

    logger.debug("Tokens %s matched %d of %d entries", tokens, len(candidates), len(knowledge_base))
    return candidates


def rank(knowledge_base, query):
    """
    Order scored candidates best first.
    Only strong candidates survive when there are any; otherwise every
    candidate is kept in knowledge base order.
    """
    candidates = score(knowledge_base, query)
    strong = [c for c in candidates if c.weight >= STRONG_MATCH_THRESHOLD]
    if not strong:
        return candidates
    # sorted() is stable, ties keep knowledge base order
    return sorted(strong, key=lambda c: c.weight, reverse=True)


def search(knowledge_base, query):
    """Return matching entries for a free-text query, best match first."""
    return [candidate.entry for candidate in rank(knowledge_base, query)]
