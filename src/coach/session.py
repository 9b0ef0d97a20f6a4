"""
Two-turn disclosure of ranked results.

The first turn presents the best entry and parks the next page in the
session. A follow-up turn hands that page back.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .app_logger import get_logger
from .config import (
    ATTR_LABEL, ATTR_LABEL_ALIASES, ATTR_RESULT_LENGTH, ATTR_RESULTS,
    MAX_PROBLEMS, MAX_RESPONSES
)
from .loader import KnowledgeEntry

logger = get_logger("session")


@dataclass
class SessionState:
    """Pending second page for one conversation. Owned by that conversation only."""
    pending_label: Optional[str] = None
    pending_count: Optional[int] = None
    pending_entries: List[KnowledgeEntry] = field(default_factory=list)

    @property
    def has_pending(self):
        return bool(self.pending_entries)

    def clear(self):
        self.pending_label = None
        self.pending_count = None
        self.pending_entries = []

    def to_attributes(self):
        """Serialize to the transport's session attribute bag."""
        if not self.has_pending:
            return {}
        return {
            ATTR_RESULT_LENGTH: self.pending_count,
            ATTR_LABEL: self.pending_label,
            ATTR_RESULTS: [entry.to_pair() for entry in self.pending_entries],
        }

    @classmethod
    def from_attributes(cls, attributes):
        """Rebuild state from a session attribute bag; unknown keys are ignored."""
        attributes = attributes or {}
        results = attributes.get(ATTR_RESULTS) or []
        if not results:
            return cls()

        label = attributes.get(ATTR_LABEL)
        for alias in ATTR_LABEL_ALIASES:
            if label is None:
                label = attributes.get(alias)

        return cls(
            pending_label=label,
            pending_count=attributes.get(ATTR_RESULT_LENGTH, len(results)),
            pending_entries=[KnowledgeEntry(label=pair[0], text=pair[1]) for pair in results],
        )


@dataclass(frozen=True)
class FirstPage:
    primary: Optional[KnowledgeEntry]
    overflow_announced: bool = False

    @property
    def found(self):
        return self.primary is not None


@dataclass(frozen=True)
class FollowUp:
    entries: List[KnowledgeEntry]
    label: Optional[str]
    count: int


class _WrongInvocation:
    """Follow-up requested with nothing pending."""

    def __repr__(self):
        return 'WRONG_INVOCATION'

    def __bool__(self):
        return False


WRONG_INVOCATION = _WrongInvocation()


def present_first_page(query_label, results, session):
    """
    Present the best result and park the next page in the session.

    The session is only touched when there is more than one result; an empty
    or single result leaves any earlier pending state in place.
    """
    if not results:
        logger.debug("No match for %r", query_label)
        return FirstPage(primary=None)

    primary = results[0]
    if len(results) <= MAX_RESPONSES:
        return FirstPage(primary=primary, overflow_announced=False)

    session.pending_entries = list(results[MAX_RESPONSES:MAX_PROBLEMS])
    session.pending_label = query_label
    session.pending_count = len(results)
    logger.debug("Parked %d of %d results for %r", len(session.pending_entries), len(results), query_label)
    return FirstPage(primary=primary, overflow_announced=True)


def present_follow_up(session, consume=True):
    """
    Hand back the parked page, or WRONG_INVOCATION when nothing is pending.
    With consume=False the page stays parked and a repeat request emits it again.
    """
    if not session.has_pending:
        return WRONG_INVOCATION

    follow_up = FollowUp(
        entries=list(session.pending_entries),
        label=session.pending_label,
        count=session.pending_count,
    )
    if consume:
        session.clear()
    return follow_up
