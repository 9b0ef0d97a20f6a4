"""
Knowledge base loading module.
"""
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

import pandas as pd

from .app_logger import get_logger
from .errors import KnowledgeLoadError

logger = get_logger("loader")


@dataclass(frozen=True)
class KnowledgeEntry:
    """One searchable label and the recommendation text returned for it."""
    label: str
    text: str

    def to_pair(self):
        return [self.label, self.text]


class KnowledgeBase:
    """
    Immutable, ordered collection of knowledge entries.
    Order matters: it breaks ties between equally weighted matches.
    """
    def __init__(self, entries, source=None):
        self._entries = tuple(entries)
        self.source = source

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    @property
    def entries(self):
        return self._entries

    def labels(self):
        return [entry.label for entry in self._entries]

    @classmethod
    def from_pairs(cls, pairs, source=None):
        """Build a knowledge base from in-memory [label, text] records."""
        return cls(_entries_from_rows(list(pairs), source or '<memory>'), source=source)


def load(path):
    """
    Load a knowledge base from a JSON array of [label, text] arrays.
    Raises KnowledgeLoadError when the file is missing or malformed.
    """
    path = Path(path)
    if not path.is_file():
        logger.error("Knowledge base file not found: %s", path)
        raise KnowledgeLoadError(f"Could not find knowledge base file: {path.name}")

    raw = path.read_text(encoding='utf-8-sig')
    if not raw.lstrip().startswith('['):
        logger.error("Knowledge base %s is not a JSON array", path)
        raise KnowledgeLoadError(f"Knowledge base {path.name} must be a JSON array of [label, text] pairs")

    try:
        frame = pd.read_json(StringIO(raw), orient='values', dtype=False, convert_dates=False)
    except ValueError as e:
        logger.error("Knowledge base %s is not valid JSON: %s", path, e)
        raise KnowledgeLoadError(f"Knowledge base {path.name} is not valid JSON: {e}") from e

    if frame.shape[0] == 0:
        logger.warning("Knowledge base %s has no entries", path)
        return KnowledgeBase((), source=path)

    # Object rows come back with named columns in key order
    if frame.columns.tolist() != [0, 1] or frame.isna().any().any():
        raise KnowledgeLoadError(
            f"Knowledge base {path.name} must hold [label, text] pairs, got columns {frame.columns.tolist()}"
        )

    entries = _entries_from_rows(frame.itertuples(index=False, name=None), path.name)
    logger.info("Loaded %d knowledge entries from %s", len(entries), path.name)
    return KnowledgeBase(entries, source=path)


def _entries_from_rows(rows, source_name):
    entries = []
    for row_number, row in enumerate(rows, 1):
        if len(row) != 2:
            raise KnowledgeLoadError(f"{source_name} row {row_number}: expected [label, text]")
        label, text = row
        if not isinstance(label, str) or not label.strip():
            raise KnowledgeLoadError(f"{source_name} row {row_number}: label must be a non-empty string")
        if not isinstance(text, str):
            raise KnowledgeLoadError(f"{source_name} row {row_number}: text must be a string")
        entries.append(KnowledgeEntry(label=label, text=text))
    return entries
