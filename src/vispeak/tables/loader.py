"""Loading and caching of the word-replacement and acronym tables."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from vispeak.text.replacement import EMPTY_TABLE, LookupTable

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Tables:
    """The two lookup tables a pipeline reads from."""

    replacements: LookupTable = field(default_factory=lambda: EMPTY_TABLE)
    acronyms: LookupTable = field(default_factory=lambda: EMPTY_TABLE)


EMPTY_TABLES = Tables()


def parse_lookup_csv(text: str) -> LookupTable:
    """Parse ``key,value`` rows, skipping the header row and malformed rows.

    Only the first comma separates key from value, so values may contain commas.
    """
    entries: list[tuple[str, str]] = []
    for line in text.splitlines()[1:]:
        key, comma, value = line.strip().partition(",")
        if not comma:
            continue
        key = key.strip().lower()
        value = value.strip()
        if key and value:
            entries.append((key, value))
    return LookupTable(entries)


def load_lookup_table(path: str | Path) -> LookupTable:
    """Read a lookup table from ``path``; an unreadable file yields an empty table."""
    resolved = Path(path)
    if not resolved.is_file():
        logger.warning("lookup_table_missing", path=str(resolved))
        return EMPTY_TABLE
    try:
        text = resolved.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("lookup_table_unreadable", path=str(resolved), error=str(exc))
        return EMPTY_TABLE
    return parse_lookup_csv(text)


class TableStore:
    """Process-wide cache of `Tables`, loaded on first use.

    Loaded tables are never mutated, so callers may share them without
    locking. `invalidate` drops the cache and the next `get` reads the files
    again.
    """

    def __init__(self, replacements_path: str | Path, acronyms_path: str | Path) -> None:
        self.replacements_path = Path(replacements_path)
        self.acronyms_path = Path(acronyms_path)
        self._tables: Tables | None = None
        self._lock = threading.Lock()

    def get(self) -> Tables:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            if self._tables is None:
                self._tables = self._load()
            return self._tables

    def invalidate(self) -> None:
        with self._lock:
            self._tables = None

    def reload(self) -> Tables:
        self.invalidate()
        return self.get()

    def _load(self) -> Tables:
        tables = Tables(
            replacements=load_lookup_table(self.replacements_path),
            acronyms=load_lookup_table(self.acronyms_path),
        )
        logger.info(
            "lookup_tables_loaded",
            replacements=len(tables.replacements),
            acronyms=len(tables.acronyms),
        )
        return tables
