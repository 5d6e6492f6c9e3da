"""Whole-word dictionary substitution used for foreign words and acronyms."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import NamedTuple


class Segment(NamedTuple):
    """A slice of output text and the input text it was produced from."""

    text: str
    replaced: bool
    original: str


class LookupTable(Mapping[str, str]):
    """Immutable phrase table matched longest-key-first, case-insensitively.

    Keys are stored lowercased and trimmed. A key only matches when it is not
    glued to another word character on either side, and punctuation inside a
    key (``tp.hcm``) is matched literally.
    """

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        items = entries.items() if isinstance(entries, Mapping) else entries
        cleaned: dict[str, str] = {}
        for key, value in items:
            key = key.strip().lower()
            value = value.strip()
            if key and value:
                cleaned[key] = value
        ordered = sorted(cleaned.items(), key=lambda item: len(item[0]), reverse=True)
        self._entries = dict(ordered)
        self._pattern = self._build_pattern(self._entries)

    @staticmethod
    def _build_pattern(entries: Mapping[str, str]) -> re.Pattern[str] | None:
        if not entries:
            return None
        alternation = "|".join(re.escape(key) for key in entries)
        return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)

    def __getitem__(self, key: str) -> str:
        return self._entries[key.strip().lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LookupTable({len(self)} entries)"

    def _substitute(self, match: re.Match[str]) -> str:
        found = match[0]
        replacement = self._entries.get(found.lower())
        if replacement is None:
            return found
        if found[0].isupper():
            return replacement[0].upper() + replacement[1:]
        return replacement

    def split(self, text: str) -> list[Segment]:
        """Cut ``text`` into untouched and replaced segments, in order."""
        if not isinstance(text, str) or not text:
            return []
        if self._pattern is None:
            return [_keep(text)]

        segments: list[Segment] = []
        position = 0
        for match in self._pattern.finditer(text):
            if match.start() > position:
                segments.append(_keep(text[position : match.start()]))
            segments.append(Segment(self._substitute(match), True, match[0]))
            position = match.end()
        if position < len(text):
            segments.append(_keep(text[position:]))
        return segments

    def apply(self, text: str) -> str:
        """Replace every whole-word occurrence of a key with its value."""
        if not isinstance(text, str) or not text:
            return ""
        if self._pattern is None:
            return text
        return self._pattern.sub(self._substitute, text)


EMPTY_TABLE = LookupTable()


def _keep(text: str) -> Segment:
    return Segment(text, False, text)
