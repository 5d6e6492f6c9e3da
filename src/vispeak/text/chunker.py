"""Split normalized text into length-bounded chunks for synthesis."""

from __future__ import annotations

import re

MIN_CHUNK_LENGTH = 4
MAX_CHUNK_LENGTH = 500

_TERMINAL_RE = re.compile(r"[.!?]$")
# Sentence ends and clause breaks; the punctuation stays with its clause.
_BREAK_RE = re.compile(r"(?<=[.!?,;:])(?=\s|$)")


def split_sentences(line: str) -> list[str]:
    """Split one line after sentence or clause punctuation followed by a space."""
    line = line.strip()
    if not line:
        return []
    if not _TERMINAL_RE.search(line):
        line += "."
    return [part.strip() for part in _BREAK_RE.split(line) if part.strip()]


def _split_words(sentence: str, max_length: int) -> list[str]:
    pieces: list[str] = []
    current = ""
    for word in sentence.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_length:
            current = candidate
            continue
        if current:
            pieces.append(current)
        current = word
    if current:
        pieces.append(current)
    return pieces


def chunk_text(
    text: str,
    min_length: int = MIN_CHUNK_LENGTH,
    max_length: int = MAX_CHUNK_LENGTH,
) -> list[str]:
    """Group the sentences of each line into chunks of ``min_length..max_length`` chars.

    Chunks never span lines. A sentence is merged into the running chunk
    while that chunk is shorter than ``min_length``; a chunk is closed when
    the next sentence would push it past ``max_length``. A sentence that is
    longer than ``max_length`` on its own is cut at spaces, and a single word
    longer than the limit becomes its own oversized chunk.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    if min_length < 1 or max_length < min_length:
        raise ValueError("chunk bounds must satisfy 1 <= min_length <= max_length")

    chunks: list[str] = []
    for line in text.split("\n"):
        current = ""
        for sentence in split_sentences(line):
            if len(sentence) > max_length:
                if current:
                    chunks.append(current)
                *complete, current = _split_words(sentence, max_length)
                chunks.extend(complete)
                continue

            if not current:
                current = sentence
                continue

            candidate = f"{current} {sentence}"
            if len(candidate) > max_length:
                chunks.append(current)
                current = sentence
            elif len(current) < min_length:
                current = candidate
            else:
                chunks.append(current)
                current = sentence
        if current:
            chunks.append(current)
    return chunks
