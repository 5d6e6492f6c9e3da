"""Serializers for normalization output: JSON documents and one-chunk-per-line text."""

from __future__ import annotations

from pathlib import Path

from vispeak.models import NormalizeResponse


def to_json(response: NormalizeResponse, *, include_traces: bool = True) -> str:
    """Serialize a normalization response to indented JSON.

    Vietnamese letters are written as-is, not as ``\\u`` escapes.
    """
    exclude = None if include_traces else {"traces"}
    return response.model_dump_json(indent=2, exclude=exclude)


def to_chunk_lines(response: NormalizeResponse) -> str:
    """One chunk per line, in synthesis order, newline-terminated."""
    return "".join(f"{chunk}\n" for chunk in response.chunks)


def write_json(response: NormalizeResponse, output_path: str | Path) -> Path:
    path = _prepare(output_path)
    path.write_text(to_json(response) + "\n", encoding="utf-8")
    return path


def write_chunks(response: NormalizeResponse, output_path: str | Path) -> Path:
    """Write the chunk list as plain text, ready to feed a synthesizer line by line."""
    path = _prepare(output_path)
    path.write_text(to_chunk_lines(response), encoding="utf-8")
    return path


def _prepare(output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
