"""Chunk-by-chunk synthesis with per-chunk failure isolation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import numpy as np
import structlog

from vispeak.synthesis.base import SynthesisEngine, SynthesisOptions, SynthesizedChunk

logger = structlog.get_logger(__name__)

DEFAULT_SILENCE_SEC = 1.0


def silence(duration_sec: float, sample_rate_hz: int) -> np.ndarray:
    """Return ``duration_sec`` of zero samples."""
    return np.zeros(max(0, int(round(duration_sec * sample_rate_hz))), dtype=np.float32)


def synthesize_chunks(
    engine: SynthesisEngine,
    chunks: Iterable[str],
    options: SynthesisOptions | None = None,
    *,
    silence_sec: float = DEFAULT_SILENCE_SEC,
) -> Iterator[SynthesizedChunk]:
    """Synthesize chunks in order, yielding one result per chunk.

    A chunk whose synthesis raises is logged and replaced by ``silence_sec``
    of silence; the stream continues with the next chunk.
    """
    resolved = options or SynthesisOptions()
    sample_rate_hz = engine.sample_rate_hz
    for index, text in enumerate(chunks):
        try:
            audio = np.asarray(engine.synthesize(text, resolved), dtype=np.float32).reshape(-1)
        except Exception as exc:
            logger.warning("synthesis_chunk_failed", index=index, text=text, error=str(exc))
            yield SynthesizedChunk(
                index=index,
                text=text,
                audio=silence(silence_sec, sample_rate_hz),
                sample_rate_hz=sample_rate_hz,
                failed=True,
            )
            continue
        yield SynthesizedChunk(
            index=index, text=text, audio=audio, sample_rate_hz=sample_rate_hz
        )


def normalize_peak(audio: np.ndarray, target: float = 1.0) -> np.ndarray:
    """Scale ``audio`` so its largest absolute sample equals ``target``."""
    peak = float(np.max(np.abs(audio))) if audio.size else 0.0
    if peak <= 0.0:
        return audio
    return (audio * (target / peak)).astype(np.float32)


def merge_audio(
    chunks: Sequence[SynthesizedChunk], *, peak: float | None = 1.0
) -> tuple[np.ndarray, int]:
    """Concatenate chunk audio in order, optionally peak-normalizing the result."""
    if not chunks:
        raise ValueError("no audio chunks to merge")
    sample_rate_hz = chunks[0].sample_rate_hz
    if any(chunk.sample_rate_hz != sample_rate_hz for chunk in chunks):
        raise ValueError("cannot merge chunks with different sample rates")

    ordered = sorted(chunks, key=lambda chunk: chunk.index)
    waveform = np.concatenate([np.asarray(chunk.audio, dtype=np.float32) for chunk in ordered])
    if peak is not None:
        waveform = normalize_peak(waveform, peak)
    return waveform, sample_rate_hz
