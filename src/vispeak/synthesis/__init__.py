"""Speech synthesis collaborator interface."""

from vispeak.synthesis.base import (
    SynthesisEngine,
    SynthesisOptions,
    SynthesizedChunk,
    length_scale_for_speed,
)
from vispeak.synthesis.stream import merge_audio, normalize_peak, silence, synthesize_chunks

__all__ = [
    "SynthesisEngine",
    "SynthesisOptions",
    "SynthesizedChunk",
    "length_scale_for_speed",
    "merge_audio",
    "normalize_peak",
    "silence",
    "synthesize_chunks",
]
