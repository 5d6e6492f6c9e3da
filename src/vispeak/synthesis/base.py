"""Speech synthesis engine interface and shared models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

DEFAULT_NOISE_SCALE = 0.667
DEFAULT_NOISE_W_SCALE = 0.8


def length_scale_for_speed(speed: float) -> float:
    """Map a playback speed multiplier to a length scale; faster speech is shorter."""
    if speed <= 0:
        raise ValueError(f"speed must be positive, got {speed}")
    return 1.0 / speed


@dataclass(frozen=True)
class SynthesisOptions:
    """Voice parameters handed to the engine with every chunk."""

    speaker_id: int = 0
    length_scale: float = 1.0
    noise_scale: float = DEFAULT_NOISE_SCALE
    noise_w_scale: float = DEFAULT_NOISE_W_SCALE

    def __post_init__(self) -> None:
        if self.length_scale <= 0:
            raise ValueError(f"length_scale must be positive, got {self.length_scale}")
        if self.speaker_id < 0:
            raise ValueError(f"speaker_id must be non-negative, got {self.speaker_id}")

    @classmethod
    def from_speed(cls, speed: float = 1.0, speaker_id: int = 0) -> SynthesisOptions:
        return cls(speaker_id=speaker_id, length_scale=length_scale_for_speed(speed))


@dataclass(frozen=True)
class SynthesizedChunk:
    """Audio produced for one text chunk."""

    index: int
    text: str
    audio: Any
    sample_rate_hz: int
    failed: bool = False

    @property
    def duration_sec(self) -> float:
        return round(len(self.audio) / self.sample_rate_hz, 3)


class SynthesisEngine(Protocol):
    """Protocol implemented by concrete speech synthesizers."""

    sample_rate_hz: int

    def synthesize(self, text: str, options: SynthesisOptions) -> Any:
        """Return mono float32 samples in [-1, 1] for one normalized chunk."""
