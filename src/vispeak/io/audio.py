"""WAV readers and writers for synthesized audio."""

from __future__ import annotations

import wave
from pathlib import Path

import numpy as np


def write_wav(output_path: str | Path, audio: np.ndarray, sample_rate_hz: int) -> Path:
    """Write mono float samples in [-1, 1] as 16-bit PCM WAV."""
    if sample_rate_hz <= 0:
        raise ValueError("Sample rate must be positive")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    samples = np.clip(np.asarray(audio, dtype=np.float32).reshape(-1), -1.0, 1.0)
    pcm = (samples * 32767.0).astype("<i2")

    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(sample_rate_hz)
        handle.writeframes(pcm.tobytes())
    return path


def read_wav(audio_path: str | Path) -> tuple[np.ndarray, int] | None:
    """Read WAV audio as mono float32 in range [-1, 1].

    Returns `None` for unsupported files or when the header cannot be parsed.
    """
    path = Path(audio_path)
    if path.suffix.casefold() not in {".wav", ".wave"}:
        return None

    try:
        with wave.open(str(path), "rb") as handle:
            sample_rate = handle.getframerate()
            channels = handle.getnchannels()
            sample_width = handle.getsampwidth()
            frame_count = handle.getnframes()
            raw = handle.readframes(frame_count)
    except (OSError, wave.Error):
        return None

    if sample_rate <= 0 or channels <= 0:
        return None

    if sample_width == 1:
        data = np.frombuffer(raw, dtype=np.uint8).astype(np.float32)
        data = (data - 128.0) / 128.0
    elif sample_width == 2:
        data = np.frombuffer(raw, dtype="<i2").astype(np.float32) / 32768.0
    elif sample_width == 4:
        data = np.frombuffer(raw, dtype="<i4").astype(np.float32) / 2147483648.0
    else:
        return None

    if channels > 1:
        data = data.reshape(-1, channels).mean(axis=1)

    return data.astype(np.float32), sample_rate
