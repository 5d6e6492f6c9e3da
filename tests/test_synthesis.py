import numpy as np
import pytest

from vispeak.synthesis import (
    SynthesisOptions,
    SynthesizedChunk,
    length_scale_for_speed,
    merge_audio,
    synthesize_chunks,
)


class FakeEngine:
    sample_rate_hz = 100

    def __init__(self) -> None:
        self.calls: list[tuple[str, SynthesisOptions]] = []

    def synthesize(self, text: str, options: SynthesisOptions) -> np.ndarray:
        self.calls.append((text, options))
        if text == "boom":
            raise RuntimeError("engine failure")
        return np.full(len(text), 0.25, dtype=np.float32)


def test_failed_chunk_becomes_silence() -> None:
    engine = FakeEngine()
    results = list(synthesize_chunks(engine, ["abc", "boom", "xyz"]))

    assert [result.index for result in results] == [0, 1, 2]
    assert [result.failed for result in results] == [False, True, False]
    assert len(results[1].audio) == 100
    assert not results[1].audio.any()
    assert results[1].duration_sec == 1.0
    assert len(engine.calls) == 3


def test_options_reach_the_engine() -> None:
    engine = FakeEngine()
    options = SynthesisOptions.from_speed(2.0, speaker_id=3)
    list(synthesize_chunks(engine, ["abc"], options))

    assert engine.calls[0][1].length_scale == 0.5
    assert engine.calls[0][1].speaker_id == 3


def test_merge_audio_orders_and_normalizes() -> None:
    engine = FakeEngine()
    results = list(synthesize_chunks(engine, ["abc", "boom"]))

    waveform, sample_rate_hz = merge_audio(list(reversed(results)))

    assert sample_rate_hz == 100
    assert waveform.shape == (103,)
    assert float(np.max(np.abs(waveform))) == pytest.approx(1.0)
    assert waveform[:3].tolist() == pytest.approx([1.0, 1.0, 1.0])


def test_merge_audio_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        merge_audio([])
    with pytest.raises(ValueError):
        merge_audio(
            [
                SynthesizedChunk(0, "a", np.zeros(4, dtype=np.float32), 100),
                SynthesizedChunk(1, "b", np.zeros(4, dtype=np.float32), 200),
            ]
        )


def test_invalid_options() -> None:
    with pytest.raises(ValueError):
        length_scale_for_speed(0)
    with pytest.raises(ValueError):
        SynthesisOptions(length_scale=-1.0)
    with pytest.raises(ValueError):
        SynthesisOptions(speaker_id=-1)
