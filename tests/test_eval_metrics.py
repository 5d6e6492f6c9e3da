import pytest

from vispeak.eval.metrics import character_error_rate, edit_distance, summarize_metrics


def test_edit_distance() -> None:
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("", "abc") == 3
    assert edit_distance("đồng", "đồng") == 0


def test_character_error_rate() -> None:
    assert character_error_rate("", "") == 0.0
    assert character_error_rate("a", "") == 1.0
    assert character_error_rate("năm mươi", "năm mươi") == 0.0
    assert character_error_rate("abcd", "abce") == pytest.approx(0.25)


def test_summarize_metrics() -> None:
    summary = summarize_metrics(
        [0.0, 0.0, 0.1, 0.5],
        exact_matches=2,
        chunk_lengths=[10, 20, 30],
        total_runtime_sec=2.0,
        total_input_chars=100,
    )

    assert summary["case_count"] == 4.0
    assert summary["exact_match_rate"] == 0.5
    assert summary["cer_mean"] == 0.15
    assert summary["cer_p50"] == 0.05
    assert summary["cer_p95"] >= summary["cer_p50"]
    assert summary["chunk_length_mean"] == 20.0
    assert summary["chunk_length_max"] == 30.0
    assert summary["chars_per_sec"] == 50.0


def test_summarize_metrics_without_cases() -> None:
    summary = summarize_metrics(
        [], exact_matches=0, chunk_lengths=[], total_runtime_sec=0.0, total_input_chars=0
    )
    assert summary["exact_match_rate"] == 0.0
    assert summary["cer_mean"] == 0.0
    assert summary["chars_per_sec"] == 0.0
