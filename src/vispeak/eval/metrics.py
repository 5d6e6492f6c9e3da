"""Benchmark metric helpers for normalization quality and runtime."""

from __future__ import annotations

from statistics import mean


def edit_distance(predicted: str, reference: str) -> int:
    """Levenshtein distance between two strings, counted in characters."""
    if predicted == reference:
        return 0
    if not predicted:
        return len(reference)
    if not reference:
        return len(predicted)

    previous = list(range(len(reference) + 1))
    for row, pred_char in enumerate(predicted, start=1):
        current = [row]
        for col, ref_char in enumerate(reference, start=1):
            current.append(
                min(
                    previous[col] + 1,
                    current[col - 1] + 1,
                    previous[col - 1] + (pred_char != ref_char),
                )
            )
        previous = current
    return previous[-1]


def character_error_rate(predicted: str, reference: str) -> float:
    """Edit distance divided by reference length; 0.0 when both are empty."""
    if not reference:
        return 0.0 if not predicted else 1.0
    return edit_distance(predicted, reference) / len(reference)


def summarize_metrics(
    error_rates: list[float],
    *,
    exact_matches: int,
    chunk_lengths: list[int],
    total_runtime_sec: float,
    total_input_chars: int,
) -> dict[str, float]:
    """Summarize benchmark metrics for release-gate reporting."""
    case_count = len(error_rates)
    exact_rate = exact_matches / case_count if case_count > 0 else 0.0
    chars_per_sec = total_input_chars / total_runtime_sec if total_runtime_sec > 0 else 0.0

    return {
        "case_count": float(case_count),
        "exact_match_rate": round(exact_rate, 4),
        "cer_mean": round(mean(error_rates), 4) if error_rates else 0.0,
        "cer_p50": round(_percentile(error_rates, 50.0), 4),
        "cer_p95": round(_percentile(error_rates, 95.0), 4),
        "chunk_count": float(len(chunk_lengths)),
        "chunk_length_mean": round(mean(chunk_lengths), 3) if chunk_lengths else 0.0,
        "chunk_length_max": float(max(chunk_lengths, default=0)),
        "total_runtime_sec": round(total_runtime_sec, 4),
        "total_input_chars": float(total_input_chars),
        "chars_per_sec": round(chars_per_sec, 2),
    }


def _percentile(values: list[float], pct: float) -> float:
    if not values:
        return 0.0
    sorted_vals = sorted(values)
    if len(sorted_vals) == 1:
        return sorted_vals[0]

    rank = (pct / 100.0) * (len(sorted_vals) - 1)
    lower = int(rank)
    upper = min(lower + 1, len(sorted_vals) - 1)
    weight = rank - lower
    return sorted_vals[lower] * (1.0 - weight) + sorted_vals[upper] * weight
