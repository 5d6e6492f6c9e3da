"""Evaluation utilities."""

from vispeak.eval.metrics import character_error_rate, edit_distance, summarize_metrics

__all__ = ["character_error_rate", "edit_distance", "summarize_metrics"]
