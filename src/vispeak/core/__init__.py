"""Core normalization pipeline."""

from vispeak.core.pipeline import NormalizationPipeline, NormalizationResult, StageTrace
from vispeak.core.service import build_pipeline, build_table_store, run_normalization

__all__ = [
    "NormalizationPipeline",
    "NormalizationResult",
    "StageTrace",
    "build_pipeline",
    "build_table_store",
    "run_normalization",
]
