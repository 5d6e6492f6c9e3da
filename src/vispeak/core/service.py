"""Request-level entry points shared by the CLI and the HTTP API."""

from __future__ import annotations

import time
from dataclasses import replace
from datetime import UTC, datetime

from vispeak.config import AppConfig
from vispeak.core.pipeline import NormalizationPipeline
from vispeak.models import NormalizeMetadata, NormalizeRequest, NormalizeResponse, StageTraceModel
from vispeak.tables import TableStore


def build_table_store(config: AppConfig) -> TableStore:
    """Create a table cache reading from the configured CSV paths."""
    return TableStore(config.replacements_path, config.acronyms_path)


def build_pipeline(config: AppConfig, store: TableStore | None = None) -> NormalizationPipeline:
    """Create a pipeline over the (possibly shared) tables of ``store``."""
    resolved = store or build_table_store(config)
    return NormalizationPipeline(tables=resolved.get(), options=config.pipeline_options())


def run_normalization(
    request: NormalizeRequest, pipeline: NormalizationPipeline
) -> NormalizeResponse:
    """Normalize and chunk the request text, producing the response schema."""
    options = pipeline.options
    if request.enable_transliteration is not None:
        options = replace(options, enable_transliteration=request.enable_transliteration)
    if request.debug is not None:
        options = replace(options, debug=request.debug)

    started = time.perf_counter()
    result = pipeline.run(request.text, options)
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 3)

    metadata = NormalizeMetadata(
        enable_transliteration=options.enable_transliteration,
        min_chunk_length=options.min_chunk_length,
        max_chunk_length=options.max_chunk_length,
        replacement_entries=len(pipeline.tables.replacements),
        acronym_entries=len(pipeline.tables.acronyms),
        input_characters=len(request.text),
        output_characters=len(result.normalized),
        chunk_count=len(result.chunks),
        generated_at=datetime.now(UTC),
        elapsed_ms=elapsed_ms,
    )
    traces = [
        StageTraceModel(stage=trace.stage, before=trace.before, after=trace.after)
        for trace in result.traces
    ]
    return NormalizeResponse(
        metadata=metadata,
        normalized=result.normalized,
        chunks=list(result.chunks),
        traces=traces,
    )
