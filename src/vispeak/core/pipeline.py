"""Normalization pipeline: raw text in, speakable chunks out.

Stages run in a fixed order. Unicode and symbol cleanup come first, then
the numeric converters. The text is lowercased for dictionary matching,
foreign words are replaced or transliterated, acronyms are expanded, and the
result is cut into chunks. Tables are passed in, so independent pipelines
can share them or not.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from vispeak.config import PipelineOptions
from vispeak.tables import EMPTY_TABLES, Tables
from vispeak.text.chunker import chunk_text
from vispeak.text.detector import DEFAULT_DETECTOR, VietnameseWordDetector
from vispeak.text.numeric import NUMERIC_STAGES
from vispeak.text.replacement import Segment
from vispeak.text.symbols import clean_whitespace, normalize_unicode, strip_symbols
from vispeak.text.transliteration import transliterate_text

logger = structlog.get_logger(__name__)

Stage = Callable[[str], str]

PREPARATION_STAGES: tuple[tuple[str, Stage], ...] = (
    ("unicode", normalize_unicode),
    ("symbols", strip_symbols),
    ("whitespace", clean_whitespace),
    *NUMERIC_STAGES,
    ("lowercase", str.lower),
)


@dataclass(frozen=True)
class StageTrace:
    """Text before and after one stage, recorded in debug mode."""

    stage: str
    before: str
    after: str

    @property
    def changed(self) -> bool:
        return self.before != self.after


@dataclass(frozen=True)
class NormalizationResult:
    """Output of one pipeline run."""

    original: str
    normalized: str
    chunks: tuple[str, ...]
    traces: tuple[StageTrace, ...] = ()


class NormalizationPipeline:
    """Turn free-form Vietnamese text into normalized, length-bounded chunks."""

    def __init__(
        self,
        tables: Tables = EMPTY_TABLES,
        options: PipelineOptions | None = None,
        detector: VietnameseWordDetector = DEFAULT_DETECTOR,
    ) -> None:
        self.tables = tables
        self.options = options or PipelineOptions()
        self.detector = detector

    def run(self, text: object, options: PipelineOptions | None = None) -> NormalizationResult:
        """Normalize ``text`` and chunk it.

        Anything other than a non-blank string produces an empty result.
        """
        resolved = options or self.options
        if not isinstance(text, str) or not text.strip():
            return NormalizationResult(
                original=text if isinstance(text, str) else "", normalized="", chunks=()
            )

        traces: list[StageTrace] = []

        def step(name: str, before: str, after: str) -> str:
            if resolved.debug:
                traces.append(StageTrace(stage=name, before=before, after=after))
                logger.debug("normalization_stage", stage=name, before=before, after=after)
            return after

        current = text
        for name, stage in PREPARATION_STAGES:
            current = step(name, current, stage(current))

        segments = self.tables.replacements.split(current)
        current = step("word_replacement", current, "".join(s.text for s in segments))
        if resolved.enable_transliteration:
            current = step("transliteration", current, self._transliterate(segments))
        current = step("acronyms", current, self.tables.acronyms.apply(current))
        current = step("final_whitespace", current, clean_whitespace(current))

        chunks = chunk_text(current, resolved.min_chunk_length, resolved.max_chunk_length)
        return NormalizationResult(
            original=text,
            normalized=current,
            chunks=tuple(chunks),
            traces=tuple(traces),
        )

    def normalize(self, text: object) -> str:
        """Return only the normalized text."""
        return self.run(text).normalized

    def chunks(self, text: object) -> list[str]:
        """Return only the chunk sequence."""
        return list(self.run(text).chunks)

    def _transliterate(self, segments: list[Segment]) -> str:
        # Table replacements stay as chosen; acronym keys are left for the acronym stage.
        parts: list[str] = []
        for segment in segments:
            if segment.replaced:
                parts.append(segment.text)
                continue
            for piece in self.tables.acronyms.split(segment.text):
                if piece.replaced:
                    parts.append(piece.original)
                else:
                    parts.append(transliterate_text(piece.text, self.detector))
        return "".join(parts)
