"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class NormalizeRequest(BaseModel):
    """Normalization request payload used by both CLI and API.

    Unset switches fall back to the configured defaults.
    """

    text: str
    enable_transliteration: bool | None = None
    debug: bool | None = None


class StageTraceModel(BaseModel):
    """Text before and after one normalization stage."""

    stage: str = Field(min_length=1)
    before: str
    after: str


class NormalizeMetadata(BaseModel):
    """Metadata describing how a normalization was produced."""

    enable_transliteration: bool
    min_chunk_length: int = Field(ge=1)
    max_chunk_length: int = Field(ge=1)
    replacement_entries: int = Field(ge=0)
    acronym_entries: int = Field(ge=0)
    input_characters: int = Field(ge=0)
    output_characters: int = Field(ge=0)
    chunk_count: int = Field(ge=0)
    generated_at: datetime
    elapsed_ms: float = Field(ge=0.0)


class NormalizeResponse(BaseModel):
    """Canonical normalization output schema."""

    metadata: NormalizeMetadata
    normalized: str
    chunks: list[str]
    traces: list[StageTraceModel] = Field(default_factory=list)


class TablesResponse(BaseModel):
    """Entry counts of the loaded lookup tables."""

    replacements: int = Field(ge=0)
    acronyms: int = Field(ge=0)
