"""Pydantic contracts shared across the retrieval package."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """Stored passage paired with its TF-IDF embedding."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    embedding: List[float] = Field(default_factory=list)


class ScoredDocument(BaseModel):
    """Search hit with its cosine similarity to the query."""

    model_config = ConfigDict(frozen=True)

    document: Document
    score: float

    @property
    def content(self) -> str:
        return self.document.content


class GenerationConfig(BaseModel):
    """Sampling parameters handed to the external generation engine."""

    max_tokens: int = 1000
    temperature: float = 0.7
    top_p: float = 0.9
    repeat_penalty: float = 1.1

    @field_validator("max_tokens")
    @classmethod
    def validate_max_tokens(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max_tokens must be positive")
        return value

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        if value < 0:
            raise ValueError("temperature must not be negative")
        return value

    @field_validator("top_p")
    @classmethod
    def validate_top_p(cls, value: float) -> float:
        if not 0 < value <= 1:
            raise ValueError("top_p must be in (0, 1]")
        return value

    @field_validator("repeat_penalty")
    @classmethod
    def validate_repeat_penalty(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("repeat_penalty must be positive")
        return value


class IngestionFailure(BaseModel):
    """A passage that could not be ingested."""

    source: str
    error: str


class IngestionReport(BaseModel):
    """Outcome of a batch ingestion."""

    document_ids: List[str] = Field(default_factory=list)
    failures: List[IngestionFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
