"""Runtime configuration for the retriever."""

from __future__ import annotations

from functools import lru_cache
from typing import FrozenSet, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rag.contracts import GenerationConfig


class Settings(BaseSettings):
    """Application settings sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    docs_dir: str = Field(default="docs", validation_alias="RAG_DOCS_DIR")
    top_k: int = Field(default=3, ge=0, validation_alias="RAG_TOP_K")
    chunk_max_chars: Optional[int] = Field(default=None, gt=0, validation_alias="RAG_CHUNK_MAX_CHARS")
    stopwords: Optional[str] = Field(default=None, validation_alias="RAG_STOPWORDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    max_tokens: int = Field(default=1000, validation_alias="RAG_MAX_TOKENS")
    temperature: float = Field(default=0.7, validation_alias="RAG_TEMPERATURE")
    top_p: float = Field(default=0.9, validation_alias="RAG_TOP_P")
    repeat_penalty: float = Field(default=1.1, validation_alias="RAG_REPEAT_PENALTY")

    def stopword_set(self) -> Optional[FrozenSet[str]]:
        """Return the configured stoplist, or ``None`` for the built-in one."""

        if self.stopwords is None:
            return None
        return frozenset(word.strip().lower() for word in self.stopwords.split(",") if word.strip())

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
            repeat_penalty=self.repeat_penalty,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
