"""Centralized configuration for little-search using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every variable is prefixed with ``LITTLE_SEARCH_`` (for example
    ``LITTLE_SEARCH_DOCS_ROOT``). Relative list files are resolved against
    ``docs_root`` so a corpus directory can be moved as a unit.
    """

    model_config = SettingsConfigDict(
        env_prefix="LITTLE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    docs_root: Path = Field(default=Path("."), description="Directory document identifiers are resolved against")
    docs_file: Path = Field(default=Path("docs.txt"), description="File listing document identifiers, in index order")
    noise_words_file: Path = Field(default=Path("noisewords.txt"), description="File listing noise (stop) words")
    encoding: str = Field(default="utf-8", description="Text encoding of documents and list files")

    # Logging
    log_level: LogLevel = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _check_encoding(self) -> "Settings":
        if not self.encoding.strip():
            raise ValueError("LITTLE_SEARCH_ENCODING must not be empty")
        return self

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.docs_root / path

    def resolve_docs_file(self) -> Path:
        """Return the document list path, anchored at ``docs_root`` when relative."""
        return self._resolve(self.docs_file)

    def resolve_noise_words_file(self) -> Path:
        """Return the noise-word list path, anchored at ``docs_root`` when relative."""
        return self._resolve(self.noise_words_file)
