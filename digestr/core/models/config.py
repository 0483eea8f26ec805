"""
Configuration models.

Provides Pydantic models for the [digest] and [logging] settings sections.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Type aliases
EncodingName = Literal["hex", "base32", "base64"]
LogLevel = Literal["debug", "info", "warning", "error"]

MIN_CHUNK_SIZE = 1024
MAX_CHUNK_SIZE = 64 * 1024 * 1024


class ConfigBaseModel(BaseModel):
    """Shared config for settings sections: coerce TOML/env values, ignore unknown keys."""

    model_config = ConfigDict(
        strict=False,  # TOML and env values arrive as str/int/bool
        validate_assignment=True,
        extra="ignore",
    )


class DigestConfig(ConfigBaseModel):
    """Digest computation configuration section."""

    encoding: EncodingName = "hex"
    chunk_size: Annotated[int, Field(ge=MIN_CHUNK_SIZE, le=MAX_CHUNK_SIZE)] = 64 * 1024


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section. Both outputs are off by default."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    file_path: Path = Field(default_factory=lambda: Path.home() / ".digestr" / "digestr.log")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept 'DEBUG', 'Info', etc. from environment variables."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("file_path", mode="before")
    @classmethod
    def expand_user(cls, v: object) -> object:
        if isinstance(v, (str, Path)):
            return Path(v).expanduser()
        return v
