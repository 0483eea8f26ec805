"""
Pydantic models for digestr configuration.
"""

from .config import (
    MAX_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    ConfigBaseModel,
    DigestConfig,
    EncodingName,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "MAX_CHUNK_SIZE",
    "MIN_CHUNK_SIZE",
    "ConfigBaseModel",
    "DigestConfig",
    "EncodingName",
    "LogLevel",
    "LoggingConfig",
]
