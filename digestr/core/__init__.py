"""
Core infrastructure for digestr.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for hash states and logging
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigValidationError,
    DigestIOError,
    DigestrException,
    DuplicateAlgorithmError,
    HashStateFinalizedError,
    InvalidInvocationError,
    SourceConsumedError,
    UnknownAlgorithmError,
    UnknownEncodingError,
)

__all__ = [
    "ConfigValidationError",
    "DigestIOError",
    "DigestrException",
    "DuplicateAlgorithmError",
    "HashStateFinalizedError",
    "InvalidInvocationError",
    "ServiceContainer",
    "SourceConsumedError",
    "UnknownAlgorithmError",
    "UnknownEncodingError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
