"""
Interface definitions for digestr's pluggable pieces.

These define the contracts that implementations must follow, keeping the
digest router decoupled from concrete hash algorithms and log backends.
"""

from .hashing import IIncrementalHash
from .logger import ILogger

__all__ = [
    "IIncrementalHash",
    "ILogger",
]
