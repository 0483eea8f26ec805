"""
Hash algorithm strategies, states and registry.

This module implements the Strategy pattern for hash algorithms, so new
algorithms plug in without touching the digest router.
"""

from .catalog import ALGORITHMS, Algorithm, Family, Single
from .registry import AlgorithmRegistry, default_registry
from .state import HashState
from .strategies import (
    Blake3Strategy,
    ConstructorStrategy,
    HashStrategy,
    KeccakStrategy,
    ShakeStrategy,
    TruncatedSHA512Strategy,
)

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmRegistry",
    "Blake3Strategy",
    "ConstructorStrategy",
    "Family",
    "HashState",
    "HashStrategy",
    "KeccakStrategy",
    "ShakeStrategy",
    "Single",
    "TruncatedSHA512Strategy",
    "default_registry",
]
