"""
Incremental hash state.

Binds a strategy to one backend hasher and enforces the update/finalize
lifecycle: any number of updates, then exactly one finalize.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.exceptions import HashStateFinalizedError
from ..core.interfaces.hashing import IIncrementalHash

if TYPE_CHECKING:
    from .strategies import HashStrategy


class HashState(IIncrementalHash):
    """One in-progress digest computation."""

    def __init__(self, strategy: HashStrategy) -> None:
        self._strategy = strategy
        self._hasher = strategy.create_hasher()
        self._finalized = False

    @property
    def algorithm_name(self) -> str:
        return self._strategy.algorithm_name

    @property
    def digest_size(self) -> int:
        return self._strategy.digest_size

    @property
    def finalized(self) -> bool:
        return self._finalized

    def update(self, data: bytes) -> None:
        if self._finalized:
            raise HashStateFinalizedError(self.algorithm_name)
        self._strategy.update(self._hasher, data)

    def finalize(self) -> bytes:
        if self._finalized:
            raise HashStateFinalizedError(self.algorithm_name)
        self._finalized = True
        digest = self._strategy.digest(self._hasher)
        # Drop the backend object; nothing may touch it again
        self._hasher = None
        return bytes(digest)
