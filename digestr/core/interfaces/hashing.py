"""
Incremental hash capability.

Anything that accepts input in successive pieces and produces a fixed-size
digest once, on demand, satisfies this interface. The router only ever
talks to hash states through it.
"""

from abc import ABC, abstractmethod


class IIncrementalHash(ABC):
    """Update-then-finalize hashing capability."""

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Name of the algorithm backing this state."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Size in bytes of the digest returned by finalize()."""
        pass

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed the next buffer of input."""
        pass

    @abstractmethod
    def finalize(self) -> bytes:
        """
        Return the raw digest.

        Terminal: the state accepts no further updates afterwards.
        """
        pass
