"""
Hash algorithm registry.

Provides a read-only, ordered catalog of algorithms with exact-name
lookup. The catalog is fixed when the registry is built and never
mutated afterwards, so it can be shared without locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from ..core.exceptions import DuplicateAlgorithmError, UnknownAlgorithmError
from .catalog import ALGORITHMS, Algorithm, Family, Single
from .state import HashState
from .strategies import HashStrategy


class AlgorithmRegistry:
    """
    Immutable registry of hash algorithm strategies.

    Lookup targets are standalone algorithm names and family member
    names; family header names are reserved (no other entry may reuse
    them) but cannot be looked up.

    Example:
        registry = AlgorithmRegistry()

        state = registry.create_state("sha256")
        state.update(b"abc")
        digest = state.finalize()
    """

    def __init__(self, entries: Iterable[Algorithm] = ALGORITHMS):
        """
        Build the registry.

        Args:
            entries: Catalog entries in declaration order

        Raises:
            DuplicateAlgorithmError: If any name appears twice
        """
        self._entries: tuple[Algorithm, ...] = tuple(entries)

        index: dict[str, HashStrategy] = {}
        seen: set[str] = set()

        def claim(name: str) -> None:
            if name in seen:
                raise DuplicateAlgorithmError(name)
            seen.add(name)

        for entry in self._entries:
            if isinstance(entry, Single):
                claim(entry.name)
                index[entry.name] = entry.strategy
            elif isinstance(entry, Family):
                claim(entry.name)
                for member in entry.members:
                    claim(member.algorithm_name)
                    index[member.algorithm_name] = member
            else:
                raise TypeError(f"Unsupported catalog entry: {entry!r}")

        self._index = MappingProxyType(index)

    def lookup(self, name: str) -> HashStrategy:
        """
        Get the strategy for an algorithm name.

        Args:
            name: Exact, case-sensitive algorithm name (e.g., 'sha256')

        Returns:
            HashStrategy, which creates hash states via create_state()

        Raises:
            UnknownAlgorithmError: If name is not a single or family member
        """
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnknownAlgorithmError(str(name)) from None

    def create_state(self, name: str) -> HashState:
        """Create a fresh hash state for the named algorithm."""
        return self.lookup(name).create_state()

    @property
    def entries(self) -> tuple[Algorithm, ...]:
        """Catalog entries in declaration order."""
        return self._entries

    @property
    def names(self) -> list[str]:
        """Every lookup-able algorithm name, in declaration order."""
        return list(self._index.keys())

    @property
    def leaf_count(self) -> int:
        """Number of concrete algorithms; family headers don't count."""
        count = 0
        for entry in self._entries:
            if isinstance(entry, Single):
                count += 1
            elif isinstance(entry, Family):
                count += len(entry.members)
        return count

    def __contains__(self, name: object) -> bool:
        """Check if a name resolves to an algorithm."""
        return isinstance(name, str) and name in self._index

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._entries)

    def __len__(self) -> int:
        return self.leaf_count


@lru_cache(maxsize=1)
def default_registry() -> AlgorithmRegistry:
    """The process-wide registry built from the built-in catalog."""
    return AlgorithmRegistry(ALGORITHMS)
