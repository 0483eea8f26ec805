"""
Algorithm catalog entries and the built-in catalog.

An entry is either a Single algorithm or a Family grouping related
variants (e.g. the SHA-2 output sizes). Declaration order here is the
order used for listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from . import strategies
from .strategies import HashStrategy


@dataclass(frozen=True)
class Single:
    """A standalone algorithm."""

    strategy: HashStrategy

    @property
    def name(self) -> str:
        return self.strategy.algorithm_name


@dataclass(frozen=True)
class Family:
    """A named group of algorithms; the group name itself is not hashable."""

    name: str
    members: tuple[HashStrategy, ...]

    def __post_init__(self) -> None:
        if not self.members:
            raise ValueError(f"Algorithm family {self.name!r} has no members")

    @property
    def member_names(self) -> tuple[str, ...]:
        return tuple(member.algorithm_name for member in self.members)


Algorithm = Union[Single, Family]


ALGORITHMS: tuple[Algorithm, ...] = (
    Single(strategies.BLAKE3),
    Family("blake2", (strategies.BLAKE2B512, strategies.BLAKE2S256)),
    Family(
        "keccak",
        (
            strategies.KECCAK224,
            strategies.KECCAK256,
            strategies.KECCAK384,
            strategies.KECCAK512,
        ),
    ),
    Single(strategies.MD2),
    Single(strategies.MD4),
    Single(strategies.MD5),
    Single(strategies.RIPEMD160),
    Single(strategies.SHA1),
    Family(
        "sha2",
        (
            strategies.SHA224,
            strategies.SHA256,
            strategies.SHA384,
            strategies.SHA512,
            strategies.SHA512_224,
            strategies.SHA512_256,
        ),
    ),
    Family(
        "sha3",
        (
            strategies.SHA3_224,
            strategies.SHA3_256,
            strategies.SHA3_384,
            strategies.SHA3_512,
        ),
    ),
    Family("shake", (strategies.SHAKE128, strategies.SHAKE256)),
)
