"""
Hash algorithm strategy implementations.

Each strategy encapsulates how one concrete algorithm is created, fed and
finalized, following the Strategy pattern so the router never needs to
know which library backs a given name.

Backends:
- hashlib: MD5, SHA-1, SHA-2, SHA-3, SHAKE, BLAKE2
- blake3: BLAKE3
- pycryptodome (Crypto.Hash): MD2, MD4, RIPEMD-160, Keccak, SHA-512/t
"""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import blake3
from Crypto.Hash import MD2 as _md2
from Crypto.Hash import MD4 as _md4
from Crypto.Hash import RIPEMD160 as _ripemd160
from Crypto.Hash import SHA512 as _sha512
from Crypto.Hash import keccak as _keccak

from .state import HashState


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - digest_size: Fixed digest length in bytes
    - create_hasher(): Factory method for hasher instances

    update() and digest() work for any hasher exposing the usual
    update(bytes) / digest() pair; override them otherwise.
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha256', 'keccak512')."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Return the digest length in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new backend hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def digest(self, hasher: Any) -> bytes:
        """Get raw digest from hasher. Default implementation works for most hashers."""
        return hasher.digest()

    def create_state(self) -> HashState:
        """Create a fresh incremental hash state for this algorithm."""
        return HashState(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm_name!r})"


class ConstructorStrategy(HashStrategy):
    """
    Strategy for any backend whose constructor takes no arguments.

    Covers hashlib constructors (hashlib.sha256) as well as
    pycryptodome ones (Crypto.Hash.MD4.new).
    """

    def __init__(self, name: str, constructor: Callable[[], Any], digest_size: int) -> None:
        self._name = name
        self._constructor = constructor
        self._digest_size = digest_size

    @property
    def algorithm_name(self) -> str:
        return self._name

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def create_hasher(self) -> Any:
        return self._constructor()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash."""

    @property
    def algorithm_name(self) -> str:
        return "blake3"

    @property
    def digest_size(self) -> int:
        return 32

    def create_hasher(self) -> Any:
        return blake3.blake3()


class ShakeStrategy(ConstructorStrategy):
    """
    SHAKE extendable-output function pinned to a fixed output length.

    hashlib's shake objects need the length at digest time, so digest()
    is overridden.
    """

    def digest(self, hasher: Any) -> bytes:
        return hasher.digest(self._digest_size)


class KeccakStrategy(HashStrategy):
    """Original Keccak (pre-FIPS 202 padding), as used by Ethereum."""

    def __init__(self, digest_bits: int) -> None:
        self._digest_bits = digest_bits

    @property
    def algorithm_name(self) -> str:
        return f"keccak{self._digest_bits}"

    @property
    def digest_size(self) -> int:
        return self._digest_bits // 8

    def create_hasher(self) -> Any:
        return _keccak.new(digest_bits=self._digest_bits)


class TruncatedSHA512Strategy(HashStrategy):
    """SHA-512/t: SHA-512 with its own IV, truncated to t bits."""

    def __init__(self, truncate: str) -> None:
        self._truncate = truncate

    @property
    def algorithm_name(self) -> str:
        return f"sha512_{self._truncate}"

    @property
    def digest_size(self) -> int:
        return int(self._truncate) // 8

    def create_hasher(self) -> Any:
        return _sha512.new(truncate=self._truncate)


# -----------------------------------------------------------------------------
# Concrete strategy instances used by the built-in catalog
# -----------------------------------------------------------------------------

BLAKE3 = Blake3Strategy()

BLAKE2B512 = ConstructorStrategy("blake2b512", hashlib.blake2b, 64)
BLAKE2S256 = ConstructorStrategy("blake2s256", hashlib.blake2s, 32)

KECCAK224 = KeccakStrategy(224)
KECCAK256 = KeccakStrategy(256)
KECCAK384 = KeccakStrategy(384)
KECCAK512 = KeccakStrategy(512)

MD2 = ConstructorStrategy("md2", _md2.new, 16)
MD4 = ConstructorStrategy("md4", _md4.new, 16)
MD5 = ConstructorStrategy("md5", hashlib.md5, 16)
RIPEMD160 = ConstructorStrategy("ripemd160", _ripemd160.new, 20)
SHA1 = ConstructorStrategy("sha1", hashlib.sha1, 20)

SHA224 = ConstructorStrategy("sha224", hashlib.sha224, 28)
SHA256 = ConstructorStrategy("sha256", hashlib.sha256, 32)
SHA384 = ConstructorStrategy("sha384", hashlib.sha384, 48)
SHA512 = ConstructorStrategy("sha512", hashlib.sha512, 64)
SHA512_224 = TruncatedSHA512Strategy("224")
SHA512_256 = TruncatedSHA512Strategy("256")

SHA3_224 = ConstructorStrategy("sha3_224", hashlib.sha3_224, 28)
SHA3_256 = ConstructorStrategy("sha3_256", hashlib.sha3_256, 32)
SHA3_384 = ConstructorStrategy("sha3_384", hashlib.sha3_384, 48)
SHA3_512 = ConstructorStrategy("sha3_512", hashlib.sha3_512, 64)

SHAKE128 = ShakeStrategy("shake128", hashlib.shake_128, 32)
SHAKE256 = ShakeStrategy("shake256", hashlib.shake_256, 64)
