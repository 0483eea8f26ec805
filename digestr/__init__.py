"""
digestr - streaming digests of strings and files.

Library entry points:

    from digestr import ChunkedSource, compute_digest, encode, Encoding

    with ChunkedSource.from_file("data.bin") as source:
        print(encode(compute_digest(source, "sha256"), Encoding.HEX))
"""

from .core.exceptions import (
    DigestIOError,
    DigestrException,
    InvalidInvocationError,
    UnknownAlgorithmError,
    UnknownEncodingError,
)
from .hashing import AlgorithmRegistry, Family, Single, default_registry
from .services import (
    ChunkedSource,
    Encoding,
    compute_digest,
    digest_input,
    encode,
    parse_encoding,
)

__all__ = [
    "AlgorithmRegistry",
    "ChunkedSource",
    "DigestIOError",
    "DigestrException",
    "Encoding",
    "Family",
    "InvalidInvocationError",
    "Single",
    "UnknownAlgorithmError",
    "UnknownEncodingError",
    "compute_digest",
    "default_registry",
    "digest_input",
    "encode",
    "parse_encoding",
]
