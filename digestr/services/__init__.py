"""
Service layer for digestr.

- source: chunked, one-shot input sources
- router: algorithm resolution and streaming digest computation
- encoding: digest-to-text encodings
- logging: diagnostic logger implementations
"""

from .encoding import DEFAULT_ENCODING, Encoding, encode, encoding_names, parse_encoding
from .router import compute_digest, digest_input
from .source import DEFAULT_CHUNK_SIZE, ChunkedSource

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_ENCODING",
    "ChunkedSource",
    "Encoding",
    "compute_digest",
    "digest_input",
    "encode",
    "encoding_names",
    "parse_encoding",
]
