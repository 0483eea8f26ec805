"""
Digest router.

Resolves an algorithm name through the registry, drains a chunked source
through a fresh hash state and returns the raw digest.
"""

from __future__ import annotations

import os

from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from ..hashing.registry import AlgorithmRegistry, default_registry
from ..hashing.strategies import HashStrategy
from .logging import NullLogger
from .source import DEFAULT_CHUNK_SIZE, ChunkedSource


def _get_logger() -> ILogger:
    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def _get_registry(registry: AlgorithmRegistry | None) -> AlgorithmRegistry:
    if registry is not None:
        return registry
    return resolve_or_default(AlgorithmRegistry, default_registry)


def compute_digest(
    source: ChunkedSource,
    algorithm_name: str,
    registry: AlgorithmRegistry | None = None,
) -> bytes:
    """
    Compute the digest of everything a source yields.

    The algorithm is resolved before the source is touched, so an unknown
    name never causes a read. The source is closed on every exit path.

    Args:
        source: Unconsumed chunked source (consumed by this call)
        algorithm_name: Exact algorithm name (e.g., 'sha256')
        registry: Registry to resolve against (defaults to the shared one)

    Returns:
        Raw digest bytes

    Raises:
        UnknownAlgorithmError: If the name is not registered
        DigestIOError: If reading the source fails
    """
    with source:
        strategy = _get_registry(registry).lookup(algorithm_name)
        return _drain(source, strategy)


def digest_input(
    value: str | os.PathLike[str],
    algorithm_name: str,
    *,
    from_file: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    registry: AlgorithmRegistry | None = None,
) -> bytes:
    """
    Digest a literal string or a file's contents.

    Unlike compute_digest(), this resolves the algorithm before the file
    is even opened.

    Args:
        value: Literal input, or a file path when from_file is set
        algorithm_name: Exact algorithm name
        from_file: Treat value as a path
        chunk_size: Read size for file input
        registry: Registry to resolve against (defaults to the shared one)

    Returns:
        Raw digest bytes
    """
    strategy = _get_registry(registry).lookup(algorithm_name)

    if from_file:
        source = ChunkedSource.from_file(value, chunk_size=chunk_size)
    else:
        source = ChunkedSource.from_string(os.fspath(value))

    with source:
        return _drain(source, strategy)


def _drain(source: ChunkedSource, strategy: HashStrategy) -> bytes:
    """Feed every buffer of source into a new state and finalize it."""
    logger = _get_logger()
    logger.debug(
        "Hashing %s source %s with %s",
        source.kind,
        source.label,
        strategy.algorithm_name,
    )

    state = strategy.create_state()
    chunks = 0
    for chunk in source:
        state.update(chunk)
        chunks += 1
    digest = state.finalize()

    logger.debug(
        "Digested %d bytes in %d chunk(s) with %s",
        source.bytes_read,
        chunks,
        strategy.algorithm_name,
    )
    return digest
