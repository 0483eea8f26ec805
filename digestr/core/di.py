"""
Container lookups with a fallback.

Library entry points (compute_digest, load_settings, ...) run with or
without a bootstrapped container; they fetch collaborators through
resolve_or_default() and build a local default when nothing is registered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """
    Return the registered service for interface, else default_factory().

        logger = resolve_or_default(ILogger, NullLogger)
        registry = resolve_or_default(AlgorithmRegistry, default_registry)
    """
    from .container import get_container

    service = get_container().try_resolve(interface)
    return service if service is not None else default_factory()
