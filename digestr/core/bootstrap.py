"""
Startup wiring for digestr.

Puts the diagnostic logger and the algorithm registry into the service
container. The CLI calls bootstrap() once per invocation, after settings
are loaded; library callers may skip it and get NullLogger and the
built-in registry through resolve_or_default().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

if TYPE_CHECKING:
    from .settings import DigestrSettings

_initialized = False


def bootstrap(settings: DigestrSettings | None = None) -> ServiceContainer:
    """
    Register digestr's shared services.

    Without settings, a second call returns the container untouched. With
    settings, the logger is rebuilt from settings.logging so a new
    configuration (e.g. --verbose) takes effect.

    Returns:
        The global ServiceContainer
    """
    global _initialized

    container = get_container()
    if settings is None:
        if _initialized:
            return container
        from .settings import load_settings

        settings = load_settings()

    _register_logger(container, settings)
    _register_registry(container)

    _initialized = True
    return container


def _register_logger(container: ServiceContainer, settings: DigestrSettings) -> None:
    from ..services.logging import DigestrLogger

    log_config = settings.logging
    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: DigestrLogger.from_config(log_config),
    )


def _register_registry(container: ServiceContainer) -> None:
    from ..hashing.registry import AlgorithmRegistry, default_registry

    # A registry injected earlier (tests, embedding code) is left alone
    if not container.is_registered(AlgorithmRegistry):
        container.register_singleton(AlgorithmRegistry, factory=default_registry)


def reset() -> None:
    """Drop the container and the initialized flag (used between tests)."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
