"""
Service container for digestr.

A thin lookup table from interface type to a dependency-injector provider.
digestr only holds process-wide services here (the diagnostic logger and
the algorithm registry), so every registration is a singleton.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Process-wide registry of shared services, keyed by interface type."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget every registration (tests, re-bootstrap)."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Bind interface to one shared instance.

        Pass either a ready instance or a zero-argument factory; a factory
        runs on first resolve and its result is reused afterwards.
        Registering an interface again replaces the earlier binding.
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")
        self._providers[interface] = provider

    def is_registered(self, interface: type) -> bool:
        return interface in self._providers

    def resolve(self, interface: type[T]) -> T:
        """
        Return the service bound to interface.

        Raises:
            KeyError: If bootstrap() never registered it
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No service registered for {interface.__name__}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Like resolve(), but None when nothing is registered."""
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
