"""
Diagnostic logging contract.

Diagnostics are never part of a result: the digest or listing is written
by the output sink, while anything logged here goes to stderr or a log file
depending on configuration.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """%-style leveled logger, with the same call shape as logging.Logger."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold of every handler ('debug' ... 'error')."""
