"""
Diagnostic loggers for digestr.

stdout belongs to the digest or listing result, so diagnostics only ever
go to stderr and/or a rotating log file.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig


class DigestrLogger(ILogger):
    """
    ILogger backed by the stdlib "digestr" logger.

    Building a DigestrLogger replaces whatever handlers an earlier instance
    attached, so the most recent configuration always wins.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        level: str = "warning",
        console: bool = False,
        log_file: Path | None = None,
        name: str = "digestr",
    ) -> None:
        """
        Args:
            level: Threshold for every handler (debug, info, warning, error)
            console: Write records to stderr
            log_file: Also append records to this rotating file
            name: stdlib logger name
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for stale in list(self._logger.handlers):
            self._logger.removeHandler(stale)
            stale.close()

        self._handlers: list[logging.Handler] = []
        self._formatter = logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        threshold = self._to_level(level)

        if console:
            self._attach(logging.StreamHandler(sys.stderr), threshold)
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            rotating = RotatingFileHandler(
                log_file,
                maxBytes=self.MAX_FILE_SIZE,
                backupCount=self.BACKUP_COUNT,
                encoding="utf-8",
            )
            self._attach(rotating, threshold)
        if not self._handlers:
            # Keeps records away from logging.lastResort
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def from_config(cls, config: LoggingConfig) -> DigestrLogger:
        """Build a logger from the [logging] settings section."""
        return cls(
            level=config.level,
            console=config.console,
            log_file=config.file_path if config.file else None,
        )

    @classmethod
    def _to_level(cls, name: str) -> int:
        return cls.LEVEL_MAP.get(name.lower(), logging.WARNING)

    def _attach(self, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        handler.setFormatter(self._formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @property
    def handlers(self) -> tuple[logging.Handler, ...]:
        return tuple(self._handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        threshold = self._to_level(level)
        for handler in self._handlers:
            handler.setLevel(threshold)


class NullLogger(ILogger):
    """Discards everything; used whenever the container has no logger."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
