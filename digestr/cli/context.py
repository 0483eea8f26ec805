"""
Click context extension for the digestr CLI.

Provides the DigestrContext dataclass holding what a single invocation
needs: settings, logger and the algorithm registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.bootstrap import bootstrap
from ..core.interfaces.logger import ILogger
from ..core.settings import DigestrSettings, load_settings
from ..hashing.registry import AlgorithmRegistry


@dataclass
class DigestrContext:
    """Per-invocation state passed through the Click command.

    Attributes:
        settings: Merged configuration (TOML, environment, CLI overrides)
        logger: Diagnostic logger (stderr/file, never stdout)
        registry: Shared algorithm registry
        cwd: Working directory the configuration was resolved from
    """

    settings: DigestrSettings
    logger: ILogger
    registry: AlgorithmRegistry
    cwd: Path

    @classmethod
    def create(cls, verbose: bool = False, cwd: Path | None = None) -> DigestrContext:
        """Load settings, bootstrap the container and collect services.

        Args:
            verbose: Force debug-level logging to stderr
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured DigestrContext instance
        """
        if cwd is None:
            cwd = Path.cwd()

        overrides: dict[str, Any] = {}
        if verbose:
            overrides["logging"] = {"level": "debug", "console": True}

        settings = load_settings(start_dir=str(cwd), **overrides)
        container = bootstrap(settings)

        logger = container.resolve(ILogger)  # type: ignore[type-abstract]
        if settings.config_file:
            logger.debug("Loaded configuration from %s", settings.config_file)
        if settings.config_error:
            logger.warning("Ignoring configuration file: %s", settings.config_error)

        return cls(
            settings=settings,
            logger=logger,
            registry=container.resolve(AlgorithmRegistry),
            cwd=cwd,
        )
