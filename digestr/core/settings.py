"""
Pydantic Settings for digestr configuration.

Values come from, highest priority first: explicit overrides, DIGESTR_*
environment variables, a TOML file, model defaults. The TOML file is
.digestr.toml or the [tool.digestr] table of a pyproject.toml, whichever
is found first walking up from the working directory.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import DigestConfig, LoggingConfig

CONFIG_FILE_NAME = ".digestr.toml"
PYPROJECT_TABLE = "digestr"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _pyproject_table(path: Path) -> dict[str, Any] | None:
    """The [tool.digestr] table of a pyproject.toml, or None if absent/unreadable."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        _get_logger().debug("Skipping %s: %s", path, e)
        return None
    table = data.get("tool", {}).get(PYPROJECT_TABLE)
    return table if isinstance(table, dict) else None


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find the nearest digestr config by walking up from start_dir (or cwd).

    In each directory .digestr.toml is preferred over a pyproject.toml that
    has a [tool.digestr] table.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _pyproject_table(pyproject) is not None:
            return pyproject

    return None


@dataclass
class ConfigFile:
    """Result of reading one TOML config file."""

    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @classmethod
    def load(cls, config_path: Path | None = None, start_dir: str | None = None) -> ConfigFile:
        """
        Read config_path, or the file find_config_file() locates.

        A file that cannot be read or parsed yields empty data plus an
        error message instead of raising.
        """
        path = config_path if config_path is not None else find_config_file(start_dir)
        if path is None:
            return cls()

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            return cls(error=f"Failed to parse config file {path}: {e}")
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            return cls(error=f"Failed to read config file {path}: {e}")

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get(PYPROJECT_TABLE, {})
        return cls(path=path, data=data)


# The file being applied by the current load_settings() call
_active_config: ContextVar[ConfigFile | None] = ContextVar("digestr_active_config", default=None)


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source serving the tables of an already-read ConfigFile."""

    def __init__(self, settings_cls: type[BaseSettings], config: ConfigFile | None):
        super().__init__(settings_cls)
        self._data = config.data if config is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: self._data[name] for name in self.settings_cls.model_fields if name in self._data
        }


class DigestrSettings(BaseSettings):
    """digestr configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DIGESTR_<section>__<field>)
    3. TOML config file (.digestr.toml or pyproject.toml [tool.digestr])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DIGESTR_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    digest: DigestConfig = DigestConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSource(settings_cls, _active_config.get()),
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the TOML file could not be used, if it could not."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "digest": self.digest.model_dump(),
            "logging": self.logging.model_dump(mode="json"),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> DigestrSettings:
    """Load digestr settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values, highest priority

    Returns:
        DigestrSettings instance with all sources merged

    Raises:
        ConfigValidationError: If any source holds an invalid value
    """
    config = ConfigFile.load(config_path, start_dir)
    config_file = str(config.path) if config.path is not None else None

    token = _active_config.set(config)
    try:
        settings = DigestrSettings(**overrides)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid digestr configuration: {e.error_count()} error(s)\n{e}",
            config_file=config_file,
            cause=e,
        ) from e
    finally:
        _active_config.reset(token)

    settings._config_file = config_file
    settings._config_error = config.error
    return settings
