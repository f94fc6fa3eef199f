"""Configuration management for the Discogs API client."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from discogs_api.config.paths import default_log_file, resolve_config_path
from discogs_api.platform.logging import logger

DEFAULT_BASE_URL: Final[str] = "https://api.discogs.com/"
DEFAULT_USER_AGENT: Final[str] = "DiscogsApiPython/0.4 (+https://github.com/discogs-api/python)"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Client configuration."""

    # API root every operation URI is resolved against
    base_url: str = DEFAULT_BASE_URL

    # Sent on every request; Discogs rejects anonymous agents
    user_agent: str = DEFAULT_USER_AGENT

    # Handed to the transport, the dispatcher imposes none of its own
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Logging
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_logging: bool = False
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate simple boundaries."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigValidationError("base_url must be a non-empty string")
        if not self.base_url.endswith("/"):
            self.base_url = self.base_url + "/"

        if not isinstance(self.user_agent, str) or not self.user_agent.strip():
            raise ConfigValidationError("user_agent must be a non-empty string")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigValidationError("timeout must be a number of seconds")
        if self.timeout <= 0:
            raise ConfigValidationError("timeout must be positive")
        self.timeout = float(self.timeout)

        level = str(self.console_log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigValidationError(
                f"console_log_level must be one of {sorted(_LOG_LEVELS)}"
            )
        self.console_log_level = level

    @property
    def console_level(self) -> int:
        """Numeric logging level for the console handler."""

        return logging.getLevelName(self.console_log_level)

    def resolved_log_file(self) -> Path | None:
        """Return the log file to write, or None when file logging is off."""

        if self.log_file is not None:
            return self.log_file
        if self.file_logging:
            return default_log_file()
        return None

    @classmethod
    def from_mapping(cls, document: Mapping[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML document."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(key for key in document if key not in known)
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(document))

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from file.

        Without explicit arguments the result is cached for the process.
        A missing file yields the defaults; the library never writes it.

        Args:
            path: Optional explicit config file location.
            env: Optional environment mapping consulted for ``DISCOGS_API_CONFIG``.

        Returns:
            Config: Loaded configuration object.
        """
        use_cache = path is None and env is None
        if use_cache and cls._instance is not None:
            return cls._instance

        config_file = resolve_config_path(explicit_path=path, env=env)

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    document = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigParseError(f"Invalid TOML in config file: {config_file}") from exc
            except OSError as exc:  # pragma: no cover - rare filesystem failure
                raise ConfigError(f"Failed to read config file: {config_file}") from exc

            try:
                instance = cls.from_mapping(document)
            except TypeError as exc:
                raise ConfigValidationError(str(exc)) from exc
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            logger.debug("No configuration at %s, using defaults", config_file)

        if use_cache:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


config: Config = Config.load()


__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "config",
]
