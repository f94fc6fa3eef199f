"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers the optional configuration
file and where file logging should go when enabled.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/discogs_api.toml`` unless
  overridden by ``DISCOGS_API_CONFIG``.
- Logs: ``<repo_root>/logs/discogs_api.log`` unless overridden by
  ``DISCOGS_API_LOG_FILE``; used only when file logging is requested
  without an explicit path.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "DISCOGS_API_CONFIG"
LOG_FILE_ENV_VAR: Final[str] = "DISCOGS_API_LOG_FILE"

_REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _normalize(path: Path | str) -> Path:
    return Path(path).expanduser().resolve()


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first configured location: explicit, then environment, then default.

    Blank environment values count as unset.
    """
    if explicit_path is not None:
        return _normalize(explicit_path)

    if env_var:
        source = os.environ if env is None else env
        from_env = (source.get(env_var) or "").strip()
        if from_env:
            return _normalize(from_env)

    return _normalize(default_factory())


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding a repository marker.

    Args:
        start: File whose parents are searched. Defaults to this module.

    Returns:
        Path: Directory containing ``pyproject.toml`` or ``.git``, else the
        current working directory.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _REPO_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Portable config location ``<repo_root>/config/discogs_api.toml``."""

    return (_detect_repo_root() / "config" / "discogs_api.toml").resolve()


def resolve_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the config file location after explicit and env overrides."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=default_config_path,
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Log file used when file logging is enabled without an explicit path."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=LOG_FILE_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "logs" / "discogs_api.log",
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_FILE_ENV_VAR",
    "default_config_path",
    "default_log_file",
    "resolve_config_path",
    "resolve_overridable_path",
]
