"""Where: src/discogs_api/config/settings.py
What: Derived runtime settings sourced from the loaded configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults stay compatible with the public Discogs endpoint.
Trade-offs: - Logging is reconfigured at import only when the config asks for it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from discogs_api.config.config import config as app_config
from discogs_api.platform.logging import DEFAULT_CONSOLE_LEVEL, setup_logger

# Endpoint identity ----------------------------------------------------------

BASE_URL: Final[str] = app_config.base_url

# Discogs rejects requests that carry no User-Agent.
USER_AGENT: Final[str] = app_config.user_agent

REQUEST_TIMEOUT: Final[float] = app_config.timeout

DEFAULT_HEADERS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
)


# Logging ---------------------------------------------------------------------

_log_file = app_config.resolved_log_file()
if _log_file is not None or app_config.console_level != DEFAULT_CONSOLE_LEVEL:
    _ = setup_logger(log_file=_log_file, console_level=app_config.console_level)


__all__ = [
    "BASE_URL",
    "DEFAULT_HEADERS",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
]
