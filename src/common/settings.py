"""
Where: `common.settings`
What: typed, centrally managed environment settings loaded at import time.
Why: one place for defaults and types instead of ad-hoc `os.getenv` calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"

    # Theme configuration file used when none is passed explicitly
    CONFIG_PATH: str | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """Reload settings from the environment.

    - PALETTE_PLUS_LOG_LEVEL: logging level name used by the CLI
    - PALETTE_PLUS_CONFIG: default YAML theme config path
    """
    _settings.LOG_LEVEL = (env_str("PALETTE_PLUS_LOG_LEVEL", "WARNING") or "WARNING").upper()
    _settings.CONFIG_PATH = env_str("PALETTE_PLUS_CONFIG")


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
