"""
Where: `common.settings`
What: typed snapshot of the project's environment variables, loaded at import time.
Why: one place for defaults and types instead of ad-hoc `os.getenv` calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Theme configuration
    THEME_CONFIG: str | None = None
    STRICT_CONFIG: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """Re-read every setting from the environment.

    - `SWG_LOG_LEVEL`: level name handed to `common.logging.setup_default_logging`
    - `SWG_THEME_CONFIG`: YAML file used by `swatch.config.load_theme_config()`
    - `SWG_STRICT_CONFIG`: reject unknown keys in theme configuration mappings
    """
    _settings.LOG_LEVEL = (env_str("SWG_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.THEME_CONFIG = env_str("SWG_THEME_CONFIG", None)
    _settings.STRICT_CONFIG = env_bool("SWG_STRICT_CONFIG", True)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
