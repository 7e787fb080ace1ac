"""Environment-driven settings.

Override via environment variables (SVNACTION_<SETTING>).  Settings are read
once and cached; call ``reload_settings()`` after changing the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = ("1", "true", "yes", "on")

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    strict_registration: bool = False   # reject duplicate ids on register()
    log_level: str = DEFAULT_LOG_LEVEL


_settings: Settings | None = None


def load_settings() -> Settings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        strict = os.environ.get("SVNACTION_STRICT_REGISTRATION", "")
        _settings = Settings(
            strict_registration=strict.lower() in _TRUE_VALUES,
            log_level=os.environ.get("SVNACTION_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
    return _settings


def reload_settings() -> Settings:
    """Discard cached settings and re-read the environment."""
    global _settings
    _settings = None
    return load_settings()
