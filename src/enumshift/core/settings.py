"""Runtime settings for enumshift.

Only a handful of knobs exist: how deprecated primitive arguments are
reported, and how logs are rendered. Everything is read from ``ENUMSHIFT_*``
environment variables or a ``.env`` file.

Examples:
    >>> import os
    >>> os.environ["ENUMSHIFT_DEPRECATION_ACTION"] = "error"
    >>> get_settings(_force_reload=True).deprecation_action
    <DeprecationAction.ERROR: 'error'>

Tags:
    settings, configuration, pydantic, environment, enumshift

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from enumshift.core.errors import ConfigError


class DeprecationAction(str, Enum):
    """What happens when a deprecated primitive reaches a call site."""

    WARN = "warn"  # DeprecationWarning + log
    LOG = "log"  # log only
    IGNORE = "ignore"
    ERROR = "error"  # raise DeprecatedUsageError


class LogFormat(str, Enum):
    """Log renderer selection."""

    AUTO = "auto"
    JSON = "json"
    CONSOLE = "console"


class EnumshiftSettings(BaseSettings):
    """enumshift configuration.

    All fields can be set via ``ENUMSHIFT_*`` environment variables (e.g.
    ``ENUMSHIFT_DEPRECATION_ACTION=error``) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENUMSHIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Call sites ───────────────────────────────────────────────
    deprecation_action: DeprecationAction = Field(default=DeprecationAction.WARN)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_format: LogFormat = Field(default=LogFormat.AUTO)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def json_logs(self) -> bool | None:
        """Tri-state flag for ``configure_logging(json_format=...)``."""
        if self.log_format == LogFormat.AUTO:
            return None
        return self.log_format == LogFormat.JSON


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, EnumshiftSettings] = {}


def get_settings(*, _force_reload: bool = False) -> EnumshiftSettings:
    """Load, validate, and cache an :class:`EnumshiftSettings` instance.

    _force_reload:
        Bypass cache and re-read the environment.

    Raises:
        ConfigError: the environment holds an invalid value
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = EnumshiftSettings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid ENUMSHIFT_* settings: {problems}", cause=e) from e
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "DeprecationAction",
    "LogFormat",
    "EnumshiftSettings",
    "get_settings",
    "clear_settings_cache",
]
