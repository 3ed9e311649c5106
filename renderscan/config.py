"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from renderscan.models.config import (
    BreadcrumbConfig,
    LogConfig,
    RenderScanConfig,
    TrackingConfig,
)
from renderscan.observability.logging import LOG_FORMATS


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"RENDERSCAN_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    raw = _env(key, str(default))
    try:
        val = int(raw)
    except ValueError as exc:
        raise ConfigError(f"RENDERSCAN_{key} must be an integer, got {raw!r}") from exc
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ConfigError(f"Invalid log format: {value}. Must be one of {LOG_FORMATS}")
    return value.lower()


def _validate_prefix(value: str) -> str:
    if not value.isidentifier():
        raise ConfigError(f"Invalid positional state prefix: {value!r}")
    return value


def load_config() -> RenderScanConfig:
    """Load configuration from RENDERSCAN_* environment variables."""
    return RenderScanConfig(
        tracking=TrackingConfig(
            max_traversal_nodes=_env_int("MAX_TRAVERSAL_NODES", 50000, min_val=1, max_val=1_000_000),
            positional_state_prefix=_validate_prefix(_env("POSITIONAL_STATE_PREFIX", "state")),
            track_initial_mount=_env_bool("TRACK_INITIAL_MOUNT", True),
        ),
        breadcrumb=BreadcrumbConfig(
            max_items=_env_int("BREADCRUMB_MAX_ITEMS", 4, min_val=2, max_val=32),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
