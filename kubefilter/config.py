"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubefilter.models.config import FilterConfig, KubeFilterConfig, LogConfig


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEFILTER_{key}", default)


def _env_list(key: str) -> list[str]:
    # Only the list separator is trimmed; selector values are compared verbatim.
    return [item.strip() for item in _env(key).split(",") if item.strip()]


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> KubeFilterConfig:
    """Load configuration from KUBEFILTER_* environment variables."""
    return KubeFilterConfig(
        filters=FilterConfig(
            allowed_types=_env_list("ALLOWED_TYPES"),
            field_selectors=_env_list("FIELD_SELECTORS"),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
