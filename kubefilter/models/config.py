"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FilterConfig:
    """Event filter configuration."""

    allowed_types: list[str] = field(default_factory=list)
    field_selectors: list[str] = field(default_factory=list)


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class KubeFilterConfig:
    """Top-level kubefilter configuration."""

    filters: FilterConfig = field(default_factory=FilterConfig)
    log: LogConfig = field(default_factory=LogConfig)
