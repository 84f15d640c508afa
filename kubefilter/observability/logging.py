"""Structured logging configuration using structlog.

Logs always go to stderr: ``kubefilter match`` writes accepted events to
stdout and the two streams must not interleave.
"""

from __future__ import annotations

import logging
import sys

import structlog

from kubefilter.models.config import LogConfig


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(config: LogConfig | None = None) -> None:
    """Configure structlog from *config* (defaults to ``LogConfig()``)."""
    config = config or LogConfig()
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(config.format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # CliRunner swaps sys.stderr per invocation, so loggers are rebuilt on each use.
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
