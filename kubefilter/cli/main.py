"""Click commands for filtering Kubernetes events from the shell.

Filter criteria come from ``KUBEFILTER_*`` environment variables; the
``--type`` and ``--field-selector`` options replace them when given.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import IO, Any

import click

from kubefilter import __version__
from kubefilter.config import load_config
from kubefilter.filters import EventFilter, FilterConfigError, build_filter
from kubefilter.models.events import Event
from kubefilter.observability.logging import get_logger, setup_logging
from kubefilter.pipeline import select_events

_LOG_LEVELS = ["debug", "info", "warning", "error"]


def _filter_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--log-level",
        type=click.Choice(_LOG_LEVELS, case_sensitive=False),
        default=None,
        help="Log level (overrides KUBEFILTER_LOG_LEVEL).",
    )(func)
    func = click.option(
        "--field-selector",
        "-f",
        "field_selectors",
        multiple=True,
        metavar="FIELD:V1|V2",
        help="Keep events whose field holds one of the values. Repeatable; any selector may match.",
    )(func)
    func = click.option(
        "--type",
        "-t",
        "allowed_types",
        multiple=True,
        metavar="TYPE",
        help="Keep events of this type (case-insensitive). Repeatable.",
    )(func)
    return func


def _resolve_filter(
    allowed_types: tuple[str, ...],
    field_selectors: tuple[str, ...],
    log_level: str | None,
) -> EventFilter:
    try:
        config = load_config()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    if allowed_types:
        config.filters.allowed_types = list(allowed_types)
    if field_selectors:
        config.filters.field_selectors = list(field_selectors)

    if log_level:
        config.log.level = log_level.lower()
    setup_logging(config.log)
    try:
        return build_filter(config.filters)
    except FilterConfigError as exc:
        raise click.UsageError(str(exc)) from exc


def _read_events(source: IO[bytes]) -> Iterator[Event]:
    for lineno, raw in enumerate(source, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise click.ClickException(f"line {lineno}: invalid UTF-8: {exc.reason}") from exc
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"line {lineno}: invalid JSON: {exc.msg}") from exc
        if not isinstance(obj, dict):
            raise click.ClickException(f"line {lineno}: expected a JSON object, got {type(obj).__name__}")
        try:
            event = Event.from_dict(obj)
        except (TypeError, ValueError) as exc:
            raise click.ClickException(f"line {lineno}: invalid event: {exc}") from exc
        yield event


@click.group()
@click.version_option(__version__, prog_name="kubefilter")
def cli() -> None:
    """Filter Kubernetes events by type and field selectors."""


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@_filter_options
def match(
    source: IO[bytes],
    allowed_types: tuple[str, ...],
    field_selectors: tuple[str, ...],
    log_level: str | None,
) -> None:
    """Print the events from SOURCE (JSON lines, default stdin) that pass the filters."""
    event_filter = _resolve_filter(allowed_types, field_selectors, log_level)
    log = get_logger("cli")

    kept = 0
    for event in select_events(event_filter, _read_events(source)):
        click.echo(json.dumps(event.raw_object, separators=(",", ":")))
        kept += 1
    log.info("match_finished", kept=kept)


@cli.command()
@_filter_options
def validate(
    allowed_types: tuple[str, ...],
    field_selectors: tuple[str, ...],
    log_level: str | None,
) -> None:
    """Check that the configured filters can be built."""
    event_filter = _resolve_filter(allowed_types, field_selectors, log_level)
    click.echo(f"ok: {event_filter!r}")
