"""Allow-list filter on the event type (Normal / Warning)."""

from __future__ import annotations

from collections.abc import Iterable

from kubefilter.filters.base import EventFilter
from kubefilter.models.events import Event
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.type")


class TypeFilter(EventFilter):
    """Accepts events whose type equals an allowed type, ignoring case."""

    def __init__(self, allowed_types: Iterable[str]) -> None:
        self.allowed_types: tuple[str, ...] = tuple(allowed_types)
        self._folded = frozenset(t.casefold() for t in self.allowed_types)
        _logger.debug("type_filter_built", allowed_types=list(self.allowed_types))

    def filter(self, event: Event) -> bool:
        return event.type.casefold() in self._folded

    def __repr__(self) -> str:
        return f"TypeFilter({list(self.allowed_types)!r})"
