"""Apply an event filter to a stream of events."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kubefilter.filters.base import EventFilter
from kubefilter.models.events import Event
from kubefilter.observability.logging import get_logger
from kubefilter.observability.metrics import events_filtered_total

_logger = get_logger("pipeline")


def select_events(event_filter: EventFilter, events: Iterable[Event]) -> Iterator[Event]:
    """Lazily yield the events accepted by *event_filter*."""
    for event in events:
        accepted = event_filter.filter(event)
        events_filtered_total.labels(result="accepted" if accepted else "rejected").inc()
        _logger.debug(
            "event_filtered",
            accepted=accepted,
            type=event.type,
            reason=event.reason,
            kind=event.involved_object.kind,
            namespace=event.involved_object.namespace,
            name=event.involved_object.name,
        )
        if accepted:
            yield event
