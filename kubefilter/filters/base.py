"""Filter contract and combinators.

EventFilter -- ABC every filter variant implements.
AllOf / AnyOf / Not -- combine filters without touching their internals.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from kubefilter.models.events import Event


class FilterConfigError(ValueError):
    """Raised when a filter cannot be built from its configuration."""

    def __init__(self, message: str, spec: str = "") -> None:
        super().__init__(message)
        self.spec = spec


class EventFilter(ABC):
    """A pure accept/reject predicate over events.

    Implementations must be immutable after construction so a single
    instance can be shared between threads without locking.
    """

    @abstractmethod
    def filter(self, event: Event) -> bool:
        """Return True if *event* should be kept."""

    def __call__(self, event: Event) -> bool:
        return self.filter(event)


class AllOf(EventFilter):
    """Accepts an event only if every child filter accepts it.

    An empty AllOf accepts everything.
    """

    def __init__(self, filters: Iterable[EventFilter]) -> None:
        self.filters: tuple[EventFilter, ...] = tuple(filters)

    def filter(self, event: Event) -> bool:
        return all(f.filter(event) for f in self.filters)

    def __repr__(self) -> str:
        return f"AllOf({list(self.filters)!r})"


class AnyOf(EventFilter):
    """Accepts an event if at least one child filter accepts it."""

    def __init__(self, filters: Iterable[EventFilter]) -> None:
        self.filters: tuple[EventFilter, ...] = tuple(filters)

    def filter(self, event: Event) -> bool:
        return any(f.filter(event) for f in self.filters)

    def __repr__(self) -> str:
        return f"AnyOf({list(self.filters)!r})"


class Not(EventFilter):
    def __init__(self, inner: EventFilter) -> None:
        self.inner = inner

    def filter(self, event: Event) -> bool:
        return not self.inner.filter(event)

    def __repr__(self) -> str:
        return f"Not({self.inner!r})"
