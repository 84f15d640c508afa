"""Kubernetes event data structures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class EventType(StrEnum):
    """Type of a Kubernetes core/v1 Event."""

    NORMAL = "Normal"
    WARNING = "Warning"


@dataclass(frozen=True)
class InvolvedObject:
    """Reference to the object an event is about."""

    kind: str = ""
    namespace: str = ""
    name: str = ""


@dataclass(frozen=True)
class Event:
    """Read-only view of a Kubernetes event.

    Filters only read ``type``, ``reason`` and the involved object's ``kind``
    and ``namespace``; the remaining fields are carried for callers.
    """

    type: str
    reason: str
    involved_object: InvolvedObject = field(default_factory=InvolvedObject)
    message: str = ""
    count: int = 1
    raw_object: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> Event:
        """Build an Event from the JSON form of a v1.Event.

        Missing or null keys become empty strings; ``count`` defaults to 1.
        Raises TypeError when a field has the wrong JSON type and ValueError
        when ``count`` is not a non-negative integer.
        """
        involved = obj.get("involvedObject")
        if involved is None:
            involved = {}
        elif not isinstance(involved, Mapping):
            raise TypeError(f"involvedObject must be an object, got {type(involved).__name__}")
        return cls(
            type=_str_field(obj, "type"),
            reason=_str_field(obj, "reason"),
            involved_object=InvolvedObject(
                kind=_str_field(involved, "kind", "involvedObject."),
                namespace=_str_field(involved, "namespace", "involvedObject."),
                name=_str_field(involved, "name", "involvedObject."),
            ),
            message=_str_field(obj, "message"),
            count=_count_field(obj.get("count")),
            raw_object=dict(obj),
        )


def _str_field(obj: Mapping[str, Any], key: str, prefix: str = "") -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{prefix}{key} must be a string, got {type(value).__name__}")
    return value


def _count_field(value: Any) -> int:
    if value is None:
        return 1
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"count must be a non-negative integer, got {value!r}")
    return value
