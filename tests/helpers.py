"""Event factories shared by kubefilter tests."""

from __future__ import annotations

from kubefilter.models.events import Event, InvolvedObject


def make_event(
    type: str = "Warning",
    reason: str = "Failed",
    kind: str = "Pod",
    namespace: str = "default",
    name: str = "my-app-7b4f8c6d-x2kj",
    message: str = "Error: ImagePullBackOff",
    count: int = 1,
) -> Event:
    """Create an Event with sensible defaults for testing."""
    return Event(
        type=type,
        reason=reason,
        involved_object=InvolvedObject(kind=kind, namespace=namespace, name=name),
        message=message,
        count=count,
    )
