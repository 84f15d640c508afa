"""Core data structures for kubefilter."""

from kubefilter.models.config import FilterConfig, KubeFilterConfig, LogConfig
from kubefilter.models.events import Event, EventType, InvolvedObject

__all__ = [
    "Event",
    "EventType",
    "FilterConfig",
    "InvolvedObject",
    "KubeFilterConfig",
    "LogConfig",
]
