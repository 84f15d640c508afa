"""Prometheus metrics for kubefilter."""

from __future__ import annotations

from prometheus_client import Counter

events_filtered_total = Counter(
    "kubefilter_events_filtered_total",
    "Events evaluated by select_events, by filter decision",
    ["result"],
)
