"""Integration tests for config -> build_filter -> select_events."""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from kubefilter.config import load_config
from kubefilter.filters import build_filter
from kubefilter.models.config import FilterConfig
from kubefilter.pipeline import select_events

from tests.helpers import make_event


def _count(result: str) -> float:
    return REGISTRY.get_sample_value("kubefilter_events_filtered_total", {"result": result}) or 0.0


@pytest.fixture
def events() -> list:
    return [
        make_event(type="Warning", reason="Failed", namespace="default", name="api-0"),
        make_event(type="Normal", reason="Created", namespace="kube-system", name="coredns-1"),
        make_event(type="Warning", reason="BackOff", namespace="kube-system", name="kube-proxy-2"),
        make_event(type="Warning", reason="Created", namespace="default", kind="Node", name="node-1"),
        make_event(type="Normal", reason="Scheduled", namespace="default", name="web-0"),
    ]


class TestSelectEvents:
    def test_env_config_end_to_end(self, monkeypatch: pytest.MonkeyPatch, events: list) -> None:
        monkeypatch.setenv("KUBEFILTER_ALLOWED_TYPES", "warning")
        monkeypatch.setenv("KUBEFILTER_FIELD_SELECTORS", "reason:Failed,involvedObject.namespace:kube-system")
        event_filter = build_filter(load_config().filters)

        kept = [e.involved_object.name for e in select_events(event_filter, events)]

        assert kept == ["api-0", "kube-proxy-2"]

    def test_counts_decisions(self, events: list) -> None:
        accepted_before = _count("accepted")
        rejected_before = _count("rejected")
        event_filter = build_filter(FilterConfig(allowed_types=["Normal"]))

        kept = list(select_events(event_filter, events))

        assert len(kept) == 2
        assert _count("accepted") - accepted_before == 2
        assert _count("rejected") - rejected_before == 3

    def test_lazy(self, events: list) -> None:
        event_filter = build_filter(FilterConfig())
        selected = select_events(event_filter, iter(events))
        assert next(selected) is events[0]
        assert next(selected) is events[1]
