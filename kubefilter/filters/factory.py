"""Build the effective event filter from configuration."""

from __future__ import annotations

from kubefilter.filters.base import AllOf, EventFilter
from kubefilter.filters.field_selector import FieldSelectorFilter
from kubefilter.filters.type_filter import TypeFilter
from kubefilter.models.config import FilterConfig
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.factory")


def build_filter(config: FilterConfig) -> EventFilter:
    """Return a filter requiring every configured criterion.

    A criterion left empty in *config* is not applied, so an empty config
    accepts every event. Raises FilterConfigError on a bad selector.
    """
    filters: list[EventFilter] = []
    if config.allowed_types:
        filters.append(TypeFilter(config.allowed_types))
    if config.field_selectors:
        filters.append(FieldSelectorFilter(config.field_selectors))
    chain = AllOf(filters)
    _logger.info("event_filter_built", filter=repr(chain))
    return chain
