"""Event filters for kubefilter.

Submodules:
    base           -- EventFilter contract, FilterConfigError, AllOf / AnyOf / Not.
    type_filter    -- TypeFilter: case-insensitive allow-list on event type.
    field_selector -- FieldSelectorFilter: ``field:v1|v2`` selectors on reason and involved object.
    factory        -- build_filter: combine the configured filters.
"""

from kubefilter.filters.base import AllOf, AnyOf, EventFilter, FilterConfigError, Not
from kubefilter.filters.factory import build_filter
from kubefilter.filters.field_selector import (
    INVOLVED_OBJECT_KIND,
    INVOLVED_OBJECT_NAMESPACE,
    REASON,
    SUPPORTED_FIELDS,
    FieldSelectorFilter,
    parse_field_selector,
)
from kubefilter.filters.type_filter import TypeFilter

__all__ = [
    "INVOLVED_OBJECT_KIND",
    "INVOLVED_OBJECT_NAMESPACE",
    "REASON",
    "SUPPORTED_FIELDS",
    "AllOf",
    "AnyOf",
    "EventFilter",
    "FieldSelectorFilter",
    "FilterConfigError",
    "Not",
    "TypeFilter",
    "build_filter",
    "parse_field_selector",
]
