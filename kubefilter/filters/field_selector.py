"""Field-selector filter.

A selector spec has the form ``<field>:<value1>|<value2>|...`` where
``<field>`` is one of ``reason``, ``involvedObject.kind`` or
``involvedObject.namespace``. An event is accepted when any configured field
holds one of its accepted values; values are compared exactly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from kubefilter.filters.base import EventFilter, FilterConfigError
from kubefilter.models.events import Event
from kubefilter.observability.logging import get_logger

_logger = get_logger("filters.field_selector")

REASON = "reason"
INVOLVED_OBJECT_KIND = "involvedObject.kind"
INVOLVED_OBJECT_NAMESPACE = "involvedObject.namespace"

SUPPORTED_FIELDS: frozenset[str] = frozenset({REASON, INVOLVED_OBJECT_KIND, INVOLVED_OBJECT_NAMESPACE})

_FIELD_VALUE: Mapping[str, Callable[[Event], str]] = MappingProxyType(
    {
        REASON: lambda event: event.reason,
        INVOLVED_OBJECT_KIND: lambda event: event.involved_object.kind,
        INVOLVED_OBJECT_NAMESPACE: lambda event: event.involved_object.namespace,
    }
)

_SPEC_SEPARATOR = ":"
_VALUE_SEPARATOR = "|"


def _check_field(field: str, spec: str) -> None:
    if field not in SUPPORTED_FIELDS:
        _logger.error("field_selector_invalid", selector=spec, field=field)
        raise FilterConfigError(
            f"unsupported field {field!r} in selector {spec!r}; supported fields: {', '.join(sorted(SUPPORTED_FIELDS))}",
            spec=spec,
        )


def parse_field_selector(spec: str) -> tuple[str, tuple[str, ...]]:
    """Split a selector spec into its field name and accepted values.

    Raises FilterConfigError when the spec does not contain exactly one
    ``:`` or names an unsupported field.
    """
    parts = spec.split(_SPEC_SEPARATOR)
    if len(parts) != 2:
        _logger.error("field_selector_invalid", selector=spec)
        raise FilterConfigError(f"selector format error, expected <field>:<value>[|<value>...]: {spec!r}", spec=spec)
    field, values = parts
    _check_field(field, spec)
    return field, tuple(values.split(_VALUE_SEPARATOR))


class FieldSelectorFilter(EventFilter):
    """Accepts events matching any configured field selector.

    Repeating a field across specs keeps only the last spec's values.
    """

    def __init__(self, field_selectors: Iterable[str] = ()) -> None:
        selectors: dict[str, frozenset[str]] = {}
        for spec in field_selectors:
            field, values = parse_field_selector(spec)
            if field in selectors:
                _logger.warning(
                    "field_selector_overridden",
                    field=field,
                    previous=sorted(selectors[field]),
                    current=list(values),
                )
            selectors[field] = frozenset(values)
        self._set_selectors(selectors)

    def _set_selectors(self, selectors: dict[str, frozenset[str]]) -> None:
        self.match_field_selector: Mapping[str, frozenset[str]] = MappingProxyType(selectors)
        _logger.debug(
            "field_selector_filter_built",
            fields={f: sorted(v) for f, v in selectors.items()},
        )

    @classmethod
    def from_mapping(cls, selectors: Mapping[str, Iterable[str]]) -> FieldSelectorFilter:
        """Build a filter from an already split field -> values mapping.

        Values must be collections of strings; a bare string is rejected
        rather than treated as a set of characters.
        """
        validated: dict[str, frozenset[str]] = {}
        for field, values in selectors.items():
            _check_field(field, field)
            if isinstance(values, str):
                raise FilterConfigError(
                    f"values for field {field!r} must be a collection of strings, not a string: {values!r}",
                    spec=field,
                )
            validated[field] = frozenset(values)
        instance = cls.__new__(cls)
        instance._set_selectors(validated)
        return instance

    def filter(self, event: Event) -> bool:
        for field, accepted in self.match_field_selector.items():
            if _FIELD_VALUE[field](event) in accepted:
                return True
        return False

    def __repr__(self) -> str:
        fields = {f: sorted(v) for f, v in self.match_field_selector.items()}
        return f"FieldSelectorFilter({fields!r})"
