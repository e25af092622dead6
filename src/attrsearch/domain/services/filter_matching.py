"""Filter validation and per-type matching over pre-fetched typed values.

Matching is pure: every function here reads a value cache shaped
``{entity_id: {attribute_id: TypedValue}}`` and never touches the store.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date, tzinfo
from uuid import UUID

from attrsearch.domain.entities import Attribute
from attrsearch.domain.exceptions import ValidationError
from attrsearch.domain.value_objects import (
    BooleanValue,
    DataType,
    DateValue,
    MultiSelectValue,
    NumberValue,
    SearchFilter,
    TextValue,
    TypedValue,
)
from attrsearch.domain.value_objects.data_type import require_exhaustive

logger = logging.getLogger(__name__)

ValueCache = Mapping[UUID, Mapping[UUID, TypedValue]]


def _check_number(f: SearchFilter) -> None:
    if f.min_value is None and f.max_value is None:
        raise ValidationError("NUMBER filter must have at least min_value or max_value")
    if f.min_value is not None and f.max_value is not None and f.min_value > f.max_value:
        raise ValidationError("NUMBER filter min_value must be <= max_value")


def _check_date(f: SearchFilter) -> None:
    if f.min_date is None and f.max_date is None:
        raise ValidationError("DATE filter must have at least min_date or max_date")
    if f.min_date is not None and f.max_date is not None and f.min_date > f.max_date:
        raise ValidationError("DATE filter min_date must be <= max_date")


def _check_text(f: SearchFilter) -> None:
    if f.text_value is None or not f.text_value.strip():
        raise ValidationError("TEXT filter must have a text value")


def _check_select(f: SearchFilter) -> None:
    if not f.selected_values:
        raise ValidationError(f"{f.data_type} filter must have at least one selected value")


def _check_boolean(f: SearchFilter) -> None:
    if f.boolean_value is None:
        raise ValidationError("BOOLEAN filter must have a boolean value")


_CHECKS: dict[DataType, Callable[[SearchFilter], None]] = {
    DataType.NUMBER: _check_number,
    DataType.DATE: _check_date,
    DataType.TEXT: _check_text,
    DataType.SINGLE_SELECT: _check_select,
    DataType.MULTI_SELECT: _check_select,
    DataType.BOOLEAN: _check_boolean,
}
require_exhaustive(_CHECKS, "_CHECKS")


def validate_filter(search_filter: SearchFilter, attribute: Attribute | None) -> None:
    """Raise ValidationError unless the filter can be evaluated against attribute."""
    if attribute is None:
        raise ValidationError(f"Attribute {search_filter.attribute_id} does not exist")
    if not attribute.is_searchable:
        raise ValidationError(f"Attribute '{attribute.name}' is not searchable")
    if search_filter.data_type != attribute.data_type:
        raise ValidationError(
            f"Filter data type {search_filter.data_type} does not match "
            f"attribute '{attribute.name}' data type {attribute.data_type}"
        )
    _CHECKS[search_filter.data_type](search_filter)


def _match_number(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if not isinstance(value, NumberValue):
        return False
    if f.min_value is not None and value.value < f.min_value:
        return False
    if f.max_value is not None and value.value > f.max_value:
        return False
    return True


def _match_date(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if not isinstance(value, DateValue):
        return False
    day: date = value.value.astimezone(tz).date()
    if f.min_date is not None and day < f.min_date:
        return False
    if f.max_date is not None and day > f.max_date:
        return False
    return True


def _match_text(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if f.text_value is None or not f.text_value.strip():
        return True
    if not isinstance(value, TextValue):
        return False
    return f.text_value.casefold() in value.value.casefold()


def _match_single_select(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if not f.selected_values:
        return True
    if not isinstance(value, TextValue):
        return False
    stored = value.value.casefold()
    return any(s.casefold() == stored for s in f.selected_values)


def _match_multi_select(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if not f.selected_values:
        return True
    if not isinstance(value, MultiSelectValue):
        return False
    try:
        stored = {v.casefold() for v in value.items()}
    except ValueError:
        logger.warning(
            "Malformed multi-select value for attribute %s, falling back to substring match",
            f.attribute_id,
        )
        return any(s in value.encoded for s in f.selected_values)
    return any(s.casefold() in stored for s in f.selected_values)


def _match_boolean(value: TypedValue, f: SearchFilter, tz: tzinfo) -> bool:
    if f.boolean_value is None:
        return True
    if not isinstance(value, BooleanValue):
        return False
    return value.value == f.boolean_value


_MATCHERS: dict[DataType, Callable[[TypedValue, SearchFilter, tzinfo], bool]] = {
    DataType.NUMBER: _match_number,
    DataType.DATE: _match_date,
    DataType.TEXT: _match_text,
    DataType.SINGLE_SELECT: _match_single_select,
    DataType.MULTI_SELECT: _match_multi_select,
    DataType.BOOLEAN: _match_boolean,
}
require_exhaustive(_MATCHERS, "_MATCHERS")


class FilterMatcher:
    """Evaluates filters for one entity against a pre-fetched value cache."""

    def __init__(self, reference_tz: tzinfo) -> None:
        self._tz = reference_tz

    def evaluate(
        self, entity_id: UUID, search_filter: SearchFilter, value_cache: ValueCache
    ) -> bool:
        """A missing value never matches."""
        value = value_cache.get(entity_id, {}).get(search_filter.attribute_id)
        if value is None:
            return False
        return _MATCHERS[search_filter.data_type](value, search_filter, self._tz)

    def match_all(
        self,
        entity_id: UUID,
        filters: Sequence[SearchFilter],
        value_cache: ValueCache,
    ) -> bool:
        """AND across filters."""
        return all(self.evaluate(entity_id, f, value_cache) for f in filters)
