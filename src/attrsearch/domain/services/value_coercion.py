"""Coerce raw input into the TypedValue variant an attribute's data type requires."""

from collections.abc import Callable
from datetime import date, datetime, time, tzinfo
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from attrsearch.domain.exceptions import ValidationError
from attrsearch.domain.value_objects import (
    BooleanValue,
    DataType,
    DateValue,
    MultiSelectValue,
    NumberValue,
    TextValue,
    TypedValue,
)
from attrsearch.domain.value_objects.data_type import require_exhaustive

NUMBER_SCALE = Decimal("0.01")


def _text(raw: object, tz: tzinfo) -> TypedValue:
    if not isinstance(raw, str):
        raise ValidationError(f"Expected str, got {type(raw).__name__}")
    return TextValue(raw)


def _number(raw: object, tz: tzinfo) -> TypedValue:
    # bool is an int subclass and must not pass as a number
    if isinstance(raw, bool) or not isinstance(raw, (Decimal, int, float)):
        raise ValidationError(f"Expected a decimal number, got {type(raw).__name__}")
    try:
        number = raw if isinstance(raw, Decimal) else Decimal(str(raw))
        if not number.is_finite():
            raise ValidationError("Number must be finite")
        return NumberValue(number.quantize(NUMBER_SCALE, rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid number: {raw!r}") from e


def _boolean(raw: object, tz: tzinfo) -> TypedValue:
    if not isinstance(raw, bool):
        raise ValidationError(f"Expected bool, got {type(raw).__name__}")
    return BooleanValue(raw)


def _multi_select(raw: object, tz: tzinfo) -> TypedValue:
    if not isinstance(raw, (list, tuple)) or not all(isinstance(v, str) for v in raw):
        raise ValidationError("Expected a list of str for MULTI_SELECT")
    if not raw:
        raise ValidationError("MULTI_SELECT value must select at least one option")
    return MultiSelectValue.of(raw)


def _date(raw: object, tz: tzinfo) -> TypedValue:
    if isinstance(raw, datetime):
        if raw.tzinfo is None or raw.utcoffset() is None:
            raise ValidationError("DATE value must be timezone-aware")
        return DateValue(raw)
    if isinstance(raw, date):
        return DateValue(datetime.combine(raw, time.min, tzinfo=tz))
    raise ValidationError(f"Expected datetime or date, got {type(raw).__name__}")


_COERCERS: dict[DataType, Callable[[object, tzinfo], TypedValue]] = {
    DataType.TEXT: _text,
    DataType.SINGLE_SELECT: _text,
    DataType.NUMBER: _number,
    DataType.BOOLEAN: _boolean,
    DataType.MULTI_SELECT: _multi_select,
    DataType.DATE: _date,
}
require_exhaustive(_COERCERS, "_COERCERS")


def coerce_value(data_type: DataType, raw: object, reference_tz: tzinfo) -> TypedValue:
    """Build the TypedValue for data_type; raw's runtime type must match exactly."""
    return _COERCERS[data_type](raw, reference_tz)


def selected_options(value: TypedValue) -> list[str]:
    """Option values a select-type value refers to."""
    if isinstance(value, TextValue):
        return [value.value]
    if isinstance(value, MultiSelectValue):
        return value.items()
    return []
