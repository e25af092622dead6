"""Typed attribute value - exactly one populated slot per stored row."""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from attrsearch.domain.value_objects.data_type import DataType, require_exhaustive


@dataclass(frozen=True)
class TextValue:
    """TEXT and SINGLE_SELECT value."""

    value: str


@dataclass(frozen=True)
class NumberValue:
    """NUMBER value."""

    value: Decimal


@dataclass(frozen=True)
class BooleanValue:
    """BOOLEAN value."""

    value: bool


@dataclass(frozen=True)
class MultiSelectValue:
    """MULTI_SELECT value stored as a JSON array of option values."""

    encoded: str

    @classmethod
    def of(cls, values: Iterable[str]) -> "MultiSelectValue":
        return cls(json.dumps(list(values), ensure_ascii=False))

    def items(self) -> list[str]:
        """Decode the stored list. Raises ValueError on malformed encoding."""
        decoded = json.loads(self.encoded)
        if not isinstance(decoded, list) or not all(isinstance(v, str) for v in decoded):
            raise ValueError("Multi-select value is not a JSON array of strings")
        return decoded


@dataclass(frozen=True)
class DateValue:
    """DATE value - a timezone-aware instant."""

    value: datetime


TypedValue = TextValue | NumberValue | BooleanValue | MultiSelectValue | DateValue


VARIANT_BY_DATA_TYPE: dict[DataType, type] = {
    DataType.TEXT: TextValue,
    DataType.SINGLE_SELECT: TextValue,
    DataType.NUMBER: NumberValue,
    DataType.BOOLEAN: BooleanValue,
    DataType.MULTI_SELECT: MultiSelectValue,
    DataType.DATE: DateValue,
}
require_exhaustive(VARIANT_BY_DATA_TYPE, "VARIANT_BY_DATA_TYPE")


def fits_data_type(value: TypedValue, data_type: DataType) -> bool:
    """True when the value's variant is the one data_type stores."""
    return isinstance(value, VARIANT_BY_DATA_TYPE[data_type])
