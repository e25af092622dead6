"""Search filter - one typed constraint against one attribute."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from attrsearch.domain.value_objects.data_type import DataType


@dataclass(frozen=True)
class SearchFilter:
    """Constraint on an attribute's value.

    Only the fields relevant to data_type are read:
    NUMBER -> min_value/max_value, DATE -> min_date/max_date,
    TEXT -> text_value, SINGLE_SELECT/MULTI_SELECT -> selected_values,
    BOOLEAN -> boolean_value.
    """

    attribute_id: UUID
    data_type: DataType
    min_value: Decimal | None = None
    max_value: Decimal | None = None
    min_date: date | None = None
    max_date: date | None = None
    selected_values: tuple[str, ...] | None = None
    text_value: str | None = None
    boolean_value: bool | None = None
