"""Domain value objects."""

from attrsearch.domain.value_objects.attribute_category import AttributeCategory
from attrsearch.domain.value_objects.data_type import DataType
from attrsearch.domain.value_objects.listing_status import ListingStatus
from attrsearch.domain.value_objects.role import Role, can_supervise
from attrsearch.domain.value_objects.search_filter import SearchFilter
from attrsearch.domain.value_objects.sort_spec import SortDirection, SortSpec
from attrsearch.domain.value_objects.typed_value import (
    BooleanValue,
    DateValue,
    MultiSelectValue,
    NumberValue,
    TextValue,
    TypedValue,
    fits_data_type,
)

__all__ = [
    "AttributeCategory",
    "BooleanValue",
    "DataType",
    "DateValue",
    "ListingStatus",
    "MultiSelectValue",
    "NumberValue",
    "Role",
    "SearchFilter",
    "SortDirection",
    "SortSpec",
    "TextValue",
    "TypedValue",
    "can_supervise",
    "fits_data_type",
]
