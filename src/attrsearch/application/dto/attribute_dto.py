"""Attribute catalog DTOs."""

from dataclasses import dataclass

from attrsearch.domain.value_objects import AttributeCategory, DataType


@dataclass
class AttributeCreateInput:
    """Input for creating an attribute."""

    name: str
    data_type: DataType | None
    category: AttributeCategory | None
    is_required: bool | None = None
    is_searchable: bool | None = None
    display_order: int | None = None
    options: list[str] | None = None  # initial option values, select types only


@dataclass
class AttributeUpdateInput:
    """Partial update; None leaves the field unchanged."""

    name: str | None = None
    data_type: DataType | None = None
    category: AttributeCategory | None = None
    is_required: bool | None = None
    is_searchable: bool | None = None
    display_order: int | None = None
