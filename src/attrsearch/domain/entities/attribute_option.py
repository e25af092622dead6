"""Attribute option entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class AttributeOption:
    """Allowed value of a SINGLE_SELECT or MULTI_SELECT attribute."""

    id: UUID
    attribute_id: UUID
    option_value: str
    display_order: int
