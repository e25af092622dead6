"""Attribute entity - catalog metadata for one configurable field."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from attrsearch.domain.value_objects import AttributeCategory, DataType


@dataclass
class Attribute:
    """Attribute - named, typed field that values are stored against."""

    id: UUID
    name: str
    data_type: DataType
    category: AttributeCategory
    display_order: int
    created_at: datetime
    updated_at: datetime
    is_required: bool = False
    is_searchable: bool = True

    @property
    def requires_options(self) -> bool:
        return self.data_type.requires_options
