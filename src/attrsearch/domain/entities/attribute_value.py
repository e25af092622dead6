"""Attribute value entity - EAV row."""

from dataclasses import dataclass
from uuid import UUID

from attrsearch.domain.value_objects import TypedValue


@dataclass
class AttributeValue:
    """Value of one attribute on one entity, unique per (entity_id, attribute_id)."""

    entity_id: UUID
    attribute_id: UUID
    value: TypedValue
