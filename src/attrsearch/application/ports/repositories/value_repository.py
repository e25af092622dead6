"""Attribute value repository port - typed EAV rows."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import AttributeValue
from attrsearch.domain.value_objects import TypedValue


class AttributeValueRepository(Protocol):
    """Port for typed value persistence.

    Reads decode the stored slot through the attribute's current data type;
    rows whose slot does not fit it are treated as absent.
    """

    async def get(self, entity_id: UUID, attribute_id: UUID) -> AttributeValue | None: ...

    async def list_by_entity(self, entity_id: UUID) -> list[AttributeValue]: ...

    async def upsert(self, value: AttributeValue) -> AttributeValue: ...

    async def delete(self, entity_id: UUID, attribute_id: UUID) -> bool: ...

    async def count_by_attribute(self, attribute_id: UUID) -> int: ...

    async def batch_get(
        self, entity_ids: Iterable[UUID], attribute_ids: Iterable[UUID]
    ) -> dict[UUID, dict[UUID, TypedValue]]: ...
