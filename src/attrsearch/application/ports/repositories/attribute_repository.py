"""Attribute repository port."""

from collections.abc import Iterable, Mapping
from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import Attribute
from attrsearch.domain.value_objects import AttributeCategory


class AttributeRepository(Protocol):
    """Port for attribute catalog persistence."""

    async def get_by_id(self, attribute_id: UUID) -> Attribute | None: ...

    async def get_many(self, attribute_ids: Iterable[UUID]) -> dict[UUID, Attribute]: ...

    async def get_by_name(self, name: str) -> Attribute | None: ...

    async def list_all(self) -> list[Attribute]: ...

    async def list_searchable(self) -> list[Attribute]: ...

    async def list_by_category(self, category: AttributeCategory) -> list[Attribute]: ...

    async def create(self, attribute: Attribute) -> Attribute: ...

    async def update(self, attribute: Attribute) -> None: ...

    async def delete(self, attribute_id: UUID) -> None: ...

    async def set_display_orders(self, orders: Mapping[UUID, int]) -> None: ...
