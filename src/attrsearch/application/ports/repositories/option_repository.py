"""Attribute option repository port."""

from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import AttributeOption


class AttributeOptionRepository(Protocol):
    """Port for select-type option persistence."""

    async def get_by_id(self, option_id: UUID) -> AttributeOption | None: ...

    async def list_by_attribute(self, attribute_id: UUID) -> list[AttributeOption]: ...

    async def create(self, option: AttributeOption) -> AttributeOption: ...

    async def delete(self, option_id: UUID) -> None: ...

    async def delete_by_attribute(self, attribute_id: UUID) -> None: ...
