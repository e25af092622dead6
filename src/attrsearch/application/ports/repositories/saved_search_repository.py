"""Saved search repository port."""

from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import SavedSearch


class SavedSearchRepository(Protocol):
    """Port for saved search persistence."""

    async def get_by_id(self, saved_search_id: UUID) -> SavedSearch | None: ...

    async def list_by_owner(self, owner_id: UUID) -> list[SavedSearch]: ...

    async def create(self, saved_search: SavedSearch) -> SavedSearch: ...

    async def update(self, saved_search: SavedSearch) -> None: ...

    async def delete(self, saved_search_id: UUID) -> None: ...
