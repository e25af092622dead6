"""Listing repository port."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import Listing
from attrsearch.domain.value_objects import ListingStatus


class ListingRepository(Protocol):
    """Port for listing lookup."""

    async def get_by_id(self, listing_id: UUID) -> Listing | None: ...

    async def list_by_status(
        self,
        status: ListingStatus,
        *,
        owner_ids: Iterable[UUID] | None = None,
    ) -> list[Listing]: ...
