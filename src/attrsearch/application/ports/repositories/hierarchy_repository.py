"""Hierarchy edge repository port."""

from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import HierarchyEdge


class HierarchyRepository(Protocol):
    """Port for supervisor -> subordinate edge persistence."""

    async def lock(self) -> None:
        """Serialize graph writers until the current transaction ends."""
        ...

    async def list_edges(self) -> list[HierarchyEdge]: ...

    async def exists(self, supervisor_id: UUID, subordinate_id: UUID) -> bool: ...

    async def create(self, edge: HierarchyEdge) -> HierarchyEdge: ...

    async def delete(self, supervisor_id: UUID, subordinate_id: UUID) -> None: ...
