"""Access checker port - hierarchy-scoped visibility."""

from typing import Protocol
from uuid import UUID


class AccessChecker(Protocol):
    """Port for checking which users a caller may see or manage."""

    async def can_manage(self, manager_id: UUID, target_id: UUID) -> bool: ...

    async def accessible_user_ids(self, user_id: UUID) -> set[UUID] | None:
        """Users visible to user_id; None means unrestricted."""
        ...
