"""User repository port."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from attrsearch.domain.entities import User


class UserRepository(Protocol):
    """Port for user lookup."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, User]: ...
