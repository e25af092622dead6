"""PostgreSQL user repository implementation."""

from collections.abc import Iterable
from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import User
from attrsearch.domain.value_objects import Role


def _row_to_user(r: tuple) -> User:
    return User(id=r[0], username=r[1], role=Role(r[2]), active=r[3])


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        cur = await self._conn.execute(
            "SELECT id, username, role, active FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        ids = list(set(user_ids))
        if not ids:
            return {}
        cur = await self._conn.execute(
            "SELECT id, username, role, active FROM app_user WHERE id = ANY(%s)",
            (ids,),
        )
        return {r[0]: _row_to_user(r) for r in await cur.fetchall()}
