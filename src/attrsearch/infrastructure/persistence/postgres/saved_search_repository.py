"""PostgreSQL saved search repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import SavedSearch

_COLUMNS = "id, owner_id, name, description, filters, created_at, updated_at"


def _row_to_saved_search(r: tuple) -> SavedSearch:
    return SavedSearch(
        id=r[0],
        owner_id=r[1],
        name=r[2],
        description=r[3],
        filters_encoded=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresSavedSearchRepository:
    """Saved search repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, saved_search_id: UUID) -> SavedSearch | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM saved_search WHERE id = %s",
            (saved_search_id,),
        )
        r = await cur.fetchone()
        return _row_to_saved_search(r) if r else None

    async def list_by_owner(self, owner_id: UUID) -> list[SavedSearch]:
        """List owner's saved searches, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM saved_search WHERE owner_id = %s "
            "ORDER BY created_at DESC, id",
            (owner_id,),
        )
        return [_row_to_saved_search(r) for r in await cur.fetchall()]

    async def create(self, saved_search: SavedSearch) -> SavedSearch:
        await self._conn.execute(
            f"INSERT INTO saved_search ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                saved_search.id,
                saved_search.owner_id,
                saved_search.name,
                saved_search.description,
                saved_search.filters_encoded,
                saved_search.created_at,
                saved_search.updated_at,
            ),
        )
        return saved_search

    async def update(self, saved_search: SavedSearch) -> None:
        await self._conn.execute(
            "UPDATE saved_search SET name=%s, description=%s, filters=%s, updated_at=%s "
            "WHERE id=%s",
            (
                saved_search.name,
                saved_search.description,
                saved_search.filters_encoded,
                saved_search.updated_at,
                saved_search.id,
            ),
        )

    async def delete(self, saved_search_id: UUID) -> None:
        await self._conn.execute(
            "DELETE FROM saved_search WHERE id = %s",
            (saved_search_id,),
        )
