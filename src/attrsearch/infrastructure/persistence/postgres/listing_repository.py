"""PostgreSQL listing repository implementation."""

from collections.abc import Iterable
from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import Listing
from attrsearch.domain.value_objects import ListingStatus

_COLUMNS = "id, owner_id, title, status, price, created_at, updated_at"


def _row_to_listing(r: tuple) -> Listing:
    return Listing(
        id=r[0],
        owner_id=r[1],
        title=r[2],
        status=ListingStatus(r[3]),
        price=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresListingRepository:
    """Listing repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM listing WHERE id = %s",
            (listing_id,),
        )
        r = await cur.fetchone()
        return _row_to_listing(r) if r else None

    async def list_by_status(
        self,
        status: ListingStatus,
        *,
        owner_ids: Iterable[UUID] | None = None,
    ) -> list[Listing]:
        """List listings in status, optionally restricted to owners."""
        if owner_ids is None:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM listing WHERE status = %s",
                (status.value,),
            )
        else:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM listing WHERE status = %s AND owner_id = ANY(%s)",
                (status.value, list(owner_ids)),
            )
        return [_row_to_listing(r) for r in await cur.fetchall()]
