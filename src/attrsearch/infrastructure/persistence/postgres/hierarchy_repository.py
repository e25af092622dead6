"""PostgreSQL hierarchy edge repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import HierarchyEdge

# Advisory lock key shared by every hierarchy writer.
HIERARCHY_LOCK_KEY = 0x41545452


class PostgresHierarchyRepository:
    """Hierarchy edge repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def lock(self) -> None:
        """Take the transaction-scoped hierarchy lock; released on commit or rollback."""
        await self._conn.execute("SELECT pg_advisory_xact_lock(%s)", (HIERARCHY_LOCK_KEY,))

    async def list_edges(self) -> list[HierarchyEdge]:
        cur = await self._conn.execute(
            "SELECT supervisor_id, subordinate_id, created_at FROM hierarchy_edge"
        )
        rows = await cur.fetchall()
        return [
            HierarchyEdge(supervisor_id=r[0], subordinate_id=r[1], created_at=r[2])
            for r in rows
        ]

    async def exists(self, supervisor_id: UUID, subordinate_id: UUID) -> bool:
        cur = await self._conn.execute(
            "SELECT 1 FROM hierarchy_edge WHERE supervisor_id = %s AND subordinate_id = %s",
            (supervisor_id, subordinate_id),
        )
        return await cur.fetchone() is not None

    async def create(self, edge: HierarchyEdge) -> HierarchyEdge:
        await self._conn.execute(
            "INSERT INTO hierarchy_edge (supervisor_id, subordinate_id, created_at) "
            "VALUES (%s, %s, %s)",
            (edge.supervisor_id, edge.subordinate_id, edge.created_at),
        )
        return edge

    async def delete(self, supervisor_id: UUID, subordinate_id: UUID) -> None:
        await self._conn.execute(
            "DELETE FROM hierarchy_edge WHERE supervisor_id = %s AND subordinate_id = %s",
            (supervisor_id, subordinate_id),
        )
