"""PostgreSQL attribute option repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import AttributeOption


class PostgresAttributeOptionRepository:
    """Attribute option repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, option_id: UUID) -> AttributeOption | None:
        cur = await self._conn.execute(
            "SELECT id, attribute_id, option_value, display_order "
            "FROM attribute_option WHERE id = %s",
            (option_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return AttributeOption(id=r[0], attribute_id=r[1], option_value=r[2], display_order=r[3])

    async def list_by_attribute(self, attribute_id: UUID) -> list[AttributeOption]:
        """List options of attribute in display order."""
        cur = await self._conn.execute(
            "SELECT id, attribute_id, option_value, display_order "
            "FROM attribute_option WHERE attribute_id = %s ORDER BY display_order, option_value",
            (attribute_id,),
        )
        rows = await cur.fetchall()
        return [
            AttributeOption(id=r[0], attribute_id=r[1], option_value=r[2], display_order=r[3])
            for r in rows
        ]

    async def create(self, option: AttributeOption) -> AttributeOption:
        await self._conn.execute(
            "INSERT INTO attribute_option (id, attribute_id, option_value, display_order) "
            "VALUES (%s, %s, %s, %s)",
            (option.id, option.attribute_id, option.option_value, option.display_order),
        )
        return option

    async def delete(self, option_id: UUID) -> None:
        await self._conn.execute(
            "DELETE FROM attribute_option WHERE id = %s",
            (option_id,),
        )

    async def delete_by_attribute(self, attribute_id: UUID) -> None:
        """Delete all options of attribute."""
        await self._conn.execute(
            "DELETE FROM attribute_option WHERE attribute_id = %s",
            (attribute_id,),
        )
