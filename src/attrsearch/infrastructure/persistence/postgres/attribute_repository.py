"""PostgreSQL attribute repository implementation."""

from collections.abc import Iterable, Mapping
from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import Attribute
from attrsearch.domain.value_objects import AttributeCategory, DataType

_COLUMNS = (
    "id, name, data_type, category, display_order, is_required, is_searchable, "
    "created_at, updated_at"
)


def _row_to_attribute(r: tuple) -> Attribute:
    return Attribute(
        id=r[0],
        name=r[1],
        data_type=DataType(r[2]),
        category=AttributeCategory(r[3]),
        display_order=r[4],
        is_required=r[5],
        is_searchable=r[6],
        created_at=r[7],
        updated_at=r[8],
    )


class PostgresAttributeRepository:
    """Attribute repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, attribute_id: UUID) -> Attribute | None:
        """Get attribute by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute WHERE id = %s",
            (attribute_id,),
        )
        r = await cur.fetchone()
        return _row_to_attribute(r) if r else None

    async def get_many(self, attribute_ids: Iterable[UUID]) -> dict[UUID, Attribute]:
        """Get attributes by ids; missing ids are absent from the result."""
        ids = list(set(attribute_ids))
        if not ids:
            return {}
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute WHERE id = ANY(%s)",
            (ids,),
        )
        return {r[0]: _row_to_attribute(r) for r in await cur.fetchall()}

    async def get_by_name(self, name: str) -> Attribute | None:
        """Get attribute by exact name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_attribute(r) if r else None

    async def list_all(self) -> list[Attribute]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute ORDER BY category, display_order"
        )
        return [_row_to_attribute(r) for r in await cur.fetchall()]

    async def list_searchable(self) -> list[Attribute]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute WHERE is_searchable "
            "ORDER BY category, display_order"
        )
        return [_row_to_attribute(r) for r in await cur.fetchall()]

    async def list_by_category(self, category: AttributeCategory) -> list[Attribute]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM attribute WHERE category = %s ORDER BY display_order",
            (category.value,),
        )
        return [_row_to_attribute(r) for r in await cur.fetchall()]

    async def create(self, attribute: Attribute) -> Attribute:
        """Create attribute."""
        await self._conn.execute(
            f"INSERT INTO attribute ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                attribute.id,
                attribute.name,
                attribute.data_type.value,
                attribute.category.value,
                attribute.display_order,
                attribute.is_required,
                attribute.is_searchable,
                attribute.created_at,
                attribute.updated_at,
            ),
        )
        return attribute

    async def update(self, attribute: Attribute) -> None:
        """Update attribute."""
        await self._conn.execute(
            "UPDATE attribute SET name=%s, data_type=%s, category=%s, display_order=%s, "
            "is_required=%s, is_searchable=%s, updated_at=%s WHERE id=%s",
            (
                attribute.name,
                attribute.data_type.value,
                attribute.category.value,
                attribute.display_order,
                attribute.is_required,
                attribute.is_searchable,
                attribute.updated_at,
                attribute.id,
            ),
        )

    async def delete(self, attribute_id: UUID) -> None:
        """Delete attribute."""
        await self._conn.execute(
            "DELETE FROM attribute WHERE id = %s",
            (attribute_id,),
        )

    async def set_display_orders(self, orders: Mapping[UUID, int]) -> None:
        """Rewrite display orders; uniqueness is checked at commit."""
        if not orders:
            return
        await self._conn.execute("SET CONSTRAINTS uq_attribute_category_order DEFERRED")
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "UPDATE attribute SET display_order = %s, updated_at = now() WHERE id = %s",
                [(order, attribute_id) for attribute_id, order in orders.items()],
            )
