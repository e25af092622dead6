"""PostgreSQL attribute value repository - one typed slot per row."""

import logging
from collections.abc import Callable, Iterable
from uuid import UUID

from psycopg import AsyncConnection

from attrsearch.domain.entities import AttributeValue
from attrsearch.domain.value_objects import (
    BooleanValue,
    DataType,
    DateValue,
    MultiSelectValue,
    NumberValue,
    TextValue,
    TypedValue,
)
from attrsearch.domain.value_objects.data_type import require_exhaustive

logger = logging.getLogger(__name__)

# Slot order in attribute_value and in every SELECT below.
_SLOTS = ("text_value", "number_value", "boolean_value", "multi_select_value", "date_value")
_SLOT_COLUMNS = ", ".join(f"v.{s}" for s in _SLOTS)

# data type -> (slot index, constructor)
_DECODERS: dict[DataType, tuple[int, Callable[[object], TypedValue]]] = {
    DataType.TEXT: (0, TextValue),
    DataType.SINGLE_SELECT: (0, TextValue),
    DataType.NUMBER: (1, NumberValue),
    DataType.BOOLEAN: (2, BooleanValue),
    DataType.MULTI_SELECT: (3, MultiSelectValue),
    DataType.DATE: (4, DateValue),
}
require_exhaustive(_DECODERS, "_DECODERS")


def _to_slots(value: TypedValue) -> tuple:
    """Place value in its slot, NULL elsewhere."""
    slots: list[object] = [None] * len(_SLOTS)
    match value:
        case TextValue(value=v):
            slots[0] = v
        case NumberValue(value=v):
            slots[1] = v
        case BooleanValue(value=v):
            slots[2] = v
        case MultiSelectValue(encoded=v):
            slots[3] = v
        case DateValue(value=v):
            slots[4] = v
        case _:
            raise TypeError(f"Unsupported value type: {type(value).__name__}")
    return tuple(slots)


def _decode(
    entity_id: UUID, attribute_id: UUID, data_type: str, slots: tuple
) -> TypedValue | None:
    """Read the slot the attribute's current data type stores in."""
    index, build = _DECODERS[DataType(data_type)]
    raw = slots[index]
    if raw is None:
        logger.warning(
            "Value of attribute %s on %s has no %s slot for type %s; treating as absent",
            attribute_id,
            entity_id,
            _SLOTS[index],
            data_type,
        )
        return None
    return build(raw)


class PostgresAttributeValueRepository:
    """Attribute value repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, entity_id: UUID, attribute_id: UUID) -> AttributeValue | None:
        """Get value of attribute on entity."""
        cur = await self._conn.execute(
            f"SELECT a.data_type, {_SLOT_COLUMNS} FROM attribute_value v "
            "JOIN attribute a ON a.id = v.attribute_id "
            "WHERE v.entity_id = %s AND v.attribute_id = %s",
            (entity_id, attribute_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        typed = _decode(entity_id, attribute_id, r[0], r[1:])
        if typed is None:
            return None
        return AttributeValue(entity_id=entity_id, attribute_id=attribute_id, value=typed)

    async def list_by_entity(self, entity_id: UUID) -> list[AttributeValue]:
        """List values of entity in catalog order."""
        cur = await self._conn.execute(
            f"SELECT v.attribute_id, a.data_type, {_SLOT_COLUMNS} FROM attribute_value v "
            "JOIN attribute a ON a.id = v.attribute_id "
            "WHERE v.entity_id = %s ORDER BY a.category, a.display_order",
            (entity_id,),
        )
        result: list[AttributeValue] = []
        for r in await cur.fetchall():
            typed = _decode(entity_id, r[0], r[1], r[2:])
            if typed is not None:
                result.append(AttributeValue(entity_id=entity_id, attribute_id=r[0], value=typed))
        return result

    async def upsert(self, value: AttributeValue) -> AttributeValue:
        """Insert or replace value; all other slots are cleared."""
        slots = _to_slots(value.value)
        await self._conn.execute(
            f"INSERT INTO attribute_value (entity_id, attribute_id, {', '.join(_SLOTS)}, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, now()) "
            "ON CONFLICT (entity_id, attribute_id) DO UPDATE SET "
            + ", ".join(f"{s} = EXCLUDED.{s}" for s in _SLOTS)
            + ", updated_at = now()",
            (value.entity_id, value.attribute_id, *slots),
        )
        return value

    async def delete(self, entity_id: UUID, attribute_id: UUID) -> bool:
        """Delete value; False when none existed."""
        cur = await self._conn.execute(
            "DELETE FROM attribute_value WHERE entity_id = %s AND attribute_id = %s",
            (entity_id, attribute_id),
        )
        return cur.rowcount > 0

    async def count_by_attribute(self, attribute_id: UUID) -> int:
        cur = await self._conn.execute(
            "SELECT count(*) FROM attribute_value WHERE attribute_id = %s",
            (attribute_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else 0

    async def batch_get(
        self, entity_ids: Iterable[UUID], attribute_ids: Iterable[UUID]
    ) -> dict[UUID, dict[UUID, TypedValue]]:
        """Load values for every (entity, attribute) pair in one query."""
        entities = list(set(entity_ids))
        attributes = list(set(attribute_ids))
        if not entities or not attributes:
            return {}
        cur = await self._conn.execute(
            f"SELECT v.entity_id, v.attribute_id, a.data_type, {_SLOT_COLUMNS} "
            "FROM attribute_value v JOIN attribute a ON a.id = v.attribute_id "
            "WHERE v.entity_id = ANY(%s) AND v.attribute_id = ANY(%s)",
            (entities, attributes),
        )
        result: dict[UUID, dict[UUID, TypedValue]] = {}
        for r in await cur.fetchall():
            typed = _decode(r[0], r[1], r[2], r[3:])
            if typed is not None:
                result.setdefault(r[0], {})[r[1]] = typed
        return result
