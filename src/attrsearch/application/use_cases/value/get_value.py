"""Read attribute value use cases."""

from uuid import UUID

from attrsearch.domain.entities import AttributeValue
from attrsearch.domain.value_objects import TypedValue


class GetAttributeValueUseCase:
    """Get the typed value of one attribute on one entity."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, entity_id: UUID, attribute_id: UUID) -> TypedValue | None:
        async with self._uow_factory() as uow:
            row = await uow.values.get(entity_id, attribute_id)
            return row.value if row else None


class ListAttributeValuesUseCase:
    """List all typed values stored for an entity."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, entity_id: UUID) -> list[AttributeValue]:
        async with self._uow_factory() as uow:
            return await uow.values.list_by_entity(entity_id)
