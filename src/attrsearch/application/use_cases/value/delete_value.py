"""Delete attribute value use case."""

from uuid import UUID

from attrsearch.domain.exceptions import NotFound


class DeleteAttributeValueUseCase:
    """Remove the value row for (entity, attribute)."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, entity_id: UUID, attribute_id: UUID) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.values.delete(entity_id, attribute_id)
            if not deleted:
                raise NotFound("Attribute value", f"{entity_id}/{attribute_id}")
