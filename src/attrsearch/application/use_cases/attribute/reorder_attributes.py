"""Reorder attributes use case."""

from uuid import UUID

from attrsearch.domain.exceptions import NotFound, ValidationError
from attrsearch.domain.value_objects import AttributeCategory


class ReorderAttributesUseCase:
    """Reassign display order within a category as one batch."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, category: AttributeCategory, attribute_ids: list[UUID]) -> None:
        """Give attribute_ids positions 1..N; other attributes of the category follow."""
        if len(set(attribute_ids)) != len(attribute_ids):
            raise ValidationError("Attribute ids must not repeat")

        async with self._uow_factory() as uow:
            found = await uow.attributes.get_many(attribute_ids)
            for attribute_id in attribute_ids:
                attribute = found.get(attribute_id)
                if not attribute:
                    raise NotFound("Attribute", attribute_id)
                if attribute.category != category:
                    raise ValidationError(
                        f"Attribute {attribute_id} is not in category {category}"
                    )

            requested = set(attribute_ids)
            rest = [
                a.id
                for a in await uow.attributes.list_by_category(category)
                if a.id not in requested
            ]
            orders = {
                attribute_id: position
                for position, attribute_id in enumerate([*attribute_ids, *rest], start=1)
            }
            await uow.attributes.set_display_orders(orders)
