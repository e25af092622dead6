"""Attribute option use cases - add, list, delete."""

from uuid import UUID, uuid4

from attrsearch.domain.entities import AttributeOption
from attrsearch.domain.exceptions import Conflict, NotFound, ValidationError


class AddAttributeOptionUseCase:
    """Add an allowed value to a select-type attribute."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        attribute_id: UUID,
        option_value: str,
        display_order: int | None = None,
    ) -> AttributeOption:
        value = (option_value or "").strip()
        if not value:
            raise ValidationError("Option value cannot be empty")

        async with self._uow_factory() as uow:
            attribute = await uow.attributes.get_by_id(attribute_id)
            if not attribute:
                raise NotFound("Attribute", attribute_id)
            if not attribute.requires_options:
                raise ValidationError(f"Attribute '{attribute.name}' does not support options")

            existing = await uow.options.list_by_attribute(attribute_id)
            if any(o.option_value.casefold() == value.casefold() for o in existing):
                raise Conflict(
                    f"Option '{value}' already exists on attribute '{attribute.name}'"
                )
            if display_order is None:
                display_order = max((o.display_order for o in existing), default=0) + 1

            option = AttributeOption(
                id=uuid4(),
                attribute_id=attribute_id,
                option_value=value,
                display_order=display_order,
            )
            await uow.options.create(option)
            return option


class ListAttributeOptionsUseCase:
    """List options of an attribute in display order."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, attribute_id: UUID) -> list[AttributeOption]:
        async with self._uow_factory() as uow:
            if not await uow.attributes.get_by_id(attribute_id):
                raise NotFound("Attribute", attribute_id)
            return await uow.options.list_by_attribute(attribute_id)


class DeleteAttributeOptionUseCase:
    """Delete an option; the last option of an attribute in use is kept."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, option_id: UUID) -> None:
        async with self._uow_factory() as uow:
            option = await uow.options.get_by_id(option_id)
            if not option:
                raise NotFound("Attribute option", option_id)

            siblings = await uow.options.list_by_attribute(option.attribute_id)
            if len(siblings) <= 1 and await uow.values.count_by_attribute(option.attribute_id):
                raise Conflict(
                    "Cannot delete the last option of an attribute that has stored values"
                )
            await uow.options.delete(option_id)
