"""Create attribute use case."""

from datetime import UTC, datetime
from uuid import uuid4

from attrsearch.application.dto.attribute_dto import AttributeCreateInput
from attrsearch.domain.entities import Attribute, AttributeOption
from attrsearch.domain.exceptions import Conflict, ValidationError


def clean_option_values(values: list[str]) -> list[str]:
    """Strip option values; reject blanks and case-insensitive duplicates."""
    cleaned = [v.strip() for v in values]
    if any(not v for v in cleaned):
        raise ValidationError("Option values cannot be empty")
    if len({v.casefold() for v in cleaned}) != len(cleaned):
        raise ValidationError("Option values must be unique")
    return cleaned


class CreateAttributeUseCase:
    """Create attribute in the catalog, with initial options for select types."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, input_data: AttributeCreateInput) -> Attribute:
        """Create attribute. Display order defaults to the next slot in its category."""
        name = (input_data.name or "").strip()
        if not name:
            raise ValidationError("Attribute name cannot be empty")
        if input_data.data_type is None:
            raise ValidationError("Attribute data type must be specified")
        if input_data.category is None:
            raise ValidationError("Attribute category must be specified")
        if input_data.display_order is not None and input_data.display_order < 1:
            raise ValidationError("Display order must be >= 1")

        option_values: list[str] = []
        if input_data.options is not None:
            if not input_data.data_type.requires_options:
                raise ValidationError(
                    f"{input_data.data_type} attributes do not support options"
                )
            if not input_data.options:
                raise ValidationError("Select type attributes must have at least one option")
            option_values = clean_option_values(input_data.options)

        async with self._uow_factory() as uow:
            if await uow.attributes.get_by_name(name):
                raise Conflict(f"Attribute with name '{name}' already exists")

            siblings = await uow.attributes.list_by_category(input_data.category)
            display_order = input_data.display_order
            if display_order is None:
                display_order = max((a.display_order for a in siblings), default=0) + 1
            elif any(a.display_order == display_order for a in siblings):
                raise Conflict(
                    f"Display order {display_order} is already used in {input_data.category}"
                )

            now = datetime.now(UTC)
            attribute = Attribute(
                id=uuid4(),
                name=name,
                data_type=input_data.data_type,
                category=input_data.category,
                display_order=display_order,
                created_at=now,
                updated_at=now,
                is_required=bool(input_data.is_required),
                is_searchable=(
                    True if input_data.is_searchable is None else input_data.is_searchable
                ),
            )
            await uow.attributes.create(attribute)

            for position, value in enumerate(option_values, start=1):
                await uow.options.create(
                    AttributeOption(
                        id=uuid4(),
                        attribute_id=attribute.id,
                        option_value=value,
                        display_order=position,
                    )
                )

        return attribute
