"""Update attribute use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from attrsearch.application.dto.attribute_dto import AttributeUpdateInput
from attrsearch.domain.entities import Attribute
from attrsearch.domain.exceptions import Conflict, NotFound, ValidationError

logger = logging.getLogger(__name__)


class UpdateAttributeUseCase:
    """Update attribute metadata.

    Changing the data type is allowed but existing values are not migrated:
    values stored under the old type stop matching and read back as absent.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, attribute_id: UUID, input_data: AttributeUpdateInput) -> Attribute:
        """Apply provided fields to the attribute."""
        if input_data.name is not None and not input_data.name.strip():
            raise ValidationError("Attribute name cannot be empty")
        if input_data.display_order is not None and input_data.display_order < 1:
            raise ValidationError("Display order must be >= 1")

        async with self._uow_factory() as uow:
            existing = await uow.attributes.get_by_id(attribute_id)
            if not existing:
                raise NotFound("Attribute", attribute_id)

            updated = replace(existing)
            if input_data.name is not None:
                name = input_data.name.strip()
                if name != existing.name:
                    other = await uow.attributes.get_by_name(name)
                    if other and other.id != attribute_id:
                        raise Conflict(f"Attribute with name '{name}' already exists")
                updated.name = name
            if input_data.is_required is not None:
                updated.is_required = input_data.is_required
            if input_data.is_searchable is not None:
                updated.is_searchable = input_data.is_searchable

            category = input_data.category or existing.category
            if category != existing.category or input_data.display_order is not None:
                siblings = [
                    a
                    for a in await uow.attributes.list_by_category(category)
                    if a.id != attribute_id
                ]
                if input_data.display_order is None:
                    updated.display_order = (
                        max((a.display_order for a in siblings), default=0) + 1
                    )
                elif any(a.display_order == input_data.display_order for a in siblings):
                    raise Conflict(
                        f"Display order {input_data.display_order} is already used in {category}"
                    )
                else:
                    updated.display_order = input_data.display_order
                updated.category = category

            if input_data.data_type is not None and input_data.data_type != existing.data_type:
                logger.warning(
                    "DATA TYPE CHANGE: attribute '%s' (%s) changing from %s to %s; "
                    "existing values may become incompatible",
                    existing.name,
                    existing.id,
                    existing.data_type,
                    input_data.data_type,
                )
                updated.data_type = input_data.data_type

            updated.updated_at = datetime.now(UTC)
            await uow.attributes.update(updated)

        return updated
