"""Set attribute value use case."""

from datetime import tzinfo
from uuid import UUID

from attrsearch.domain.entities import AttributeValue
from attrsearch.domain.exceptions import NotFound, ValidationError
from attrsearch.domain.services.value_coercion import coerce_value, selected_options


class SetAttributeValueUseCase:
    """Store a typed value for (entity, attribute), replacing any previous one."""

    def __init__(self, unit_of_work_factory: type, reference_tz: tzinfo) -> None:
        self._uow_factory = unit_of_work_factory
        self._reference_tz = reference_tz

    async def execute(
        self, entity_id: UUID, attribute_id: UUID, value: object
    ) -> AttributeValue | None:
        """Set value. None clears an optional attribute's value and returns None."""
        async with self._uow_factory() as uow:
            if not await uow.listings.get_by_id(entity_id):
                raise NotFound("Listing", entity_id)
            attribute = await uow.attributes.get_by_id(attribute_id)
            if not attribute:
                raise NotFound("Attribute", attribute_id)

            if value is None:
                if attribute.is_required:
                    raise ValidationError(f"Value is required for attribute '{attribute.name}'")
                await uow.values.delete(entity_id, attribute_id)
                return None

            try:
                typed = coerce_value(attribute.data_type, value, self._reference_tz)
            except ValidationError as e:
                raise ValidationError(
                    f"Invalid value for attribute '{attribute.name}': {e}"
                ) from e

            if attribute.requires_options:
                options = await uow.options.list_by_attribute(attribute_id)
                if not options:
                    raise ValidationError(f"Attribute '{attribute.name}' has no options defined")
                allowed = {o.option_value.casefold() for o in options}
                unknown = [v for v in selected_options(typed) if v.casefold() not in allowed]
                if unknown:
                    raise ValidationError(
                        f"Unknown option(s) for attribute '{attribute.name}': {', '.join(unknown)}"
                    )

            return await uow.values.upsert(
                AttributeValue(entity_id=entity_id, attribute_id=attribute_id, value=typed)
            )
