"""Delete attribute use case."""

import logging
from uuid import UUID

from attrsearch.domain.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


class DeleteAttributeUseCase:
    """Delete attribute that no stored value references."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, attribute_id: UUID) -> None:
        """Delete attribute and its options. Rejected while values exist."""
        async with self._uow_factory() as uow:
            attribute = await uow.attributes.get_by_id(attribute_id)
            if not attribute:
                raise NotFound("Attribute", attribute_id)

            in_use = await uow.values.count_by_attribute(attribute_id)
            if in_use:
                raise Conflict(
                    f"Cannot delete attribute '{attribute.name}' because it is used by "
                    f"{in_use} values"
                )

            await uow.options.delete_by_attribute(attribute_id)
            await uow.attributes.delete(attribute_id)

        logger.info("Deleted attribute '%s' (%s)", attribute.name, attribute_id)
