"""Remove supervisor relationship use case."""

import logging
from uuid import UUID

from attrsearch.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RemoveSupervisorUseCase:
    """Delete a supervisor -> subordinate edge."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, supervisor_id: UUID, subordinate_id: UUID) -> None:
        async with self._uow_factory() as uow:
            await uow.hierarchy.lock()
            if not await uow.hierarchy.exists(supervisor_id, subordinate_id):
                raise NotFound("Hierarchy relationship", f"{supervisor_id}/{subordinate_id}")
            await uow.hierarchy.delete(supervisor_id, subordinate_id)

        logger.info("Removed hierarchy edge %s -> %s", supervisor_id, subordinate_id)
