"""Delete saved search use case."""

from uuid import UUID

from attrsearch.application.use_cases.saved_search.common import load_owned
from attrsearch.domain.entities import Actor


class DeleteSavedSearchUseCase:
    """Delete the caller's saved search."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: Actor, saved_search_id: UUID) -> None:
        async with self._uow_factory() as uow:
            saved = await load_owned(uow, saved_search_id, actor.user_id)
            await uow.saved_searches.delete(saved.id)
