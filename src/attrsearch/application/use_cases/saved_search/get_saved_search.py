"""Read saved search use cases."""

from uuid import UUID

from attrsearch.application.dto.saved_search_dto import SavedSearchOutput
from attrsearch.application.ports import FilterCodec
from attrsearch.application.use_cases.saved_search.common import load_owned, to_output
from attrsearch.domain.entities import Actor


class GetSavedSearchUseCase:
    """Get one of the caller's saved searches with decoded filters."""

    def __init__(self, unit_of_work_factory: type, codec: FilterCodec) -> None:
        self._uow_factory = unit_of_work_factory
        self._codec = codec

    async def execute(self, actor: Actor, saved_search_id: UUID) -> SavedSearchOutput:
        async with self._uow_factory() as uow:
            saved = await load_owned(uow, saved_search_id, actor.user_id)
        return to_output(saved, self._codec)


class ListSavedSearchesUseCase:
    """List the caller's saved searches, newest first."""

    def __init__(self, unit_of_work_factory: type, codec: FilterCodec) -> None:
        self._uow_factory = unit_of_work_factory
        self._codec = codec

    async def execute(self, actor: Actor) -> list[SavedSearchOutput]:
        async with self._uow_factory() as uow:
            rows = await uow.saved_searches.list_by_owner(actor.user_id)
        rows.sort(key=lambda s: s.created_at, reverse=True)
        return [to_output(s, self._codec) for s in rows]
