"""Update saved search use case."""

from datetime import UTC, datetime
from uuid import UUID

from attrsearch.application.dto.saved_search_dto import SavedSearchInput
from attrsearch.application.ports import FilterCodec
from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.application.use_cases.saved_search.common import (
    load_owned,
    validate_saved_search_input,
)
from attrsearch.domain.entities import Actor, SavedSearch


class UpdateSavedSearchUseCase:
    """Replace name, description and filters of the caller's saved search."""

    def __init__(
        self,
        unit_of_work_factory: type,
        engine: FilterMatchingEngine,
        codec: FilterCodec,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._engine = engine
        self._codec = codec

    async def execute(
        self, actor: Actor, saved_search_id: UUID, input_data: SavedSearchInput
    ) -> SavedSearch:
        validate_saved_search_input(input_data)

        async with self._uow_factory() as uow:
            saved = await load_owned(uow, saved_search_id, actor.user_id)
            await self._engine.validate(uow, input_data.filters)

            saved.name = input_data.name.strip()
            saved.description = input_data.description
            saved.filters_encoded = self._codec.encode(input_data.filters)
            saved.updated_at = datetime.now(UTC)
            await uow.saved_searches.update(saved)

        return saved
