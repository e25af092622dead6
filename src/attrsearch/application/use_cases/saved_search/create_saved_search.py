"""Create saved search use case."""

from datetime import UTC, datetime
from uuid import uuid4

from attrsearch.application.dto.saved_search_dto import SavedSearchInput
from attrsearch.application.ports import FilterCodec
from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.application.use_cases.saved_search.common import validate_saved_search_input
from attrsearch.domain.entities import Actor, SavedSearch


class CreateSavedSearchUseCase:
    """Persist a named filter set owned by the caller."""

    def __init__(
        self,
        unit_of_work_factory: type,
        engine: FilterMatchingEngine,
        codec: FilterCodec,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._engine = engine
        self._codec = codec

    async def execute(self, actor: Actor, input_data: SavedSearchInput) -> SavedSearch:
        validate_saved_search_input(input_data)

        async with self._uow_factory() as uow:
            await self._engine.validate(uow, input_data.filters)

            now = datetime.now(UTC)
            saved = SavedSearch(
                id=uuid4(),
                owner_id=actor.user_id,
                name=input_data.name.strip(),
                description=input_data.description,
                filters_encoded=self._codec.encode(input_data.filters),
                created_at=now,
                updated_at=now,
            )
            await uow.saved_searches.create(saved)

        return saved
