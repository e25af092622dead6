"""Execute saved search use case."""

from uuid import UUID

from attrsearch.application.dto.search_dto import SearchPage
from attrsearch.application.ports import FilterCodec
from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.application.use_cases.saved_search.common import load_owned
from attrsearch.domain.entities import Actor, Listing
from attrsearch.domain.value_objects import ListingStatus, SortSpec


class ExecuteSavedSearchUseCase:
    """Decode the caller's saved filters and run them over ACTIVE listings."""

    def __init__(
        self,
        unit_of_work_factory: type,
        engine: FilterMatchingEngine,
        codec: FilterCodec,
        default_page_size: int = 20,
        default_sort: str = "createdAt,desc",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._engine = engine
        self._codec = codec
        self._default_page_size = default_page_size
        self._default_sort = default_sort

    async def execute(
        self,
        actor: Actor,
        saved_search_id: UUID,
        page: int | None = None,
        size: int | None = None,
        sort: str | None = None,
    ) -> SearchPage[Listing]:
        """Execute. FilterDecodeError if the stored filters cannot be decoded."""
        sort_spec = SortSpec.parse(sort or self._default_sort)

        async with self._uow_factory() as uow:
            saved = await load_owned(uow, saved_search_id, actor.user_id)
            filters = self._codec.decode(saved.filters_encoded)
            candidates = await uow.listings.list_by_status(ListingStatus.ACTIVE)
            return await self._engine.search(
                uow,
                candidates,
                filters,
                page if page is not None else 0,
                size if size is not None else self._default_page_size,
                sort_spec,
            )
