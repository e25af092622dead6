"""Ad-hoc listing search use case."""

from attrsearch.application.dto.search_dto import SearchInput, SearchPage
from attrsearch.application.ports import AccessChecker
from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.domain.entities import Actor, Listing
from attrsearch.domain.value_objects import ListingStatus, SortSpec


class SearchListingsUseCase:
    """Run ad-hoc filters over ACTIVE listings."""

    def __init__(
        self,
        unit_of_work_factory: type,
        engine: FilterMatchingEngine,
        access_checker: AccessChecker,
        default_page_size: int = 20,
        default_sort: str = "createdAt,desc",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._engine = engine
        self._access_checker = access_checker
        self._default_page_size = default_page_size
        self._default_sort = default_sort

    async def execute(self, actor: Actor, input_data: SearchInput) -> SearchPage[Listing]:
        """Search. With scope_to_accessible, only listings of users the actor can see."""
        sort = SortSpec.parse(input_data.sort or self._default_sort)
        size = input_data.size if input_data.size is not None else self._default_page_size

        owner_ids = None
        if input_data.scope_to_accessible and not actor.role.is_admin:
            owner_ids = await self._access_checker.accessible_user_ids(actor.user_id)

        async with self._uow_factory() as uow:
            candidates = await uow.listings.list_by_status(
                ListingStatus.ACTIVE, owner_ids=owner_ids
            )
            return await self._engine.search(
                uow, candidates, input_data.filters, input_data.page, size, sort
            )
