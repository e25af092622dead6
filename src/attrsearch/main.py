"""Application entry point and composition root."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from psycopg_pool import AsyncConnectionPool

from attrsearch import __version__
from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.application.use_cases.attribute.attribute_options import (
    AddAttributeOptionUseCase,
    DeleteAttributeOptionUseCase,
    ListAttributeOptionsUseCase,
)
from attrsearch.application.use_cases.attribute.create_attribute import CreateAttributeUseCase
from attrsearch.application.use_cases.attribute.delete_attribute import DeleteAttributeUseCase
from attrsearch.application.use_cases.attribute.list_attributes import ListAttributesUseCase
from attrsearch.application.use_cases.attribute.reorder_attributes import (
    ReorderAttributesUseCase,
)
from attrsearch.application.use_cases.attribute.update_attribute import UpdateAttributeUseCase
from attrsearch.application.use_cases.hierarchy.add_supervisor import AddSupervisorUseCase
from attrsearch.application.use_cases.hierarchy.remove_supervisor import (
    RemoveSupervisorUseCase,
)
from attrsearch.application.use_cases.saved_search.create_saved_search import (
    CreateSavedSearchUseCase,
)
from attrsearch.application.use_cases.saved_search.delete_saved_search import (
    DeleteSavedSearchUseCase,
)
from attrsearch.application.use_cases.saved_search.execute_saved_search import (
    ExecuteSavedSearchUseCase,
)
from attrsearch.application.use_cases.saved_search.get_saved_search import (
    GetSavedSearchUseCase,
    ListSavedSearchesUseCase,
)
from attrsearch.application.use_cases.saved_search.update_saved_search import (
    UpdateSavedSearchUseCase,
)
from attrsearch.application.use_cases.search.search_listings import SearchListingsUseCase
from attrsearch.application.use_cases.value.delete_value import DeleteAttributeValueUseCase
from attrsearch.application.use_cases.value.get_value import (
    GetAttributeValueUseCase,
    ListAttributeValuesUseCase,
)
from attrsearch.application.use_cases.value.set_value import SetAttributeValueUseCase
from attrsearch.config import Settings, get_settings
from attrsearch.infrastructure.codec.json_filter_codec import JsonFilterCodec
from attrsearch.infrastructure.permission.hierarchy_access_checker import (
    HierarchyAccessChecker,
)
from attrsearch.infrastructure.persistence.postgres.connection import create_pool
from attrsearch.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from attrsearch.logging_config import setup_logging


@dataclass
class AttrSearchCore:
    """Wired use cases. The pool is closed; callers open it before use."""

    pool: AsyncConnectionPool
    engine: FilterMatchingEngine
    codec: JsonFilterCodec
    access_checker: HierarchyAccessChecker
    create_attribute: CreateAttributeUseCase
    update_attribute: UpdateAttributeUseCase
    delete_attribute: DeleteAttributeUseCase
    reorder_attributes: ReorderAttributesUseCase
    list_attributes: ListAttributesUseCase
    add_option: AddAttributeOptionUseCase
    list_options: ListAttributeOptionsUseCase
    delete_option: DeleteAttributeOptionUseCase
    set_value: SetAttributeValueUseCase
    get_value: GetAttributeValueUseCase
    list_values: ListAttributeValuesUseCase
    delete_value: DeleteAttributeValueUseCase
    search_listings: SearchListingsUseCase
    create_saved_search: CreateSavedSearchUseCase
    update_saved_search: UpdateSavedSearchUseCase
    delete_saved_search: DeleteSavedSearchUseCase
    get_saved_search: GetSavedSearchUseCase
    list_saved_searches: ListSavedSearchesUseCase
    execute_saved_search: ExecuteSavedSearchUseCase
    add_supervisor: AddSupervisorUseCase
    remove_supervisor: RemoveSupervisorUseCase


def main() -> None:
    """CLI entry point."""
    print(f"attrsearch v{__version__}")


def create_core(settings: Settings | None = None) -> AttrSearchCore:
    """Composition root - build every use case with its dependencies."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    reference_tz = ZoneInfo(settings.reference_timezone)

    engine = FilterMatchingEngine(reference_tz, max_page_size=settings.max_page_size)
    codec = JsonFilterCodec()
    access_checker = HierarchyAccessChecker(uow_factory)

    return AttrSearchCore(
        pool=pool,
        engine=engine,
        codec=codec,
        access_checker=access_checker,
        create_attribute=CreateAttributeUseCase(uow_factory),
        update_attribute=UpdateAttributeUseCase(uow_factory),
        delete_attribute=DeleteAttributeUseCase(uow_factory),
        reorder_attributes=ReorderAttributesUseCase(uow_factory),
        list_attributes=ListAttributesUseCase(uow_factory),
        add_option=AddAttributeOptionUseCase(uow_factory),
        list_options=ListAttributeOptionsUseCase(uow_factory),
        delete_option=DeleteAttributeOptionUseCase(uow_factory),
        set_value=SetAttributeValueUseCase(uow_factory, reference_tz),
        get_value=GetAttributeValueUseCase(uow_factory),
        list_values=ListAttributeValuesUseCase(uow_factory),
        delete_value=DeleteAttributeValueUseCase(uow_factory),
        search_listings=SearchListingsUseCase(
            unit_of_work_factory=uow_factory,
            engine=engine,
            access_checker=access_checker,
            default_page_size=settings.default_page_size,
            default_sort=settings.default_sort,
        ),
        create_saved_search=CreateSavedSearchUseCase(uow_factory, engine, codec),
        update_saved_search=UpdateSavedSearchUseCase(uow_factory, engine, codec),
        delete_saved_search=DeleteSavedSearchUseCase(uow_factory),
        get_saved_search=GetSavedSearchUseCase(uow_factory, codec),
        list_saved_searches=ListSavedSearchesUseCase(uow_factory, codec),
        execute_saved_search=ExecuteSavedSearchUseCase(
            unit_of_work_factory=uow_factory,
            engine=engine,
            codec=codec,
            default_page_size=settings.default_page_size,
            default_sort=settings.default_sort,
        ),
        add_supervisor=AddSupervisorUseCase(uow_factory),
        remove_supervisor=RemoveSupervisorUseCase(uow_factory),
    )


if __name__ == "__main__":
    main()
