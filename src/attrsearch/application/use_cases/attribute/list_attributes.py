"""List attributes use case."""

from attrsearch.domain.entities import Attribute
from attrsearch.domain.value_objects import AttributeCategory


class ListAttributesUseCase:
    """Catalog listings ordered by category, display order and name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def all(self) -> list[Attribute]:
        async with self._uow_factory() as uow:
            return await uow.attributes.list_all()

    async def searchable(self) -> list[Attribute]:
        async with self._uow_factory() as uow:
            return await uow.attributes.list_searchable()

    async def by_category(self, category: AttributeCategory) -> list[Attribute]:
        async with self._uow_factory() as uow:
            return await uow.attributes.list_by_category(category)
