"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from attrsearch.application.ports.repositories import (
    AttributeOptionRepository,
    AttributeRepository,
    AttributeValueRepository,
    HierarchyRepository,
    ListingRepository,
    SavedSearchRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def attributes(self) -> AttributeRepository: ...

    @property
    def options(self) -> AttributeOptionRepository: ...

    @property
    def values(self) -> AttributeValueRepository: ...

    @property
    def saved_searches(self) -> SavedSearchRepository: ...

    @property
    def hierarchy(self) -> HierarchyRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def listings(self) -> ListingRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
