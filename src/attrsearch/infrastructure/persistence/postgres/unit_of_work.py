"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from attrsearch.infrastructure.persistence.postgres.attribute_repository import (
    PostgresAttributeRepository,
)
from attrsearch.infrastructure.persistence.postgres.hierarchy_repository import (
    PostgresHierarchyRepository,
)
from attrsearch.infrastructure.persistence.postgres.listing_repository import (
    PostgresListingRepository,
)
from attrsearch.infrastructure.persistence.postgres.option_repository import (
    PostgresAttributeOptionRepository,
)
from attrsearch.infrastructure.persistence.postgres.saved_search_repository import (
    PostgresSavedSearchRepository,
)
from attrsearch.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)
from attrsearch.infrastructure.persistence.postgres.value_repository import (
    PostgresAttributeValueRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._attributes = PostgresAttributeRepository(self._conn)
        self._options = PostgresAttributeOptionRepository(self._conn)
        self._values = PostgresAttributeValueRepository(self._conn)
        self._saved_searches = PostgresSavedSearchRepository(self._conn)
        self._hierarchy = PostgresHierarchyRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        self._listings = PostgresListingRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def attributes(self) -> PostgresAttributeRepository:
        return self._attributes

    @property
    def options(self) -> PostgresAttributeOptionRepository:
        return self._options

    @property
    def values(self) -> PostgresAttributeValueRepository:
        return self._values

    @property
    def saved_searches(self) -> PostgresSavedSearchRepository:
        return self._saved_searches

    @property
    def hierarchy(self) -> PostgresHierarchyRepository:
        return self._hierarchy

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def listings(self) -> PostgresListingRepository:
        return self._listings

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Commits when the block exits cleanly, rolls back when it raises.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
