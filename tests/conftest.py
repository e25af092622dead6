"""Pytest fixtures for attrsearch tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from attrsearch.application.search.filter_matching_engine import FilterMatchingEngine
from attrsearch.domain.entities import (
    Actor,
    Attribute,
    AttributeOption,
    AttributeValue,
    HierarchyEdge,
    Listing,
    SavedSearch,
    User,
)
from attrsearch.domain.value_objects import (
    AttributeCategory,
    DataType,
    ListingStatus,
    Role,
    TypedValue,
    fits_data_type,
)
from attrsearch.infrastructure.codec.json_filter_codec import JsonFilterCodec


# --- Shared in-memory store ---


class FakeDatabase:
    """Tables shared by every FakeUnitOfWork created from one factory."""

    def __init__(self) -> None:
        self.attributes: dict[UUID, Attribute] = {}
        self.options: dict[UUID, AttributeOption] = {}
        self.values: dict[tuple[UUID, UUID], TypedValue] = {}  # (entity_id, attribute_id)
        self.saved_searches: dict[UUID, SavedSearch] = {}
        self.edges: dict[tuple[UUID, UUID], HierarchyEdge] = {}
        self.users: dict[UUID, User] = {}
        self.listings: dict[UUID, Listing] = {}
        self.hierarchy_lock = asyncio.Lock()
        self.batch_calls = 0
        self.commits = 0
        self.rollbacks = 0


_MISSING = object()


class WriteJournal:
    """Undo log of the rows one unit of work has written.

    Rolling back restores only those rows, so commits made by other
    units of work in the meantime survive.
    """

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self._entries: list[tuple[str, object, object]] = []

    def put(self, table: str, key, row) -> None:
        rows = getattr(self._db, table)
        self._entries.append((table, key, rows.get(key, _MISSING)))
        rows[key] = row

    def pop(self, table: str, key):
        rows = getattr(self._db, table)
        if key not in rows:
            return None
        self._entries.append((table, key, rows[key]))
        return rows.pop(key)

    def undo(self) -> None:
        for table, key, previous in reversed(self._entries):
            rows = getattr(self._db, table)
            if previous is _MISSING:
                rows.pop(key, None)
            else:
                rows[key] = previous
        self._entries.clear()

    def clear(self) -> None:
        self._entries.clear()


# --- Fake repositories ---


class FakeAttributeRepository:
    """In-memory attribute repository."""

    def __init__(self, db: FakeDatabase, journal: WriteJournal) -> None:
        self._db = db
        self._journal = journal

    def _sorted(self, items: Iterable[Attribute]) -> list[Attribute]:
        return sorted(
            (replace(a) for a in items),
            key=lambda a: (a.category.value, a.display_order, a.name),
        )

    async def get_by_id(self, attribute_id: UUID) -> Attribute | None:
        attribute = self._db.attributes.get(attribute_id)
        return replace(attribute) if attribute else None

    async def get_many(self, attribute_ids: Iterable[UUID]) -> dict[UUID, Attribute]:
        return {
            i: replace(self._db.attributes[i])
            for i in set(attribute_ids)
            if i in self._db.attributes
        }

    async def get_by_name(self, name: str) -> Attribute | None:
        for attribute in self._db.attributes.values():
            if attribute.name == name:
                return replace(attribute)
        return None

    async def list_all(self) -> list[Attribute]:
        return self._sorted(self._db.attributes.values())

    async def list_searchable(self) -> list[Attribute]:
        return self._sorted(a for a in self._db.attributes.values() if a.is_searchable)

    async def list_by_category(self, category: AttributeCategory) -> list[Attribute]:
        return self._sorted(a for a in self._db.attributes.values() if a.category == category)

    async def create(self, attribute: Attribute) -> Attribute:
        self._journal.put("attributes", attribute.id, replace(attribute))
        return attribute

    async def update(self, attribute: Attribute) -> None:
        self._journal.put("attributes", attribute.id, replace(attribute))

    async def delete(self, attribute_id: UUID) -> None:
        self._journal.pop("attributes", attribute_id)

    async def set_display_orders(self, orders: Mapping[UUID, int]) -> None:
        for attribute_id, order in orders.items():
            current = self._db.attributes[attribute_id]
            self._journal.put("attributes", attribute_id, replace(current, display_order=order))


class FakeAttributeOptionRepository:
    """In-memory attribute option repository."""

    def __init__(self, db: FakeDatabase, journal: WriteJournal) -> None:
        self._db = db
        self._journal = journal

    async def get_by_id(self, option_id: UUID) -> AttributeOption | None:
        return self._db.options.get(option_id)

    async def list_by_attribute(self, attribute_id: UUID) -> list[AttributeOption]:
        items = [o for o in self._db.options.values() if o.attribute_id == attribute_id]
        items.sort(key=lambda o: (o.display_order, o.option_value))
        return items

    async def create(self, option: AttributeOption) -> AttributeOption:
        self._journal.put("options", option.id, option)
        return option

    async def delete(self, option_id: UUID) -> None:
        self._journal.pop("options", option_id)

    async def delete_by_attribute(self, attribute_id: UUID) -> None:
        for option_id in [o.id for o in self._db.options.values() if o.attribute_id == attribute_id]:
            self._journal.pop("options", option_id)


class FakeAttributeValueRepository:
    """In-memory value repository; values not fitting the attribute's type read as absent."""

    def __init__(self, db: FakeDatabase, journal: WriteJournal) -> None:
        self._db = db
        self._journal = journal

    def _read(self, entity_id: UUID, attribute_id: UUID) -> TypedValue | None:
        value = self._db.values.get((entity_id, attribute_id))
        attribute = self._db.attributes.get(attribute_id)
        if value is None or attribute is None or not fits_data_type(value, attribute.data_type):
            return None
        return value

    async def get(self, entity_id: UUID, attribute_id: UUID) -> AttributeValue | None:
        value = self._read(entity_id, attribute_id)
        if value is None:
            return None
        return AttributeValue(entity_id=entity_id, attribute_id=attribute_id, value=value)

    async def list_by_entity(self, entity_id: UUID) -> list[AttributeValue]:
        result = []
        for e, a in list(self._db.values):
            if e != entity_id:
                continue
            value = self._read(e, a)
            if value is not None:
                result.append(AttributeValue(entity_id=e, attribute_id=a, value=value))
        return result

    async def upsert(self, value: AttributeValue) -> AttributeValue:
        self._journal.put("values", (value.entity_id, value.attribute_id), value.value)
        return value

    async def delete(self, entity_id: UUID, attribute_id: UUID) -> bool:
        return self._journal.pop("values", (entity_id, attribute_id)) is not None

    async def count_by_attribute(self, attribute_id: UUID) -> int:
        return sum(1 for _, a in self._db.values if a == attribute_id)

    async def batch_get(
        self, entity_ids: Iterable[UUID], attribute_ids: Iterable[UUID]
    ) -> dict[UUID, dict[UUID, TypedValue]]:
        self._db.batch_calls += 1
        entities = set(entity_ids)
        attributes = set(attribute_ids)
        result: dict[UUID, dict[UUID, TypedValue]] = {}
        for e, a in self._db.values:
            if e in entities and a in attributes:
                value = self._read(e, a)
                if value is not None:
                    result.setdefault(e, {})[a] = value
        return result


class FakeSavedSearchRepository:
    """In-memory saved search repository."""

    def __init__(self, db: FakeDatabase, journal: WriteJournal) -> None:
        self._db = db
        self._journal = journal

    async def get_by_id(self, saved_search_id: UUID) -> SavedSearch | None:
        saved = self._db.saved_searches.get(saved_search_id)
        return replace(saved) if saved else None

    async def list_by_owner(self, owner_id: UUID) -> list[SavedSearch]:
        items = [replace(s) for s in self._db.saved_searches.values() if s.owner_id == owner_id]
        items.sort(key=lambda s: s.created_at, reverse=True)
        return items

    async def create(self, saved_search: SavedSearch) -> SavedSearch:
        self._journal.put("saved_searches", saved_search.id, replace(saved_search))
        return saved_search

    async def update(self, saved_search: SavedSearch) -> None:
        self._journal.put("saved_searches", saved_search.id, replace(saved_search))

    async def delete(self, saved_search_id: UUID) -> None:
        self._journal.pop("saved_searches", saved_search_id)


class FakeHierarchyRepository:
    """In-memory edge repository; lock() holds the database-wide hierarchy lock."""

    def __init__(self, db: FakeDatabase, journal: WriteJournal) -> None:
        self._db = db
        self._journal = journal
        self.locked = False

    async def lock(self) -> None:
        if not self.locked:
            await self._db.hierarchy_lock.acquire()
            self.locked = True

    def release(self) -> None:
        if self.locked:
            self._db.hierarchy_lock.release()
            self.locked = False

    async def list_edges(self) -> list[HierarchyEdge]:
        # Yield to the loop like a real query so concurrent writers interleave.
        await asyncio.sleep(0)
        return list(self._db.edges.values())

    async def exists(self, supervisor_id: UUID, subordinate_id: UUID) -> bool:
        return (supervisor_id, subordinate_id) in self._db.edges

    async def create(self, edge: HierarchyEdge) -> HierarchyEdge:
        self._journal.put("edges", (edge.supervisor_id, edge.subordinate_id), edge)
        return edge

    async def delete(self, supervisor_id: UUID, subordinate_id: UUID) -> None:
        self._journal.pop("edges", (supervisor_id, subordinate_id))


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._db.users.get(user_id)

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        return {u: self._db.users[u] for u in set(user_ids) if u in self._db.users}


class FakeListingRepository:
    """In-memory listing repository; preserves insertion order."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        return self._db.listings.get(listing_id)

    async def list_by_status(
        self,
        status: ListingStatus,
        *,
        owner_ids: Iterable[UUID] | None = None,
    ) -> list[Listing]:
        owners = set(owner_ids) if owner_ids is not None else None
        return [
            listing
            for listing in self._db.listings.values()
            if listing.status == status and (owners is None or listing.owner_id in owners)
        ]


class FakeUnitOfWork:
    """In-memory Unit of Work over a shared FakeDatabase."""

    def __init__(self, db: FakeDatabase | None = None) -> None:
        self.db = db or FakeDatabase()
        self.journal = WriteJournal(self.db)
        self.attributes = FakeAttributeRepository(self.db, self.journal)
        self.options = FakeAttributeOptionRepository(self.db, self.journal)
        self.values = FakeAttributeValueRepository(self.db, self.journal)
        self.saved_searches = FakeSavedSearchRepository(self.db, self.journal)
        self.hierarchy = FakeHierarchyRepository(self.db, self.journal)
        self.users = FakeUserRepository(self.db)
        self.listings = FakeListingRepository(self.db)

    async def commit(self) -> None:
        self.journal.clear()
        self.db.commits += 1

    async def rollback(self) -> None:
        self.journal.undo()
        self.db.rollbacks += 1


def make_uow_factory(db: FakeDatabase):
    """Factory mirroring create_uow_factory: commit on success, roll back on error."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = FakeUnitOfWork(db)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise
        finally:
            uow.hierarchy.release()

    return factory


# --- Seeding helpers ---

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def add_user(db: FakeDatabase, role: Role = Role.AGENT, username: str | None = None) -> User:
    user_id = uuid4()
    user = User(id=user_id, username=username or f"user-{user_id.hex[:8]}", role=role)
    db.users[user.id] = user
    return user


def add_listing(
    db: FakeDatabase,
    owner: User | None = None,
    title: str = "Listing",
    status: ListingStatus = ListingStatus.ACTIVE,
    created_offset_days: int = 0,
    price: Decimal | None = None,
) -> Listing:
    owner = owner or add_user(db)
    created = BASE_TIME + timedelta(days=created_offset_days)
    listing = Listing(
        id=uuid4(),
        owner_id=owner.id,
        title=title,
        status=status,
        created_at=created,
        updated_at=created,
        price=price,
    )
    db.listings[listing.id] = listing
    return listing


def add_attribute(
    db: FakeDatabase,
    name: str,
    data_type: DataType,
    category: AttributeCategory = AttributeCategory.BASIC,
    display_order: int | None = None,
    is_required: bool = False,
    is_searchable: bool = True,
    options: list[str] | None = None,
) -> Attribute:
    if display_order is None:
        display_order = 1 + max(
            (a.display_order for a in db.attributes.values() if a.category == category),
            default=0,
        )
    attribute = Attribute(
        id=uuid4(),
        name=name,
        data_type=data_type,
        category=category,
        display_order=display_order,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
        is_required=is_required,
        is_searchable=is_searchable,
    )
    db.attributes[attribute.id] = attribute
    for position, value in enumerate(options or [], start=1):
        option = AttributeOption(
            id=uuid4(), attribute_id=attribute.id, option_value=value, display_order=position
        )
        db.options[option.id] = option
    return attribute


def set_value(db: FakeDatabase, entity: Listing, attribute: Attribute, value: TypedValue) -> None:
    db.values[(entity.id, attribute.id)] = value


def actor_for(user: User) -> Actor:
    return Actor(user_id=user.id, role=user.role)


# --- Fixtures ---


@pytest.fixture
def db() -> FakeDatabase:
    """Fresh in-memory store for each test."""
    return FakeDatabase()


@pytest.fixture
def uow_factory(db: FakeDatabase):
    """Factory returning async context manager with FakeUnitOfWork over db."""
    return make_uow_factory(db)


@pytest.fixture
def engine() -> FilterMatchingEngine:
    return FilterMatchingEngine(UTC, max_page_size=100)


@pytest.fixture
def codec() -> JsonFilterCodec:
    return JsonFilterCodec()
