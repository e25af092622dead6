"""Unit tests for FilterMatchingEngine search, paging and sorting."""

from datetime import UTC
from decimal import Decimal
from types import SimpleNamespace

import pytest

from attrsearch.application.search.filter_matching_engine import (
    FilterMatchingEngine,
    sort_candidates,
)
from attrsearch.domain.exceptions import ValidationError
from attrsearch.domain.value_objects import (
    DataType,
    MultiSelectValue,
    NumberValue,
    SearchFilter,
    SortSpec,
)

from tests.conftest import FakeUnitOfWork, add_attribute, add_listing, set_value


def _price_filter(attribute, lo="100000", hi="500000") -> SearchFilter:
    return SearchFilter(
        attribute_id=attribute.id,
        data_type=DataType.NUMBER,
        min_value=Decimal(lo),
        max_value=Decimal(hi),
    )


@pytest.fixture
def seeded(db):
    price = add_attribute(db, "Price", DataType.NUMBER)
    features = add_attribute(
        db, "Features", DataType.MULTI_SELECT, options=["Pool", "Garage", "Fireplace"]
    )
    listings = []
    for i, amount in enumerate(["250000", "600000", "300000", "450000"]):
        listing = add_listing(db, title=f"L{i}", created_offset_days=i)
        set_value(db, listing, price, NumberValue(Decimal(amount)))
        listings.append(listing)
    no_value = add_listing(db, title="no price", created_offset_days=10)
    set_value(db, listings[0], features, MultiSelectValue.of(["Garage", "Fireplace"]))
    set_value(db, listings[2], features, MultiSelectValue.of(["Fireplace"]))
    return SimpleNamespace(price=price, features=features, listings=listings, no_value=no_value)


@pytest.mark.asyncio
async def test_search_filters_sorts_and_counts(db, engine: FilterMatchingEngine, seeded) -> None:
    uow = FakeUnitOfWork(db)
    candidates = [*seeded.listings, seeded.no_value]

    page = await engine.search(
        uow, candidates, [_price_filter(seeded.price)], 0, 10, SortSpec.parse("createdAt,desc")
    )

    assert page.total == 3
    assert [item.title for item in page.items] == ["L3", "L2", "L0"]


@pytest.mark.asyncio
async def test_search_fetches_values_in_one_batch(db, engine, seeded) -> None:
    uow = FakeUnitOfWork(db)
    filters = [
        _price_filter(seeded.price),
        SearchFilter(
            attribute_id=seeded.features.id,
            data_type=DataType.MULTI_SELECT,
            selected_values=("Pool", "Garage"),
        ),
    ]

    page = await engine.search(uow, seeded.listings, filters, 0, 10, SortSpec.parse("title,asc"))

    assert db.batch_calls == 1
    assert [item.title for item in page.items] == ["L0"]


@pytest.mark.asyncio
async def test_search_pages_after_sorting(db, engine, seeded) -> None:
    uow = FakeUnitOfWork(db)
    sort = SortSpec.parse("title,asc")
    filters = [_price_filter(seeded.price, "0", "1000000")]

    first = await engine.search(uow, seeded.listings, filters, 0, 3, sort)
    second = await engine.search(uow, seeded.listings, filters, 1, 3, sort)

    assert [i.title for i in first.items] == ["L0", "L1", "L2"]
    assert [i.title for i in second.items] == ["L3"]
    assert first.total == second.total == 4
    assert first.total_pages == 2
    assert first.has_next and not second.has_next


@pytest.mark.asyncio
async def test_search_page_past_end_is_empty(db, engine, seeded) -> None:
    page = await engine.search(
        FakeUnitOfWork(db),
        seeded.listings,
        [_price_filter(seeded.price)],
        5,
        10,
        SortSpec.parse("title"),
    )
    assert page.items == []
    assert page.total == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, 101)])
async def test_search_rejects_bad_paging(db, engine, seeded, page, size) -> None:
    with pytest.raises(ValidationError):
        await engine.search(
            FakeUnitOfWork(db),
            seeded.listings,
            [_price_filter(seeded.price)],
            page,
            size,
            SortSpec.parse("title"),
        )


@pytest.mark.asyncio
async def test_search_requires_filters(db, engine, seeded) -> None:
    with pytest.raises(ValidationError, match="At least one filter"):
        await engine.search(FakeUnitOfWork(db), seeded.listings, [], 0, 10, SortSpec.parse("id"))


@pytest.mark.asyncio
async def test_validate_stops_before_fetching_values(db, engine, seeded) -> None:
    bad = SearchFilter(attribute_id=seeded.price.id, data_type=DataType.TEXT, text_value="x")
    with pytest.raises(ValidationError):
        await engine.search(
            FakeUnitOfWork(db), seeded.listings, [bad], 0, 10, SortSpec.parse("id")
        )
    assert db.batch_calls == 0


@pytest.mark.asyncio
async def test_search_with_no_candidates(db, engine, seeded) -> None:
    page = await engine.search(
        FakeUnitOfWork(db), [], [_price_filter(seeded.price)], 0, 10, SortSpec.parse("id")
    )
    assert page.total == 0
    assert db.batch_calls == 0


def test_sort_candidates_is_stable_and_puts_missing_last() -> None:
    a = SimpleNamespace(id=1, price=Decimal("5"))
    b = SimpleNamespace(id=2, price=None)
    c = SimpleNamespace(id=3, price=Decimal("5"))
    d = SimpleNamespace(id=4, price=Decimal("1"))

    ascending = sort_candidates([a, b, c, d], SortSpec.parse("price,asc"))
    descending = sort_candidates([a, b, c, d], SortSpec.parse("price,desc"))

    assert [x.id for x in ascending] == [4, 1, 3, 2]
    assert [x.id for x in descending] == [1, 3, 4, 2]


def test_engine_exposes_evaluate_and_match_all() -> None:
    engine = FilterMatchingEngine(UTC)
    search_filter = SearchFilter(
        attribute_id=1, data_type=DataType.NUMBER, min_value=Decimal("1")
    )
    cache = {"e": {1: NumberValue(Decimal("2"))}}
    assert engine.evaluate("e", search_filter, cache)
    assert engine.match_all("e", [search_filter], cache)
    assert not engine.match_all("missing", [search_filter], cache)
