"""Filter matching engine - validate, batch-fetch, scan, sort, page.

Search is a full in-memory scan of the candidate list: cost grows linearly
with the number of candidates. Filtering is never pushed down to the store.
"""

import logging
from collections.abc import Sequence
from datetime import tzinfo
from typing import Protocol, TypeVar
from uuid import UUID

from attrsearch.application.dto.search_dto import SearchPage
from attrsearch.application.ports import UnitOfWork
from attrsearch.domain.entities import Attribute
from attrsearch.domain.exceptions import ValidationError
from attrsearch.domain.services.filter_matching import (
    FilterMatcher,
    ValueCache,
    validate_filter,
)
from attrsearch.domain.value_objects import SearchFilter, SortSpec

logger = logging.getLogger(__name__)


class Candidate(Protocol):
    @property
    def id(self) -> UUID: ...


C = TypeVar("C", bound=Candidate)


def sort_candidates(items: Sequence[C], sort: SortSpec) -> list[C]:
    """Stable sort on sort.field; candidates without a value go last."""
    present = [c for c in items if getattr(c, sort.field, None) is not None]
    missing = [c for c in items if getattr(c, sort.field, None) is None]
    present.sort(key=lambda c: getattr(c, sort.field), reverse=sort.descending)
    return present + missing


class FilterMatchingEngine:
    """Evaluates typed filters against a batch of candidates' values."""

    def __init__(self, reference_tz: tzinfo, max_page_size: int = 100) -> None:
        self._matcher = FilterMatcher(reference_tz)
        self._max_page_size = max_page_size

    async def validate(
        self, uow: UnitOfWork, filters: Sequence[SearchFilter]
    ) -> dict[UUID, Attribute]:
        """Validate every filter; the first violation aborts."""
        if not filters:
            raise ValidationError("At least one filter is required")
        attributes = await uow.attributes.get_many({f.attribute_id for f in filters})
        for search_filter in filters:
            validate_filter(search_filter, attributes.get(search_filter.attribute_id))
        return attributes

    def evaluate(
        self, entity_id: UUID, search_filter: SearchFilter, value_cache: ValueCache
    ) -> bool:
        return self._matcher.evaluate(entity_id, search_filter, value_cache)

    def match_all(
        self, entity_id: UUID, filters: Sequence[SearchFilter], value_cache: ValueCache
    ) -> bool:
        return self._matcher.match_all(entity_id, filters, value_cache)

    async def search(
        self,
        uow: UnitOfWork,
        candidates: Sequence[C],
        filters: Sequence[SearchFilter],
        page: int,
        size: int,
        sort: SortSpec,
    ) -> SearchPage[C]:
        """Filter all candidates in memory, sort, then slice the requested page."""
        if page < 0:
            raise ValidationError("Page must be >= 0")
        if size < 1 or size > self._max_page_size:
            raise ValidationError(f"Page size must be between 1 and {self._max_page_size}")
        await self.validate(uow, filters)

        entity_ids = [c.id for c in candidates]
        attribute_ids = list(dict.fromkeys(f.attribute_id for f in filters))
        value_cache: ValueCache = (
            await uow.values.batch_get(entity_ids, attribute_ids) if entity_ids else {}
        )

        matched = [c for c in candidates if self._matcher.match_all(c.id, filters, value_cache)]
        ordered = sort_candidates(matched, sort)
        start = page * size
        logger.debug(
            "Search matched %d of %d candidates with %d filters",
            len(matched),
            len(candidates),
            len(filters),
        )
        return SearchPage(
            items=ordered[start : start + size],
            total=len(matched),
            page=page,
            size=size,
        )
