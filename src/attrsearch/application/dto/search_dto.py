"""Search DTOs."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from attrsearch.domain.value_objects import SearchFilter

T = TypeVar("T")


@dataclass
class SearchPage(Generic[T]):
    """One page of matched candidates."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size else 0

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total


@dataclass
class SearchInput:
    """Ad-hoc search request."""

    filters: list[SearchFilter] = field(default_factory=list)
    page: int = 0
    size: int | None = None
    sort: str | None = None
    scope_to_accessible: bool = False
