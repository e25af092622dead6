"""Saved search DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from attrsearch.domain.value_objects import SearchFilter


@dataclass
class SavedSearchInput:
    """Input for creating or replacing a saved search."""

    name: str
    filters: list[SearchFilter]
    description: str | None = None


@dataclass
class SavedSearchOutput:
    """Saved search with its filters decoded."""

    id: UUID
    owner_id: UUID
    name: str
    description: str | None
    filters: list[SearchFilter]
    created_at: datetime
    updated_at: datetime
