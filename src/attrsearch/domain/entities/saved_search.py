"""Saved search entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class SavedSearch:
    """Named, reusable filter set owned by one user."""

    id: UUID
    owner_id: UUID
    name: str
    filters_encoded: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
