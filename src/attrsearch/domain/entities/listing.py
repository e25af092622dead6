"""Listing entity - the entity typed values are attached to."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from attrsearch.domain.value_objects import ListingStatus


@dataclass
class Listing:
    """Listing owned by a user; search candidate when ACTIVE."""

    id: UUID
    owner_id: UUID
    title: str
    status: ListingStatus
    created_at: datetime
    updated_at: datetime
    price: Decimal | None = None
