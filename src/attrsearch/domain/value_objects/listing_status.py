"""Listing lifecycle status."""

from enum import StrEnum


class ListingStatus(StrEnum):
    """Listing status; only ACTIVE listings are search candidates."""

    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SOLD = "SOLD"
    WITHDRAWN = "WITHDRAWN"
