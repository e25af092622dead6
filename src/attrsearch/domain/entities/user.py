"""User entity and request actor."""

from dataclasses import dataclass
from uuid import UUID

from attrsearch.domain.value_objects import Role


@dataclass
class User:
    """User - node of the access hierarchy."""

    id: UUID
    username: str
    role: Role
    active: bool = True


@dataclass(frozen=True)
class Actor:
    """Already-authenticated caller identity."""

    user_id: UUID
    role: Role
