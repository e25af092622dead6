"""User roles and supervision eligibility."""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class Role(StrEnum):
    """User roles, highest privilege first."""

    ADMIN = "ADMIN"
    BROKER = "BROKER"
    AGENT = "AGENT"
    ASSISTANT = "ASSISTANT"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_admin(self) -> bool:
        return self is Role.ADMIN


_RANKS = {
    Role.ADMIN: 3,
    Role.BROKER: 2,
    Role.AGENT: 1,
    Role.ASSISTANT: 0,
}


# (supervisor role, subordinate role) -> allowed.
# ASSISTANT is view-only and supervises nobody; no role supervises a higher one.
SUPERVISION_RULES: Mapping[tuple[Role, Role], bool] = MappingProxyType({
    (Role.ADMIN, Role.ADMIN): True,
    (Role.ADMIN, Role.BROKER): True,
    (Role.ADMIN, Role.AGENT): True,
    (Role.ADMIN, Role.ASSISTANT): True,
    (Role.BROKER, Role.ADMIN): False,
    (Role.BROKER, Role.BROKER): True,
    (Role.BROKER, Role.AGENT): True,
    (Role.BROKER, Role.ASSISTANT): True,
    (Role.AGENT, Role.ADMIN): False,
    (Role.AGENT, Role.BROKER): False,
    (Role.AGENT, Role.AGENT): True,
    (Role.AGENT, Role.ASSISTANT): True,
    (Role.ASSISTANT, Role.ADMIN): False,
    (Role.ASSISTANT, Role.BROKER): False,
    (Role.ASSISTANT, Role.AGENT): False,
    (Role.ASSISTANT, Role.ASSISTANT): False,
})


def can_supervise(supervisor: Role, subordinate: Role) -> bool:
    """Look up whether supervisor role may supervise subordinate role."""
    return SUPERVISION_RULES.get((supervisor, subordinate), False)
