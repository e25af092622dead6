"""Hierarchy edge entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class HierarchyEdge:
    """Supervisor -> subordinate relationship."""

    supervisor_id: UUID
    subordinate_id: UUID
    created_at: datetime
