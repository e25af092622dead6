"""Add supervisor relationship use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from attrsearch.domain.entities import HierarchyEdge
from attrsearch.domain.exceptions import (
    Conflict,
    CycleDetected,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from attrsearch.domain.services.hierarchy_graph import HierarchyGraph
from attrsearch.domain.value_objects import can_supervise

logger = logging.getLogger(__name__)


class AddSupervisorUseCase:
    """Insert a supervisor -> subordinate edge, keeping the graph acyclic.

    The graph lock is taken before the edges are read, so the reachability
    check and the insert form one unit against concurrent writers.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, supervisor_id: UUID, subordinate_id: UUID) -> HierarchyEdge:
        if supervisor_id == subordinate_id:
            raise ValidationError("A user cannot supervise themselves")

        async with self._uow_factory() as uow:
            supervisor = await uow.users.get_by_id(supervisor_id)
            if not supervisor:
                raise NotFound("Supervisor", supervisor_id)
            subordinate = await uow.users.get_by_id(subordinate_id)
            if not subordinate:
                raise NotFound("Subordinate", subordinate_id)

            if not can_supervise(supervisor.role, subordinate.role):
                raise PermissionDenied(
                    f"{supervisor.role} users cannot supervise {subordinate.role} users"
                )

            await uow.hierarchy.lock()
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            if graph.has_edge(supervisor_id, subordinate_id):
                raise Conflict("Hierarchy relationship already exists")
            if graph.reaches(subordinate_id, supervisor_id):
                raise CycleDetected(
                    "Cannot create supervisor relationship: would create circular reference"
                )
            if graph.reaches(supervisor_id, subordinate_id):
                raise PermissionDenied(
                    "Cannot create supervisor relationship: subordinate is already reachable"
                )

            edge = HierarchyEdge(
                supervisor_id=supervisor_id,
                subordinate_id=subordinate_id,
                created_at=datetime.now(UTC),
            )
            await uow.hierarchy.create(edge)

        logger.info("Added hierarchy edge %s -> %s", supervisor_id, subordinate_id)
        return edge
