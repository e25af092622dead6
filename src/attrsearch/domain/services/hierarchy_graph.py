"""Supervisor -> subordinate graph built from a snapshot of edges."""

from collections import defaultdict, deque
from collections.abc import Iterable
from uuid import UUID

from attrsearch.domain.entities import HierarchyEdge


class HierarchyGraph:
    """Read-only adjacency view used for reachability and cycle checks.

    Traversal tracks visited nodes, so it terminates even if the stored
    edges were ever to contain a cycle.
    """

    def __init__(self, edges: Iterable[HierarchyEdge]) -> None:
        self._children: dict[UUID, list[UUID]] = defaultdict(list)
        self._parents: dict[UUID, list[UUID]] = defaultdict(list)
        self._edges: set[tuple[UUID, UUID]] = set()
        for edge in edges:
            self._children[edge.supervisor_id].append(edge.subordinate_id)
            self._parents[edge.subordinate_id].append(edge.supervisor_id)
            self._edges.add((edge.supervisor_id, edge.subordinate_id))

    def has_edge(self, supervisor_id: UUID, subordinate_id: UUID) -> bool:
        return (supervisor_id, subordinate_id) in self._edges

    def direct_subordinates(self, user_id: UUID) -> list[UUID]:
        return list(self._children.get(user_id, ()))

    def direct_supervisors(self, user_id: UUID) -> list[UUID]:
        return list(self._parents.get(user_id, ()))

    def descendants(self, user_id: UUID) -> list[UUID]:
        """All users reachable from user_id, breadth-first, excluding user_id."""
        return self._walk(user_id, self._children)

    def ancestors(self, user_id: UUID) -> list[UUID]:
        return self._walk(user_id, self._parents)

    def reaches(self, source_id: UUID, target_id: UUID) -> bool:
        """True when a path source -> ... -> target exists."""
        if source_id == target_id:
            return True
        return target_id in self.descendants(source_id)

    def connected(self, a: UUID, b: UUID) -> bool:
        """True when a path exists in either direction."""
        return self.reaches(a, b) or self.reaches(b, a)

    @staticmethod
    def _walk(start: UUID, adjacency: dict[UUID, list[UUID]]) -> list[UUID]:
        seen: set[UUID] = {start}
        order: list[UUID] = []
        queue = deque(adjacency.get(start, ()))
        while queue:
            node = queue.popleft()
            if node in seen:
                continue
            seen.add(node)
            order.append(node)
            queue.extend(adjacency.get(node, ()))
        return order
