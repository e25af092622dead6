"""Hierarchy access checker - reachability queries over supervisor edges."""

from uuid import UUID

from attrsearch.domain.entities import User
from attrsearch.domain.exceptions import NotFound
from attrsearch.domain.services.hierarchy_graph import HierarchyGraph


class HierarchyAccessChecker:
    """Answers who a user supervises and may see, from the stored edges."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def direct_subordinates(self, user_id: UUID) -> list[User]:
        """Users directly supervised by user_id."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, user_id)
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            return await self._load_users(uow, graph.direct_subordinates(user_id))

    async def supervisors(self, user_id: UUID) -> list[User]:
        """Users directly supervising user_id."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, user_id)
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            return await self._load_users(uow, graph.direct_supervisors(user_id))

    async def accessible_descendants(self, user_id: UUID) -> list[User]:
        """Transitive subordinates of user_id."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, user_id)
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            return await self._load_users(uow, graph.descendants(user_id))

    async def can_manage(self, manager_id: UUID, target_id: UUID) -> bool:
        """True for admins, and when target is a transitive subordinate of manager."""
        async with self._uow_factory() as uow:
            manager = await self._require_user(uow, manager_id)
            if manager.role.is_admin:
                return True
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            return manager_id != target_id and graph.reaches(manager_id, target_id)

    async def accessible_user_ids(self, user_id: UUID) -> set[UUID] | None:
        """Self plus descendants; None (unrestricted) for admins."""
        async with self._uow_factory() as uow:
            user = await self._require_user(uow, user_id)
            if user.role.is_admin:
                return None
            graph = HierarchyGraph(await uow.hierarchy.list_edges())
            return {user_id, *graph.descendants(user_id)}

    @staticmethod
    async def _require_user(uow, user_id: UUID) -> User:
        user = await uow.users.get_by_id(user_id)
        if not user:
            raise NotFound("User", user_id)
        return user

    @staticmethod
    async def _load_users(uow, user_ids: list[UUID]) -> list[User]:
        found = await uow.users.get_many(user_ids)
        return [found[u] for u in user_ids if u in found]
