"""Unit tests for hierarchy edge use cases and the hierarchy access checker."""

import asyncio
from uuid import uuid4

import pytest

from attrsearch.application.use_cases.hierarchy.add_supervisor import AddSupervisorUseCase
from attrsearch.application.use_cases.hierarchy.remove_supervisor import (
    RemoveSupervisorUseCase,
)
from attrsearch.domain.entities import HierarchyEdge
from attrsearch.domain.exceptions import (
    Conflict,
    CycleDetected,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from attrsearch.domain.value_objects import Role
from attrsearch.infrastructure.permission.hierarchy_access_checker import (
    HierarchyAccessChecker,
)

from tests.conftest import BASE_TIME, add_user


@pytest.fixture
def add_edge(uow_factory) -> AddSupervisorUseCase:
    return AddSupervisorUseCase(unit_of_work_factory=uow_factory)


@pytest.fixture
def checker(uow_factory) -> HierarchyAccessChecker:
    return HierarchyAccessChecker(uow_factory)


# --- AddSupervisorUseCase ---


@pytest.mark.asyncio
async def test_add_edge(db, add_edge) -> None:
    broker, agent = add_user(db, Role.BROKER), add_user(db, Role.AGENT)

    edge = await add_edge.execute(broker.id, agent.id)

    assert (edge.supervisor_id, edge.subordinate_id) == (broker.id, agent.id)
    assert (broker.id, agent.id) in db.edges


@pytest.mark.asyncio
async def test_reverse_edge_rejected_as_cycle(db, add_edge) -> None:
    a, b = add_user(db, Role.AGENT), add_user(db, Role.AGENT)
    await add_edge.execute(a.id, b.id)

    with pytest.raises(CycleDetected):
        await add_edge.execute(b.id, a.id)
    assert (b.id, a.id) not in db.edges


@pytest.mark.asyncio
async def test_longer_cycle_rejected(db, add_edge) -> None:
    a, b, c = (add_user(db, Role.AGENT) for _ in range(3))
    await add_edge.execute(a.id, b.id)
    await add_edge.execute(b.id, c.id)

    with pytest.raises(CycleDetected):
        await add_edge.execute(c.id, a.id)


@pytest.mark.asyncio
async def test_shortcut_edge_rejected_when_already_reachable(db, add_edge) -> None:
    a, b, c = (add_user(db, Role.AGENT) for _ in range(3))
    await add_edge.execute(a.id, b.id)
    await add_edge.execute(b.id, c.id)

    with pytest.raises(PermissionDenied, match="already reachable"):
        await add_edge.execute(a.id, c.id)


@pytest.mark.asyncio
async def test_duplicate_edge_conflict(db, add_edge) -> None:
    a, b = add_user(db, Role.BROKER), add_user(db, Role.AGENT)
    await add_edge.execute(a.id, b.id)

    with pytest.raises(Conflict):
        await add_edge.execute(a.id, b.id)


@pytest.mark.asyncio
async def test_self_loop_rejected(db, add_edge) -> None:
    a = add_user(db, Role.BROKER)
    with pytest.raises(ValidationError):
        await add_edge.execute(a.id, a.id)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "supervisor_role,subordinate_role",
    [(Role.ASSISTANT, Role.ASSISTANT), (Role.AGENT, Role.BROKER), (Role.BROKER, Role.ADMIN)],
)
async def test_ineligible_roles_rejected(db, add_edge, supervisor_role, subordinate_role) -> None:
    sup, sub = add_user(db, supervisor_role), add_user(db, subordinate_role)

    with pytest.raises(PermissionDenied):
        await add_edge.execute(sup.id, sub.id)
    assert db.edges == {}


@pytest.mark.asyncio
async def test_unknown_users_not_found(db, add_edge) -> None:
    a = add_user(db, Role.BROKER)
    with pytest.raises(NotFound, match="Supervisor"):
        await add_edge.execute(uuid4(), a.id)
    with pytest.raises(NotFound, match="Subordinate"):
        await add_edge.execute(a.id, uuid4())


@pytest.mark.asyncio
async def test_concurrent_opposite_edges_leave_graph_acyclic(db, add_edge) -> None:
    a, b = add_user(db, Role.AGENT), add_user(db, Role.AGENT)

    results = await asyncio.gather(
        add_edge.execute(a.id, b.id),
        add_edge.execute(b.id, a.id),
        return_exceptions=True,
    )

    assert sum(isinstance(r, CycleDetected) for r in results) == 1
    created = [r for r in results if not isinstance(r, Exception)]
    assert list(db.edges) == [(created[0].supervisor_id, created[0].subordinate_id)]
    assert db.rollbacks == 1
    assert not db.hierarchy_lock.locked()


@pytest.mark.asyncio
async def test_concurrent_chain_and_closing_edge_detects_cycle(db, add_edge) -> None:
    a, b, c = (add_user(db, Role.AGENT) for _ in range(3))
    await add_edge.execute(a.id, b.id)

    results = await asyncio.gather(
        add_edge.execute(b.id, c.id),
        add_edge.execute(c.id, a.id),
        return_exceptions=True,
    )

    assert sum(isinstance(r, CycleDetected) for r in results) == 1
    assert len(db.edges) == 2
    assert (a.id, b.id) in db.edges


@pytest.mark.asyncio
async def test_failed_transaction_keeps_commits_made_meanwhile(db, uow_factory, add_edge) -> None:
    a, b, c = (add_user(db, Role.AGENT) for _ in range(3))

    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.hierarchy.create(
                HierarchyEdge(supervisor_id=a.id, subordinate_id=c.id, created_at=BASE_TIME)
            )
            await add_edge.execute(a.id, b.id)
            raise RuntimeError("boom")

    assert list(db.edges) == [(a.id, b.id)]


# --- RemoveSupervisorUseCase ---


@pytest.mark.asyncio
async def test_remove_edge(db, uow_factory, add_edge) -> None:
    a, b = add_user(db, Role.AGENT), add_user(db, Role.AGENT)
    await add_edge.execute(a.id, b.id)

    await RemoveSupervisorUseCase(uow_factory).execute(a.id, b.id)

    assert db.edges == {}
    # Once removed, the reverse direction is allowed again.
    await add_edge.execute(b.id, a.id)
    assert list(db.edges) == [(b.id, a.id)]


@pytest.mark.asyncio
async def test_remove_missing_edge_not_found(db, uow_factory) -> None:
    a, b = add_user(db), add_user(db)
    with pytest.raises(NotFound):
        await RemoveSupervisorUseCase(uow_factory).execute(a.id, b.id)
    assert not db.hierarchy_lock.locked()


# --- HierarchyAccessChecker ---


@pytest.mark.asyncio
async def test_descendants_are_transitive(db, add_edge, checker) -> None:
    a, b, c = add_user(db, Role.BROKER), add_user(db, Role.AGENT), add_user(db, Role.ASSISTANT)
    await add_edge.execute(a.id, b.id)
    await add_edge.execute(b.id, c.id)

    assert [u.id for u in await checker.accessible_descendants(a.id)] == [b.id, c.id]
    assert [u.id for u in await checker.direct_subordinates(a.id)] == [b.id]
    assert [u.id for u in await checker.supervisors(c.id)] == [b.id]
    assert await checker.accessible_user_ids(a.id) == {a.id, b.id, c.id}


@pytest.mark.asyncio
async def test_can_manage(db, add_edge, checker) -> None:
    admin = add_user(db, Role.ADMIN)
    a, b, c = add_user(db, Role.BROKER), add_user(db, Role.AGENT), add_user(db, Role.AGENT)
    await add_edge.execute(a.id, b.id)
    await add_edge.execute(b.id, c.id)

    assert await checker.can_manage(a.id, c.id)
    assert not await checker.can_manage(c.id, a.id)
    assert not await checker.can_manage(a.id, a.id)
    assert await checker.can_manage(admin.id, a.id)


@pytest.mark.asyncio
async def test_admin_access_is_unrestricted(db, checker) -> None:
    admin = add_user(db, Role.ADMIN)
    assert await checker.accessible_user_ids(admin.id) is None


@pytest.mark.asyncio
async def test_checker_unknown_user_not_found(checker) -> None:
    with pytest.raises(NotFound, match="User"):
        await checker.accessible_descendants(uuid4())
