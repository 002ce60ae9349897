"""
Unit tests for the in-memory credit line registry.

These tests verify:
1. create/get/list behaviour and the duplicate-id policy
2. suspend/close results for every status, including not-found
3. Failed transitions leave the record untouched
4. Snapshots are isolated from registry state
5. Per-id linearizability under concurrent transitions
"""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from creditra.domain.entities import CreditLineAction, CreditLineStatus
from creditra.domain.exceptions import (
    CreditLineNotFoundException,
    DuplicateCreditLineException,
    InvalidTransitionException,
)
from creditra.infrastructure.repositories import InMemoryCreditLineRepository


@pytest.fixture
def repo() -> InMemoryCreditLineRepository:
    return InMemoryCreditLineRepository()


def actions(line) -> list[str]:
    return [event.action.value for event in line.events]


# =============================================================================
# Create / Get / List
# =============================================================================

class TestCreateAndRead:
    """Tests for create, get and list."""

    @pytest.mark.asyncio
    async def test_create_defaults(self, repo):
        line = await repo.create("x")

        assert line.status == CreditLineStatus.ACTIVE
        assert actions(line) == ["created"]

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, repo):
        assert await repo.get("nope") is None

    @pytest.mark.asyncio
    async def test_get_returns_created_line(self, repo):
        await repo.create("x", status=CreditLineStatus.SUSPENDED)

        line = await repo.get("x")

        assert line.id == "x"
        assert line.status == CreditLineStatus.SUSPENDED

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, repo):
        await repo.create("b")
        await repo.create("a")

        lines = await repo.list()

        assert [line.id for line in lines] == ["b", "a"]
        assert all(line.status == CreditLineStatus.ACTIVE for line in lines)

    @pytest.mark.asyncio
    async def test_list_empty(self, repo):
        assert await repo.list() == []

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected_and_original_kept(self, repo):
        await repo.create("x")
        await repo.suspend("x")

        with pytest.raises(DuplicateCreditLineException) as exc_info:
            await repo.create("x")

        assert exc_info.value.line_id == "x"
        line = await repo.get("x")
        assert line.status == CreditLineStatus.SUSPENDED
        assert actions(line) == ["created", "suspended"]

    @pytest.mark.asyncio
    async def test_clear(self, repo):
        await repo.create("x")

        await repo.clear()

        assert await repo.list() == []
        assert await repo.get("x") is None


# =============================================================================
# Transitions
# =============================================================================

class TestSuspend:
    """Tests for suspend."""

    @pytest.mark.asyncio
    async def test_unknown_id(self, repo):
        result = await repo.suspend("ghost")

        assert not result.is_ok
        assert isinstance(result.error, CreditLineNotFoundException)
        assert result.error.line_id == "ghost"

    @pytest.mark.asyncio
    async def test_active_to_suspended(self, repo):
        await repo.create("x")

        result = await repo.suspend("x")

        assert result.is_ok
        assert result.line.status == CreditLineStatus.SUSPENDED
        assert len(result.line.events) == 2
        assert result.line.events[-1].action == CreditLineAction.SUSPENDED

    @pytest.mark.asyncio
    async def test_suspended_cannot_be_suspended_again(self, repo):
        await repo.create("x")
        await repo.suspend("x")
        before = await repo.get("x")

        result = await repo.suspend("x")

        assert isinstance(result.error, InvalidTransitionException)
        assert result.error.current_status == "suspended"
        assert result.error.action == "suspend"
        assert await repo.get("x") == before

    @pytest.mark.asyncio
    async def test_closed_cannot_be_suspended(self, repo):
        await repo.create("x", status=CreditLineStatus.CLOSED)
        before = await repo.get("x")

        result = await repo.suspend("x")

        assert isinstance(result.error, InvalidTransitionException)
        assert result.error.current_status == "closed"
        assert await repo.get("x") == before

    @pytest.mark.asyncio
    async def test_actor_recorded(self, repo):
        await repo.create("x")

        result = await repo.suspend("x", actor="risk-desk")

        assert result.line.events[-1].actor == "risk-desk"


class TestClose:
    """Tests for close."""

    @pytest.mark.asyncio
    async def test_unknown_id(self, repo):
        result = await repo.close("ghost")

        with pytest.raises(CreditLineNotFoundException):
            result.unwrap()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "initial",
        [CreditLineStatus.ACTIVE, CreditLineStatus.SUSPENDED],
    )
    async def test_closes_from_open_statuses(self, repo, initial):
        await repo.create("x", status=initial)

        line = (await repo.close("x")).unwrap()

        assert line.status == CreditLineStatus.CLOSED
        assert actions(line) == ["created", "closed"]

    @pytest.mark.asyncio
    async def test_closed_cannot_be_closed_again(self, repo):
        await repo.create("x")
        await repo.close("x")
        before = await repo.get("x")

        result = await repo.close("x")

        assert isinstance(result.error, InvalidTransitionException)
        assert result.error.current_status == "closed"
        assert result.error.action == "close"
        assert str(result.error) == 'Cannot "close" a credit line that is already "closed".'
        assert await repo.get("x") == before

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, repo):
        await repo.create("x")
        await repo.suspend("x")
        await repo.close("x")

        line = await repo.get("x")

        assert actions(line) == ["created", "suspended", "closed"]
        assert line.status == CreditLineStatus.CLOSED
        timestamps = [e.timestamp for e in line.events]
        assert timestamps == sorted(timestamps)

    @pytest.mark.asyncio
    async def test_updated_at_never_decreases(self, repo):
        created = await repo.create("x")

        suspended = (await repo.suspend("x")).unwrap()
        closed = (await repo.close("x")).unwrap()

        assert created.updated_at <= suspended.updated_at <= closed.updated_at

    @pytest.mark.asyncio
    async def test_other_lines_untouched(self, repo):
        await repo.create("a")
        await repo.create("b")

        await repo.close("a")

        b = await repo.get("b")
        assert b.status == CreditLineStatus.ACTIVE
        assert actions(b) == ["created"]


# =============================================================================
# Snapshot isolation
# =============================================================================

class TestSnapshots:
    """Returned records must not alias registry state."""

    @pytest.mark.asyncio
    async def test_mutating_returned_line_does_not_leak(self, repo):
        line = await repo.create("x")
        line.status = CreditLineStatus.CLOSED
        line.events.clear()

        stored = await repo.get("x")

        assert stored.status == CreditLineStatus.ACTIVE
        assert actions(stored) == ["created"]

    @pytest.mark.asyncio
    async def test_listed_snapshot_is_frozen_in_time(self, repo):
        await repo.create("x")
        listed = await repo.list()

        await repo.suspend("x")

        assert listed[0].status == CreditLineStatus.ACTIVE


# =============================================================================
# Concurrency
# =============================================================================

class TestConcurrency:
    """Transitions on one id are serialized; exactly one suspend wins."""

    @pytest.mark.asyncio
    async def test_concurrent_suspends_on_event_loop(self, repo):
        await repo.create("x")

        results = await asyncio.gather(repo.suspend("x"), repo.suspend("x"))

        assert sum(r.is_ok for r in results) == 1
        failures = [r.error for r in results if not r.is_ok]
        assert isinstance(failures[0], InvalidTransitionException)
        assert failures[0].current_status == "suspended"
        assert len((await repo.get("x")).events) == 2

    def test_concurrent_suspends_across_threads(self, repo):
        workers = 16
        asyncio.run(repo.create("x"))
        barrier = threading.Barrier(workers)

        def attempt(_):
            barrier.wait()
            return asyncio.run(repo.suspend("x"))

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(attempt, range(workers)))

        assert sum(r.is_ok for r in results) == 1
        assert all(
            isinstance(r.error, InvalidTransitionException)
            for r in results
            if not r.is_ok
        )
        line = asyncio.run(repo.get("x"))
        assert actions(line) == ["created", "suspended"]

    def test_mixed_suspend_and_close_across_threads(self, repo):
        workers = 16
        asyncio.run(repo.create("x"))
        barrier = threading.Barrier(workers)

        def attempt(i):
            barrier.wait()
            op = repo.suspend if i % 2 else repo.close
            return asyncio.run(op("x"))

        with ThreadPoolExecutor(max_workers=workers) as pool:
            list(pool.map(attempt, range(workers)))

        line = asyncio.run(repo.get("x"))
        assert line.status == CreditLineStatus.CLOSED
        assert actions(line) in (
            ["created", "closed"],
            ["created", "suspended", "closed"],
        )

    def test_different_ids_progress_independently(self, repo):
        ids = [f"line-{i}" for i in range(32)]
        for line_id in ids:
            asyncio.run(repo.create(line_id))

        def lifecycle(line_id):
            asyncio.run(repo.suspend(line_id)).unwrap()
            return asyncio.run(repo.close(line_id)).unwrap()

        with ThreadPoolExecutor(max_workers=8) as pool:
            closed = list(pool.map(lifecycle, ids))

        assert all(actions(line) == ["created", "suspended", "closed"] for line in closed)
        assert [line.id for line in asyncio.run(repo.list())] == ids
