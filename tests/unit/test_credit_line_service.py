"""
Unit tests for CreditLineService.

These tests verify:
1. Id generation when the request omits one
2. Transition errors are raised as domain exceptions
3. Responses carry serialized timestamps and events
"""

from uuid import UUID

import pytest

from creditra.application.dto import CreateCreditLineRequest
from creditra.application.services import CreditLineService
from creditra.domain.entities import CreditLineStatus
from creditra.domain.exceptions import (
    CreditLineNotFoundException,
    DuplicateCreditLineException,
    InvalidTransitionException,
)
from creditra.infrastructure.repositories import InMemoryCreditLineRepository


@pytest.fixture
def service() -> CreditLineService:
    return CreditLineService(credit_line_repository=InMemoryCreditLineRepository())


class TestCreateLine:

    @pytest.mark.asyncio
    async def test_generates_uuid_when_id_missing(self, service):
        line = await service.create_line(CreateCreditLineRequest.generated())

        UUID(line.id)
        assert line.status == "active"

    @pytest.mark.asyncio
    async def test_uses_supplied_id_and_status(self, service):
        line = await service.create_line(
            CreateCreditLineRequest.with_id("abc", CreditLineStatus.SUSPENDED)
        )

        assert line.id == "abc"
        assert line.status == "suspended"
        assert [e.action for e in line.events] == ["created"]
        assert line.created_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_duplicate_propagates(self, service):
        await service.create_line(CreateCreditLineRequest.with_id("abc"))

        with pytest.raises(DuplicateCreditLineException):
            await service.create_line(CreateCreditLineRequest.with_id("abc"))


class TestTransitions:

    @pytest.mark.asyncio
    async def test_get_unknown_raises(self, service):
        with pytest.raises(CreditLineNotFoundException) as exc_info:
            await service.get_line("nope")

        assert exc_info.value.message == 'Credit line "nope" not found.'

    @pytest.mark.asyncio
    async def test_suspend_unknown_raises(self, service):
        with pytest.raises(CreditLineNotFoundException):
            await service.suspend_line("nope")

    @pytest.mark.asyncio
    async def test_close_then_suspend_raises_invalid_transition(self, service):
        await service.create_line(CreateCreditLineRequest.with_id("abc"))
        await service.close_line("abc", actor="admin")

        with pytest.raises(InvalidTransitionException) as exc_info:
            await service.suspend_line("abc")

        assert exc_info.value.current_status == "closed"
        assert exc_info.value.action == "suspend"

    @pytest.mark.asyncio
    async def test_suspend_returns_updated_line(self, service):
        await service.create_line(CreateCreditLineRequest.with_id("abc"))

        line = await service.suspend_line("abc", actor="ops")

        assert line.status == "suspended"
        assert [e.action for e in line.events] == ["created", "suspended"]
        assert line.events[-1].actor == "ops"

    @pytest.mark.asyncio
    async def test_list_lines(self, service):
        await service.create_line(CreateCreditLineRequest.with_id("a"))
        await service.create_line(CreateCreditLineRequest.with_id("b"))

        lines = await service.list_lines()

        assert [line.id for line in lines] == ["a", "b"]
