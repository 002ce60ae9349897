"""Credit line service - orchestrates the credit line lifecycle use cases."""

from typing import List, Optional
from uuid import uuid4

import structlog

from creditra.core.metrics import record_credit_line_created, record_transition
from creditra.domain.exceptions import (
    CreditLineNotFoundException,
    InvalidTransitionException,
)
from creditra.domain.interfaces import CreditLineRepository, TransitionResult
from creditra.application.dto import CreateCreditLineRequest, CreditLineResponse

logger = structlog.get_logger(__name__)


class CreditLineService:
    """
    Application service for credit line use cases.

    The repository reports transition failures as values; this service
    turns them into domain exceptions for the HTTP layer.
    """

    def __init__(self, credit_line_repository: CreditLineRepository):
        self._repo = credit_line_repository

    async def create_line(self, request: CreateCreditLineRequest) -> CreditLineResponse:
        """
        Create a credit line.

        Raises:
            DuplicateCreditLineException: If the id is already taken
        """
        line_id = request.line_id or str(uuid4())
        line = await self._repo.create(line_id, status=request.status, actor=request.actor)

        record_credit_line_created(line.status.value)
        logger.info(
            "credit_line_created",
            line_id=line.id,
            status=line.status.value,
            generated_id=request.line_id is None,
        )
        return CreditLineResponse.from_entity(line)

    async def get_line(self, line_id: str) -> CreditLineResponse:
        """
        Retrieve a credit line by id.

        Raises:
            CreditLineNotFoundException: If no line has this id
        """
        line = await self._repo.get(line_id)
        if line is None:
            logger.warning("credit_line_not_found", line_id=line_id)
            raise CreditLineNotFoundException(line_id)
        return CreditLineResponse.from_entity(line)

    async def list_lines(self) -> List[CreditLineResponse]:
        lines = await self._repo.list()
        return [CreditLineResponse.from_entity(line) for line in lines]

    async def suspend_line(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> CreditLineResponse:
        """
        Suspend an active credit line.

        Raises:
            CreditLineNotFoundException: If no line has this id
            InvalidTransitionException: If the line is not active
        """
        result = await self._repo.suspend(line_id, actor=actor)
        return self._finish("suspend", line_id, result)

    async def close_line(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> CreditLineResponse:
        """
        Close an active or suspended credit line.

        Raises:
            CreditLineNotFoundException: If no line has this id
            InvalidTransitionException: If the line is already closed
        """
        result = await self._repo.close(line_id, actor=actor)
        return self._finish("close", line_id, result)

    def _finish(
        self,
        action: str,
        line_id: str,
        result: TransitionResult,
    ) -> CreditLineResponse:
        log = logger.bind(line_id=line_id, action=action)

        if isinstance(result.error, CreditLineNotFoundException):
            record_transition(action, "not_found")
            log.warning("credit_line_not_found")
        elif isinstance(result.error, InvalidTransitionException):
            record_transition(action, "invalid_transition")
            log.warning(
                "credit_line_transition_rejected",
                current_status=result.error.current_status,
            )
        else:
            record_transition(action, "success")
            log.info("credit_line_transitioned", status=result.line.status.value)

        return CreditLineResponse.from_entity(result.unwrap())
