"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from creditra.application.services import CreditLineService, RiskService
from creditra.domain.interfaces import CreditLineRepository
from creditra.infrastructure.clients import HorizonListener
from creditra.infrastructure.repositories import InMemoryCreditLineRepository


# Repository dependencies
@lru_cache
def get_credit_line_repository() -> CreditLineRepository:
    """Get the process-wide credit line registry."""
    return InMemoryCreditLineRepository()


# External client dependencies
@lru_cache
def get_horizon_listener() -> HorizonListener:
    """Get the process-wide Horizon listener."""
    return HorizonListener()


# Service dependencies
def get_credit_line_service(
    credit_line_repo: Annotated[CreditLineRepository, Depends(get_credit_line_repository)],
) -> CreditLineService:
    """Get a CreditLineService bound to the registry."""
    return CreditLineService(credit_line_repository=credit_line_repo)


def get_risk_service() -> RiskService:
    """Get a RiskService instance."""
    return RiskService()
