"""Data Transfer Objects for application layer."""

from .credit_line import (
    CreateCreditLineRequest,
    CreditLineEventDTO,
    CreditLineResponse,
)
from .risk import RiskEvaluationResponse

__all__ = [
    "CreateCreditLineRequest",
    "CreditLineEventDTO",
    "CreditLineResponse",
    "RiskEvaluationResponse",
]
