"""Pydantic schemas for API request/response validation."""

from .credit_line import (
    CreateCreditLineSchema,
    CreditLineEventSchema,
    CreditLineListResponseSchema,
    CreditLineResponseSchema,
    CreditLineSchema,
)
from .risk import (
    RiskEvaluateRequestSchema,
    RiskEvaluationResponseSchema,
    RiskEvaluationSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "CreateCreditLineSchema",
    "CreditLineEventSchema",
    "CreditLineListResponseSchema",
    "CreditLineResponseSchema",
    "CreditLineSchema",
    "RiskEvaluateRequestSchema",
    "RiskEvaluationResponseSchema",
    "RiskEvaluationSchema",
    "ErrorResponseSchema",
]
