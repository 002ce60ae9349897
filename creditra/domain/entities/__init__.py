"""Domain Entities - Core business objects."""

from .credit_line import (
    CreditLine,
    CreditLineAction,
    CreditLineEvent,
    CreditLineStatus,
    TRANSITIONS,
)
from .horizon import HorizonEvent
from .risk import RiskEvaluation, RiskLevel

__all__ = [
    "CreditLine",
    "CreditLineAction",
    "CreditLineEvent",
    "CreditLineStatus",
    "TRANSITIONS",
    "HorizonEvent",
    "RiskEvaluation",
    "RiskLevel",
]
