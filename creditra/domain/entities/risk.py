"""Wallet risk evaluation entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class RiskEvaluation:
    """
    Result of evaluating a wallet.

    score and risk_level stay None until a scoring engine is wired in.
    """

    wallet_address: str
    score: Optional[int]
    risk_level: Optional[RiskLevel]
    message: str
    evaluated_at: datetime
