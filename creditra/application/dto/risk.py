"""Data transfer objects for wallet risk evaluation."""

from dataclasses import dataclass
from typing import Optional

from creditra.domain.entities import RiskEvaluation
from creditra.domain.entities.credit_line import isoformat


@dataclass(frozen=True)
class RiskEvaluationResponse:
    wallet_address: str
    score: Optional[int]
    risk_level: Optional[str]
    message: str
    evaluated_at: str

    @classmethod
    def from_entity(cls, evaluation: RiskEvaluation) -> "RiskEvaluationResponse":
        return cls(
            wallet_address=evaluation.wallet_address,
            score=evaluation.score,
            risk_level=evaluation.risk_level.value if evaluation.risk_level else None,
            message=evaluation.message,
            evaluated_at=isoformat(evaluation.evaluated_at),
        )
