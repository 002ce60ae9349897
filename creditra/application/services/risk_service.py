"""Risk service - placeholder wallet risk evaluation."""

import re
from datetime import datetime, timezone

import structlog

from creditra.core.metrics import record_risk_evaluation
from creditra.domain.entities import RiskEvaluation, RiskLevel
from creditra.domain.exceptions import InvalidWalletAddressException
from creditra.application.dto import RiskEvaluationResponse

logger = structlog.get_logger(__name__)

# Stellar account ids: "G" followed by 55 base32 characters.
WALLET_ADDRESS_PATTERN = re.compile(r"G[A-Z2-7]{55}")

PLACEHOLDER_MESSAGE = "Risk evaluation placeholder - engine not yet integrated."


def is_valid_wallet_address(address: str) -> bool:
    return WALLET_ADDRESS_PATTERN.fullmatch(address) is not None


def score_to_risk_level(score: int) -> RiskLevel:
    """Map a 0-100 risk score to a level: <40 low, <70 medium, else high."""
    if score < 40:
        return RiskLevel.LOW
    if score < 70:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class RiskService:
    """
    Application service for wallet risk evaluation.

    No scoring engine is wired in yet; valid wallets get an
    evaluation with no score or level.
    """

    async def evaluate_wallet(self, wallet_address: str) -> RiskEvaluationResponse:
        """
        Evaluate a wallet's credit risk.

        Raises:
            InvalidWalletAddressException: If the address is malformed
        """
        if not is_valid_wallet_address(wallet_address):
            record_risk_evaluation("invalid_address")
            raise InvalidWalletAddressException(wallet_address)

        evaluation = RiskEvaluation(
            wallet_address=wallet_address,
            score=None,
            risk_level=None,
            message=PLACEHOLDER_MESSAGE,
            evaluated_at=datetime.now(timezone.utc),
        )

        record_risk_evaluation("evaluated")
        logger.info("wallet_evaluated", wallet_address=wallet_address)
        return RiskEvaluationResponse.from_entity(evaluation)
