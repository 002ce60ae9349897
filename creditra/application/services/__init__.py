"""Application services (use cases)."""

from .credit_line_service import CreditLineService
from .risk_service import RiskService, is_valid_wallet_address, score_to_risk_level

__all__ = [
    "CreditLineService",
    "RiskService",
    "is_valid_wallet_address",
    "score_to_risk_level",
]
