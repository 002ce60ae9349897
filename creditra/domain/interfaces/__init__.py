"""
Domain Interfaces (Ports)
"""

from .repositories import CreditLineRepository, TransitionResult
from .clients import DatabaseClient

__all__ = [
    "CreditLineRepository",
    "TransitionResult",
    "DatabaseClient",
]
