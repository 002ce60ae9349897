"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .credit_line import (
    CreditLineNotFoundException,
    DuplicateCreditLineException,
    InvalidTransitionException,
)
from .risk import InvalidWalletAddressException
from .auth import AdminAuthNotConfiguredException, UnauthorizedException
from .database import DatabaseNotConfiguredException, SchemaValidationException

__all__ = [
    "DomainException",
    "CreditLineNotFoundException",
    "DuplicateCreditLineException",
    "InvalidTransitionException",
    "InvalidWalletAddressException",
    "AdminAuthNotConfiguredException",
    "UnauthorizedException",
    "DatabaseNotConfiguredException",
    "SchemaValidationException",
]
