"""Database-related domain exceptions."""

from typing import Sequence

from .base import DomainException


class DatabaseNotConfiguredException(DomainException):
    """Raised when DATABASE_URL is not set."""

    def __init__(self):
        super().__init__(
            message="DATABASE_URL is required",
            code="DATABASE_NOT_CONFIGURED",
        )


class SchemaValidationException(DomainException):
    """Raised when expected tables are missing from the schema."""

    def __init__(self, missing: Sequence[str]):
        super().__init__(
            message=f"Missing tables: {', '.join(missing)}",
            code="SCHEMA_INVALID",
        )
        self.missing = list(missing)
