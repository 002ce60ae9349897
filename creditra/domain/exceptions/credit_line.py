"""Credit line domain exceptions."""

from .base import DomainException


class CreditLineNotFoundException(DomainException):
    """Raised when no credit line exists for the requested id."""

    def __init__(self, line_id: str):
        super().__init__(
            message=f'Credit line "{line_id}" not found.',
            code="CREDIT_LINE_NOT_FOUND",
        )
        self.line_id = line_id


class InvalidTransitionException(DomainException):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current_status: str, action: str):
        current = getattr(current_status, "value", current_status)
        super().__init__(
            message=f'Cannot "{action}" a credit line that is already "{current}".',
            code="INVALID_TRANSITION",
        )
        self.current_status = current
        self.action = action


class DuplicateCreditLineException(DomainException):
    """Raised when creating a credit line whose id is already taken."""

    def __init__(self, line_id: str):
        super().__init__(
            message=f'Credit line "{line_id}" already exists.',
            code="CREDIT_LINE_EXISTS",
        )
        self.line_id = line_id
