"""Admin authentication exceptions."""

from .base import DomainException


class AdminAuthNotConfiguredException(DomainException):
    """Raised when no admin API key is configured on the server."""

    def __init__(self):
        super().__init__(
            message="Admin authentication is not configured on this server.",
            code="ADMIN_AUTH_NOT_CONFIGURED",
        )


class UnauthorizedException(DomainException):
    """Raised when the admin API key header is missing or wrong."""

    def __init__(self):
        super().__init__(
            message="Unauthorized: valid X-Admin-Api-Key header is required.",
            code="UNAUTHORIZED",
        )
