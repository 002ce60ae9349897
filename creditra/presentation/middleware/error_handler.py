"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from creditra.domain.exceptions import (
    DomainException,
    CreditLineNotFoundException,
    DuplicateCreditLineException,
    InvalidTransitionException,
    InvalidWalletAddressException,
    AdminAuthNotConfiguredException,
    UnauthorizedException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.message,
            "code": exc.code,
            "request_id": get_request_id(),
        },
    )


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as "field: message" (e.g. "status: Input should be ...")."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses. The "error"
    key always carries the human-readable message.
    """

    @app.exception_handler(CreditLineNotFoundException)
    async def credit_line_not_found_handler(
        request: Request,
        exc: CreditLineNotFoundException,
    ) -> JSONResponse:
        """Handle unknown credit line ids."""
        return _error_response(404, exc)

    @app.exception_handler(InvalidTransitionException)
    async def invalid_transition_handler(
        request: Request,
        exc: InvalidTransitionException,
    ) -> JSONResponse:
        """Handle illegal status changes."""
        return _error_response(409, exc)

    @app.exception_handler(DuplicateCreditLineException)
    async def duplicate_credit_line_handler(
        request: Request,
        exc: DuplicateCreditLineException,
    ) -> JSONResponse:
        """Handle creation with an id that is already taken."""
        return _error_response(409, exc)

    @app.exception_handler(InvalidWalletAddressException)
    async def invalid_wallet_handler(
        request: Request,
        exc: InvalidWalletAddressException,
    ) -> JSONResponse:
        """Handle malformed wallet addresses."""
        return _error_response(400, exc)

    @app.exception_handler(AdminAuthNotConfiguredException)
    async def admin_not_configured_handler(
        request: Request,
        exc: AdminAuthNotConfiguredException,
    ) -> JSONResponse:
        """Handle admin routes hit while no admin key is configured."""
        logger.error("admin_auth_not_configured", request_id=get_request_id())
        return _error_response(503, exc)

    @app.exception_handler(UnauthorizedException)
    async def unauthorized_handler(
        request: Request,
        exc: UnauthorizedException,
    ) -> JSONResponse:
        """Handle a missing or wrong admin key."""
        logger.warning(
            "admin_auth_rejected",
            request_id=get_request_id(),
            path=request.url.path,
        )
        return _error_response(401, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies, paths, and headers."""
        message = _validation_message(exc)
        logger.warning(
            "request_validation_failed",
            request_id=get_request_id(),
            path=request.url.path,
            error=message,
        )
        return _error_response(400, DomainException(message, code="VALIDATION_ERROR"))

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred.",
                "code": "INTERNAL_ERROR",
                "request_id": get_request_id(),
            },
        )
