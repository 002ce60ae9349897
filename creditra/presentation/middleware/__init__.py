"""Middleware for request processing."""

from .admin_auth import ACTOR_HEADER, ADMIN_ACTOR, ADMIN_KEY_HEADER, require_admin
from .error_handler import error_handler_middleware
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "ACTOR_HEADER",
    "ADMIN_ACTOR",
    "ADMIN_KEY_HEADER",
    "require_admin",
    "error_handler_middleware",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
