"""Admin API key check for mutation endpoints."""

import hmac
from typing import Annotated, Optional

from fastapi import Depends, Header

from creditra.core.config import Settings, get_settings
from creditra.domain.exceptions import (
    AdminAuthNotConfiguredException,
    UnauthorizedException,
)

ADMIN_KEY_HEADER = "X-Admin-Api-Key"
ACTOR_HEADER = "X-Actor"

# Recorded on events when the caller does not name itself.
ADMIN_ACTOR = "admin"


async def require_admin(
    settings: Annotated[Settings, Depends(get_settings)],
    provided_key: Annotated[Optional[str], Header(alias=ADMIN_KEY_HEADER)] = None,
    actor: Annotated[Optional[str], Header(alias=ACTOR_HEADER)] = None,
) -> str:
    """
    FastAPI dependency gating admin-only routes.

    Returns the actor recorded on the resulting credit line event: the
    X-Actor header when given, otherwise "admin".

    Raises:
        AdminAuthNotConfiguredException: If ADMIN_API_KEY is unset (503)
        UnauthorizedException: If the header is missing or wrong (401)
    """
    expected_key = settings.admin_api_key
    if not expected_key:
        raise AdminAuthNotConfiguredException()

    if not provided_key or not hmac.compare_digest(
        provided_key.encode(), expected_key.encode()
    ):
        raise UnauthorizedException()

    return (actor or "").strip() or ADMIN_ACTOR
