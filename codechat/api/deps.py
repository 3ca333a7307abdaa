"""API dependencies for dependency injection."""

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request

from codechat.config import get_settings
from codechat.services.messenger import Messenger

logger = logging.getLogger(__name__)


def get_messenger(request: Request) -> Messenger:
    """Get the messenger from app state."""
    return request.app.state.messenger


# =============================================================================
# Authentication Dependencies
# =============================================================================


async def verify_admin_api_key(
    x_api_key: str | None = Header(None, alias="X-API-Key"),
) -> bool:
    """Verify admin API requests using API key header.

    In development mode, authentication is skipped if no key is configured.
    """
    settings = get_settings()

    # Skip auth in development if no key configured
    if settings.is_development and not settings.admin_api_key:
        logger.debug("Admin API auth skipped - no key configured (dev mode)")
        return True

    if not settings.admin_api_key:
        logger.error("ADMIN_API_KEY not configured")
        raise HTTPException(status_code=500, detail="API authentication not configured")

    if not x_api_key:
        logger.warning("Admin API request missing X-API-Key header")
        raise HTTPException(status_code=401, detail="Missing API key")

    if x_api_key != settings.admin_api_key:
        logger.warning("Admin API request with invalid API key")
        raise HTTPException(status_code=401, detail="Invalid API key")

    return True


# =============================================================================
# Type Aliases
# =============================================================================

MessengerDep = Annotated[Messenger, Depends(get_messenger)]
AdminAuth = Annotated[bool, Depends(verify_admin_api_key)]
