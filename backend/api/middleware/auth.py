"""
Bearer authentication and admin gating.

Each dependency is one stage of the request pipeline: it either returns
the caller's identity or raises, which short-circuits the request.
    get_current_user        bearer header -> verified AuthenticatedUser (401)
    require_catalog_editor  bearer header -> admin AuthenticatedUser (401, 403),
                            or None when catalog writes are unprotected
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import AdminRequiredError, MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.config import Settings
from shared.models import AuthenticatedUser

from ..dependencies import get_app_settings, get_auth_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials],
    auth: IAuthService,
) -> AuthenticatedUser:
    """Verify the extracted credential and return the identity it proves."""
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return await auth.validate_token(credentials.credentials)


def ensure_admin(user: AuthenticatedUser) -> AuthenticatedUser:
    if not user.is_admin:
        logger.info("Admin-only operation refused for user %s", user.id)
        raise AdminRequiredError(user.id)
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await authenticate(credentials, auth)


async def require_catalog_editor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> Optional[AuthenticatedUser]:
    """
    Gate for catalog writes.

    Requires an admin when protect_catalog_writes is on; otherwise lets
    every caller through and returns None.
    """
    if not settings.protect_catalog_writes:
        return None
    user = await authenticate(credentials, auth)
    return ensure_admin(user)

