"""
Bearer-token authentication dependencies.

Every privileged endpoint depends on require_admin, which re-verifies the
token and re-checks privilege on each request. Session cookies are never
consulted here.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError, AdminAccessRequiredError
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a verified identity.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError("Unauthorized: ID token required")

    return await auth.verify_identity(credentials.credentials)


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a verified identity holding admin privilege.

    The lookup is never cached; a revoked admin loses access on the next
    request.
    """
    if not await auth.is_privileged(user.id):
        logger.info("Refused admin request from %s", user.id)
        raise AdminAccessRequiredError(user.id)
    return user
