"""
Authentication service implementation.

Verifies Supabase access tokens and resolves admin privilege.
"""

import logging
from typing import Optional
import jwt
from pydantic import ValidationError as PydanticValidationError

from supabase import AsyncClient, AuthError

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

ADMINS_TABLE = "admins"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are verified offline when the project JWT secret is configured,
    and by the Supabase auth server otherwise. Privilege is a plain existence
    lookup in the admins table, keyed by user ID.
    """

    def __init__(self, db: Optional[AsyncClient] = None):
        self._settings = get_settings()
        self._db = db

    async def _client(self) -> AsyncClient:
        if self._db is None:
            self._db = await get_supabase_client()
        return self._db

    async def verify_identity(self, token: str) -> AuthenticatedUser:
        """
        Verify a token and return the authenticated user.
        """
        if not token:
            raise MissingTokenError()

        if self._settings.supabase_jwt_secret:
            return self._decode_locally(token)
        return await self._verify_with_provider(token)

    def _decode_locally(self, token: str) -> AuthenticatedUser:
        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid authentication token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid authentication token: malformed claims")

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
        )

    async def _verify_with_provider(self, token: str) -> AuthenticatedUser:
        db = await self._client()
        try:
            response = await db.auth.get_user(token)
        except AuthError as e:
            raise InvalidTokenError(f"Invalid authentication token: {e.message}")

        if response is None or response.user is None:
            raise InvalidTokenError()

        user = response.user
        return AuthenticatedUser(
            id=user.id,
            email=user.email,
            email_verified=user.email_confirmed_at is not None,
        )

    async def is_privileged(self, user_id: str) -> bool:
        """
        Look up the admins record for user_id.

        Any failure is treated as "not privileged". The failure is logged
        with its cause so a broken lookup is distinguishable from a plain
        non-admin in the logs.
        """
        if not user_id:
            return False

        try:
            db = await self._client()
            result = await (
                db.table(ADMINS_TABLE).select("id").eq("id", user_id).limit(1).execute()
            )
        except Exception as e:
            logger.warning("Privilege lookup failed for %s: %r", user_id, e)
            return False

        return bool(result.data)


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
