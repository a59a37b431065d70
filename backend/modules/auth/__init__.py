"""
Authentication module.

Handles identity verification and privilege resolution.

Public API:
- IAuthService: Interface for auth operations
- AuthenticatedUser: Minimal verified identity
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload, AdminCheckResponse
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AdminAccessRequiredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthenticatedUser",
    "JWTPayload",
    "AdminCheckResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AdminAccessRequiredError",
]
