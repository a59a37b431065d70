"""
Shared infrastructure for the WhyNot Innovations backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- credentials: Service-account credential parsing
- database: Supabase client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .credentials import CredentialError, CredentialErrorReason, ServiceCredential, load_service_credential
from .database import get_supabase_client, init_supabase_client, reset_client_cache
from .exceptions import (
    WhyNotError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "CredentialError",
    "CredentialErrorReason",
    "ServiceCredential",
    "load_service_credential",
    "get_supabase_client",
    "init_supabase_client",
    "reset_client_cache",
    "WhyNotError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "AuthenticatedUser",
]
