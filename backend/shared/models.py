"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents a verified identity.

    Populated from a token that has been verified either offline (JWT secret)
    or by the auth provider, and made available to route handlers via
    dependency injection. Privilege is never stored here; it is resolved
    separately for every request that needs it.
    """

    id: str = Field(..., description="Verified subject identifier")
    email: Optional[str] = Field(None, description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from token claims
    }
