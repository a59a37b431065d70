"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and keeps a single privilege-resolution path
for both advisory (UI) and authoritative (mutation) callers.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def verify_identity(self, token: str) -> AuthenticatedUser:
        """
        Verify a bearer token and return the identity it carries.

        Args:
            token: Access token issued by Supabase Auth

        Returns:
            AuthenticatedUser with the verified subject

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...

    async def is_privileged(self, user_id: str) -> bool:
        """
        Check whether an identity holds admin privilege.

        Args:
            user_id: Verified subject identifier

        Returns:
            True iff an admins record keyed by user_id exists. Lookup
            failures return False.
        """
        ...
