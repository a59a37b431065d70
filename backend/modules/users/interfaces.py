"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from .models import UserAccount, CreateUserRequest


@runtime_checkable
class IUserAdminService(Protocol):
    """
    Interface for account administration.

    Every method assumes the caller has already been verified as an admin.
    """

    async def list_users(self, admins_only: bool = False) -> list[UserAccount]:
        """List provider accounts with their admin flag."""
        ...

    async def create_user(self, request: CreateUserRequest) -> UserAccount:
        """
        Create an unverified email/password account.

        Raises:
            ValidationError: Missing fields, bad email, short password,
                or the email is already registered
        """
        ...

    async def delete_user(self, requester_id: str, target_id: str) -> None:
        """
        Delete an account.

        Raises:
            CannotDeleteSelfError: If target_id is the requester
            UserNotFoundError: If the account does not exist
            CannotDeleteAdminError: If the target holds admin privilege
        """
        ...
