"""
Users module.

Admin-only account management on top of Supabase Auth: list accounts,
create accounts, delete accounts. Admin privilege itself is provisioned
out-of-band and cannot be granted or revoked here.

Public API:
- IUserAdminService: Interface for account operations
- UserAccount: A provider account with its admin flag
"""

from .interfaces import IUserAdminService
from .models import (
    UserAccount,
    UserListResponse,
    CreateUserRequest,
    CreateUserResponse,
    DeleteUserResponse,
)
from .exceptions import (
    UserNotFoundError,
    FieldsRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    EmailAlreadyExistsError,
    CannotDeleteSelfError,
    CannotDeleteAdminError,
)

__all__ = [
    # Interface
    "IUserAdminService",
    # Models
    "UserAccount",
    "UserListResponse",
    "CreateUserRequest",
    "CreateUserResponse",
    "DeleteUserResponse",
    # Exceptions
    "UserNotFoundError",
    "FieldsRequiredError",
    "InvalidEmailError",
    "PasswordTooShortError",
    "EmailAlreadyExistsError",
    "CannotDeleteSelfError",
    "CannotDeleteAdminError",
]
