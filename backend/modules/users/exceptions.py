"""
Users module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class UserNotFoundError(NotFoundError):
    """Raised when the target account does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class FieldsRequiredError(ValidationError):
    def __init__(self):
        super().__init__("Email and password are required", code="FIELDS_REQUIRED")


class InvalidEmailError(ValidationError):
    def __init__(self, email: str):
        super().__init__(
            "Invalid email format",
            code="INVALID_EMAIL",
            details={"email": email},
        )


class PasswordTooShortError(ValidationError):
    def __init__(self, min_length: int):
        super().__init__(
            f"Password must be at least {min_length} characters",
            code="PASSWORD_TOO_SHORT",
            details={"min_length": min_length},
        )


class EmailAlreadyExistsError(ValidationError):
    def __init__(self, email: str):
        super().__init__(
            "An account with this email already exists",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": email},
        )


class CannotDeleteSelfError(AuthorizationError):
    """Raised when an admin tries to delete their own account."""

    def __init__(self, user_id: str):
        super().__init__(
            "Forbidden: cannot delete self",
            code="CANNOT_DELETE_SELF",
            details={"user_id": user_id},
        )


class CannotDeleteAdminError(AuthorizationError):
    """Raised when the target account holds admin privilege."""

    def __init__(self, user_id: str):
        super().__init__(
            "Forbidden: cannot delete admin. Remove admin status first.",
            code="CANNOT_DELETE_ADMIN",
            details={"user_id": user_id},
        )
