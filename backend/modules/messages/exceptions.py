"""
Messages module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class MessageNotFoundError(NotFoundError):
    """Raised when a message is not found."""

    def __init__(self, message_id: str):
        super().__init__(
            "Message not found",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class MessageAccessDeniedError(AuthorizationError):
    """Raised when a user tries to archive someone else's message."""

    def __init__(self, message_id: str, user_id: str):
        super().__init__(
            "Only the author can archive a message",
            code="MESSAGE_ACCESS_DENIED",
            details={"message_id": message_id, "user_id": user_id},
        )


class EmptyMessageError(ValidationError):
    """Raised when the message content is blank."""

    def __init__(self):
        super().__init__("Please enter a message", code="EMPTY_MESSAGE")


class InnovationRequiredError(ValidationError):
    """Raised when an innovation message does not name an innovation."""

    def __init__(self):
        super().__init__(
            "Please select an innovation",
            code="INNOVATION_REQUIRED",
        )
