"""
Messages module.

Handles participant feedback messages. Any authenticated user can send a
message and archive their own; admins read all of them and mark them read.
Messages are never deleted.

Public API:
- IMessageService: Interface for message operations
- Message: A stored message
- CreateMessageRequest: Payload for sending a message
"""

from .interfaces import IMessageService
from .models import (
    Message,
    MessageType,
    MessageFilter,
    MessageListResponse,
    MessageSummary,
    AdminMessageListResponse,
    CreateMessageRequest,
    MarkReadRequest,
)
from .exceptions import (
    MessageNotFoundError,
    MessageAccessDeniedError,
    EmptyMessageError,
    InnovationRequiredError,
)

__all__ = [
    # Interface
    "IMessageService",
    # Models
    "Message",
    "MessageType",
    "MessageFilter",
    "MessageListResponse",
    "MessageSummary",
    "AdminMessageListResponse",
    "CreateMessageRequest",
    "MarkReadRequest",
    # Exceptions
    "MessageNotFoundError",
    "MessageAccessDeniedError",
    "EmptyMessageError",
    "InnovationRequiredError",
]
