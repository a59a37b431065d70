"""
Messages module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    Message,
    MessageFilter,
    AdminMessageListResponse,
    CreateMessageRequest,
)


@runtime_checkable
class IMessageService(Protocol):
    """Interface for message operations."""

    async def create_message(
        self,
        author: AuthenticatedUser,
        request: CreateMessageRequest,
    ) -> Message:
        """
        Send a message as the verified author.

        Raises:
            EmptyMessageError: If content is blank
            InnovationRequiredError: If an innovation message names no innovation
            InnovationNotFoundError: If the named innovation does not exist
        """
        ...

    async def list_own_messages(
        self,
        user_id: str,
        include_archived: bool = False,
    ) -> list[Message]:
        """List the user's messages, newest first."""
        ...

    async def list_all_messages(
        self,
        message_filter: MessageFilter = MessageFilter.ALL,
    ) -> AdminMessageListResponse:
        """List every message for the admin inbox, newest first."""
        ...

    async def set_read(self, message_id: str, read: bool = True) -> Message:
        """
        Set the read flag. Callers must already have checked privilege.

        Raises:
            MessageNotFoundError: If no such message exists
        """
        ...

    async def toggle_archived(self, message_id: str, user_id: str) -> Message:
        """
        Flip the archived flag of the user's own message.

        Raises:
            MessageNotFoundError: If no such message exists
            MessageAccessDeniedError: If the user did not write it
        """
        ...
