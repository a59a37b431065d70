"""
Messages service implementation.
"""

import logging
from typing import Optional

from modules.innovations.interfaces import IInnovationService
from shared.models import AuthenticatedUser
from shared.repository import utc_now

from .interfaces import IMessageService
from .models import (
    Message,
    MessageType,
    MessageFilter,
    MessageSummary,
    AdminMessageListResponse,
    CreateMessageRequest,
)
from .repository import MessageRepository
from .exceptions import (
    MessageNotFoundError,
    MessageAccessDeniedError,
    EmptyMessageError,
    InnovationRequiredError,
)

logger = logging.getLogger(__name__)


class MessageService(IMessageService):
    """
    Message service backed by the messages table.

    Innovation lookups go through IInnovationService so that a message can
    only reference an innovation that exists.
    """

    def __init__(
        self,
        innovations: IInnovationService,
        repository: Optional[MessageRepository] = None,
    ):
        self._innovations = innovations
        self._repo = repository or MessageRepository()

    async def create_message(
        self,
        author: AuthenticatedUser,
        request: CreateMessageRequest,
    ) -> Message:
        content = request.content.strip()
        if not content:
            raise EmptyMessageError()

        data = {
            "type": request.type.value,
            "content": content,
            "created_by": author.id,
            "created_by_email": author.email,
            "created_at": utc_now(),
            "read": False,
            "archived": False,
        }

        if request.type == MessageType.INNOVATION:
            if not request.innovation_id:
                raise InnovationRequiredError()
            innovation = await self._innovations.get_innovation(request.innovation_id)
            data["innovation_id"] = innovation.id
            data["innovation_title"] = innovation.title

        return await self._repo.create(data)

    async def list_own_messages(
        self,
        user_id: str,
        include_archived: bool = False,
    ) -> list[Message]:
        messages = await self._repo.list_by_author(user_id)
        if include_archived:
            return messages
        return [m for m in messages if not m.archived]

    async def list_all_messages(
        self,
        message_filter: MessageFilter = MessageFilter.ALL,
    ) -> AdminMessageListResponse:
        messages = await self._repo.list_all()

        summary = MessageSummary(
            total=len(messages),
            unread=sum(1 for m in messages if not m.read),
            innovation=sum(1 for m in messages if m.type == MessageType.INNOVATION),
        )

        if message_filter == MessageFilter.UNREAD:
            messages = [m for m in messages if not m.read]
        elif message_filter != MessageFilter.ALL:
            messages = [m for m in messages if m.type.value == message_filter.value]

        return AdminMessageListResponse(messages=messages, summary=summary)

    async def _get_message(self, message_id: str) -> Message:
        message = await self._repo.get_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)
        return message

    async def set_read(self, message_id: str, read: bool = True) -> Message:
        await self._get_message(message_id)
        updated = await self._repo.update_flags(message_id, {"read": read})
        if updated is None:
            raise MessageNotFoundError(message_id)
        return updated

    async def toggle_archived(self, message_id: str, user_id: str) -> Message:
        message = await self._get_message(message_id)
        if message.created_by != user_id:
            logger.info("Refused archive of %s by non-author %s", message_id, user_id)
            raise MessageAccessDeniedError(message_id, user_id)

        updated = await self._repo.update_flags(message_id, {"archived": not message.archived})
        if updated is None:
            raise MessageNotFoundError(message_id)
        return updated
