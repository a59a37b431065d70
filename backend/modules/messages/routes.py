"""
Message API endpoints.

Participants send and archive their own messages; admins read the inbox
and mark messages read.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user, require_admin
from api.dependencies import get_message_service
from shared.models import AuthenticatedUser

from .interfaces import IMessageService
from .models import (
    Message,
    MessageFilter,
    MessageListResponse,
    AdminMessageListResponse,
    CreateMessageRequest,
    MarkReadRequest,
)

router = APIRouter()
admin_router = APIRouter()


@router.post("", response_model=Message, status_code=201)
async def create_message(
    request: CreateMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """
    Send a message.

    Innovation-specific messages must name an existing innovation; its
    title is copied onto the message.
    """
    return await service.create_message(user, request)


@router.get("", response_model=MessageListResponse)
async def list_own_messages(
    include_archived: bool = Query(default=False, description="Include archived messages"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> MessageListResponse:
    """List the current user's messages, most recent first."""
    messages = await service.list_own_messages(user.id, include_archived)
    return MessageListResponse(messages=messages)


@router.post("/{message_id}/archive", response_model=Message)
async def toggle_archive(
    message_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """
    Archive or unarchive one of the caller's own messages.

    No admin privilege is needed, but only the author may do this.
    """
    return await service.toggle_archived(message_id, user.id)


@admin_router.get("", response_model=AdminMessageListResponse)
async def list_all_messages(
    filter: MessageFilter = Query(default=MessageFilter.ALL, description="Inbox filter"),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IMessageService = Depends(get_message_service),
) -> AdminMessageListResponse:
    """List all messages (admin only)."""
    return await service.list_all_messages(filter)


@admin_router.post("/{message_id}/read", response_model=Message)
async def mark_read(
    message_id: str,
    request: MarkReadRequest = MarkReadRequest(),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """Set a message's read flag (admin only)."""
    return await service.set_read(message_id, request.read)
