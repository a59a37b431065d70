"""
Messages module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class MessageType(str, Enum):
    """What a message is about."""

    GENERAL = "general"
    INNOVATION = "innovation"


class MessageFilter(str, Enum):
    """Admin inbox filters."""

    ALL = "all"
    GENERAL = "general"
    INNOVATION = "innovation"
    UNREAD = "unread"


class Message(BaseModel):
    """A stored message."""

    id: str
    type: MessageType
    content: str
    innovation_id: Optional[str] = None
    innovation_title: Optional[str] = Field(None, description="Copied for display")
    created_by: str
    created_by_email: Optional[str] = None
    created_at: datetime
    read: bool = False
    archived: bool = False


class CreateMessageRequest(BaseModel):
    """Request to send a message. The author is the verified caller."""

    model_config = {"extra": "ignore"}

    type: MessageType = MessageType.GENERAL
    content: str = Field(..., max_length=5000)
    innovation_id: Optional[str] = None


class MarkReadRequest(BaseModel):
    """Admin read-flag update."""

    read: bool = True


class MessageListResponse(BaseModel):
    """A user's own messages."""

    messages: list[Message]


class MessageSummary(BaseModel):
    """Inbox counters for the admin console."""

    total: int
    unread: int
    innovation: int


class AdminMessageListResponse(BaseModel):
    """All messages matching a filter, plus counters over all messages."""

    messages: list[Message]
    summary: MessageSummary
