"""
Innovations module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class InnovationStatus(str, Enum):
    """Innovation lifecycle status."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


def _clean_link(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Innovation(BaseModel):
    """A stored innovation record."""

    id: str
    title: str
    description: str
    status: InnovationStatus
    tags: list[str] = Field(default_factory=list)
    link: Optional[str] = Field(None, description="Link to the innovation for user testing")
    created_at: datetime
    updated_at: datetime
    created_by: Optional[str] = None


class InnovationListResponse(BaseModel):
    """List of innovations, newest first."""

    innovations: list[Innovation]


class CreateInnovationRequest(BaseModel):
    """
    Request to create an innovation.

    Timestamps and creator are always set by the server; any such fields
    in the payload are ignored.
    """

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    status: InnovationStatus = InnovationStatus.PENDING
    tags: list[str] = Field(default_factory=list)
    link: Optional[str] = None

    @field_validator("link")
    @classmethod
    def strip_link(cls, value: Optional[str]) -> Optional[str]:
        return _clean_link(value)


class UpdateInnovationRequest(BaseModel):
    """Partial update; only fields present in the payload are written."""

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[InnovationStatus] = None
    tags: Optional[list[str]] = None
    link: Optional[str] = None

    @field_validator("link")
    @classmethod
    def strip_link(cls, value: Optional[str]) -> Optional[str]:
        return _clean_link(value)
