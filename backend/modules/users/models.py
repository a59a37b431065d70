"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


MIN_PASSWORD_LENGTH = 6


class UserAccount(BaseModel):
    """A Supabase Auth account as shown in the admin console."""

    id: str
    email: Optional[str] = None
    email_verified: bool = False
    disabled: bool = False
    is_admin: bool = False
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    users: list[UserAccount]


class CreateUserRequest(BaseModel):
    """
    Request to create an account.

    Fields default to empty so that missing values are reported with the
    same error as blank ones.
    """

    email: str = ""
    password: str = Field(default="", repr=False)


class CreateUserResponse(BaseModel):
    success: bool = True
    user_id: str
    email: Optional[str] = None
    email_verified: bool = False
    message: str = "User created successfully"


class DeleteUserResponse(BaseModel):
    success: bool = True
    message: str = "User deleted successfully"
