"""
Account administration endpoints (admin only).
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import require_admin
from api.dependencies import get_user_admin_service
from shared.models import AuthenticatedUser

from .interfaces import IUserAdminService
from .models import (
    UserListResponse,
    CreateUserRequest,
    CreateUserResponse,
    DeleteUserResponse,
)

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    admins_only: bool = Query(default=False, description="Only list admin accounts"),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserAdminService = Depends(get_user_admin_service),
) -> UserListResponse:
    """List all accounts with their admin status."""
    return UserListResponse(users=await service.list_users(admins_only))


@router.post("", response_model=CreateUserResponse, status_code=201)
async def create_user(
    request: CreateUserRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserAdminService = Depends(get_user_admin_service),
) -> CreateUserResponse:
    """
    Create an email/password account.

    The account starts with an unverified email.
    """
    account = await service.create_user(request)
    return CreateUserResponse(
        user_id=account.id,
        email=account.email,
        email_verified=account.email_verified,
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserAdminService = Depends(get_user_admin_service),
) -> DeleteUserResponse:
    """
    Delete an account.

    Admins cannot delete themselves, and admin accounts cannot be deleted
    until their privilege is revoked.
    """
    await service.delete_user(admin.id, user_id)
    return DeleteUserResponse()
