"""
Auth endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AdminCheckResponse

router = APIRouter()


@router.get("/check", response_model=AdminCheckResponse)
async def check_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> AdminCheckResponse:
    """
    Report whether the caller is an admin.

    Advisory only: used by the frontend to decide which controls to render.
    Admin endpoints perform their own check.
    """
    return AdminCheckResponse(is_admin=await auth.is_privileged(user.id))
