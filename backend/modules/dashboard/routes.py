"""
Participant dashboard endpoint.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_auth_service, get_innovation_service
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingTokenError
from modules.innovations.interfaces import IInnovationService
from shared.config import get_settings

from .models import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def dashboard(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    innovations: IInnovationService = Depends(get_innovation_service),
) -> DashboardResponse:
    """
    Dashboard data for the signed-in participant.

    The session gate has already ensured a cookie is present; the token in
    it is verified here.
    """
    token = request.cookies.get(get_settings().session_cookie_name)
    if not token:
        raise MissingTokenError()

    user = await auth.verify_identity(token)
    return DashboardResponse(
        user=user,
        is_admin=await auth.is_privileged(user.id),
        innovations=await innovations.list_innovations(),
    )
