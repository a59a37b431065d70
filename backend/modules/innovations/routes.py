"""
Innovation API endpoints.

Reads are public; create, update and delete require an admin.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import require_admin
from api.dependencies import get_innovation_service
from shared.models import AuthenticatedUser

from .interfaces import IInnovationService
from .models import (
    Innovation,
    InnovationListResponse,
    CreateInnovationRequest,
    UpdateInnovationRequest,
)

router = APIRouter()


@router.get("", response_model=InnovationListResponse)
async def list_innovations(
    service: IInnovationService = Depends(get_innovation_service),
) -> InnovationListResponse:
    """
    List all innovations, most recent first.

    Public, no authentication required.
    """
    return InnovationListResponse(innovations=await service.list_innovations())


@router.get("/{innovation_id}", response_model=Innovation)
async def get_innovation(
    innovation_id: str,
    service: IInnovationService = Depends(get_innovation_service),
) -> Innovation:
    """Get a single innovation. Public."""
    return await service.get_innovation(innovation_id)


@router.post("", response_model=Innovation, status_code=201)
async def create_innovation(
    request: CreateInnovationRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IInnovationService = Depends(get_innovation_service),
) -> Innovation:
    """Create a new innovation (admin only)."""
    return await service.create_innovation(admin.id, request)


@router.put("/{innovation_id}", response_model=Innovation)
async def update_innovation(
    innovation_id: str,
    request: UpdateInnovationRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IInnovationService = Depends(get_innovation_service),
) -> Innovation:
    """Update an innovation (admin only)."""
    return await service.update_innovation(innovation_id, request)


@router.delete("/{innovation_id}")
async def delete_innovation(
    innovation_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IInnovationService = Depends(get_innovation_service),
) -> dict:
    """
    Delete an innovation (admin only).

    Messages that reference it are kept.
    """
    await service.delete_innovation(innovation_id)
    return {"success": True}
