"""
Innovations service implementation.
"""

import logging
from typing import Optional

from shared.repository import utc_now

from .interfaces import IInnovationService
from .models import Innovation, CreateInnovationRequest, UpdateInnovationRequest
from .repository import InnovationRepository
from .exceptions import InnovationNotFoundError

logger = logging.getLogger(__name__)


class InnovationService(IInnovationService):
    """Innovation service backed by the innovations table."""

    def __init__(self, repository: Optional[InnovationRepository] = None):
        self._repo = repository or InnovationRepository()

    async def list_innovations(self) -> list[Innovation]:
        return await self._repo.list_all()

    async def get_innovation(self, innovation_id: str) -> Innovation:
        innovation = await self._repo.get_by_id(innovation_id)
        if innovation is None:
            raise InnovationNotFoundError(innovation_id)
        return innovation

    async def create_innovation(
        self,
        admin_id: str,
        request: CreateInnovationRequest,
    ) -> Innovation:
        now = utc_now()
        data = {
            "title": request.title,
            "description": request.description,
            "status": request.status.value,
            "tags": list(request.tags),
            "link": request.link,
            "created_at": now,
            "updated_at": now,
            "created_by": admin_id,
        }
        innovation = await self._repo.create(data)
        logger.info("Innovation %s created by %s", innovation.id, admin_id)
        return innovation

    async def update_innovation(
        self,
        innovation_id: str,
        request: UpdateInnovationRequest,
    ) -> Innovation:
        await self.get_innovation(innovation_id)

        data = request.model_dump(exclude_unset=True, mode="json")
        # Only link may be cleared; a null tags list means "no tags"
        data = {k: v for k, v in data.items() if v is not None or k == "link"}
        if "tags" in request.model_fields_set and request.tags is None:
            data["tags"] = []
        data["updated_at"] = utc_now()

        updated = await self._repo.update(innovation_id, data)
        if updated is None:
            # Deleted between the existence check and the write
            raise InnovationNotFoundError(innovation_id)
        return updated

    async def delete_innovation(self, innovation_id: str) -> None:
        await self.get_innovation(innovation_id)
        await self._repo.delete(innovation_id)
        logger.info("Innovation %s deleted", innovation_id)
