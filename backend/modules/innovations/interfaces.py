"""
Innovations module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Innovation, CreateInnovationRequest, UpdateInnovationRequest


@runtime_checkable
class IInnovationService(Protocol):
    """
    Interface for innovation operations.

    Reads are public. Mutations take the verified ID of an admin; the
    privilege check itself happens before the service is called.
    """

    async def list_innovations(self) -> list[Innovation]:
        """List all innovations, newest first."""
        ...

    async def get_innovation(self, innovation_id: str) -> Innovation:
        """
        Get a single innovation.

        Raises:
            InnovationNotFoundError: If no such innovation exists
        """
        ...

    async def create_innovation(
        self,
        admin_id: str,
        request: CreateInnovationRequest,
    ) -> Innovation:
        """Create an innovation stamped with server-side timestamps."""
        ...

    async def update_innovation(
        self,
        innovation_id: str,
        request: UpdateInnovationRequest,
    ) -> Innovation:
        """
        Update the supplied fields of an existing innovation.

        Raises:
            InnovationNotFoundError: If no such innovation exists
        """
        ...

    async def delete_innovation(self, innovation_id: str) -> None:
        """
        Delete an innovation. Messages referencing it are left untouched.

        Raises:
            InnovationNotFoundError: If no such innovation exists
        """
        ...
