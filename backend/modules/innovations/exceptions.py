"""
Innovations module exceptions.
"""

from shared.exceptions import NotFoundError


class InnovationNotFoundError(NotFoundError):
    """Raised when an innovation is not found."""

    def __init__(self, innovation_id: str):
        super().__init__(
            "Innovation not found",
            code="INNOVATION_NOT_FOUND",
            details={"innovation_id": innovation_id},
        )
