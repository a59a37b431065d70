"""
Innovations module.

Handles the showcased innovation records: public listing and admin-only
create, update and delete.

Public API:
- IInnovationService: Interface for innovation operations
- Innovation: A stored innovation record
- CreateInnovationRequest / UpdateInnovationRequest: Admin payloads
"""

from .interfaces import IInnovationService
from .models import (
    Innovation,
    InnovationStatus,
    InnovationListResponse,
    CreateInnovationRequest,
    UpdateInnovationRequest,
)
from .exceptions import InnovationNotFoundError

__all__ = [
    # Interface
    "IInnovationService",
    # Models
    "Innovation",
    "InnovationStatus",
    "InnovationListResponse",
    "CreateInnovationRequest",
    "UpdateInnovationRequest",
    # Exceptions
    "InnovationNotFoundError",
]
