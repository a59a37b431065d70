"""
Dashboard data models.
"""

from pydantic import BaseModel

from modules.innovations.models import Innovation
from shared.models import AuthenticatedUser


class DashboardResponse(BaseModel):
    user: AuthenticatedUser
    is_admin: bool
    innovations: list[Innovation]
