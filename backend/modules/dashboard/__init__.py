"""
Participant dashboard.

Served under the session-protected /app prefix. The admin flag it returns
only tells the frontend which controls to show; it is never consulted for
authorization.
"""

from .models import DashboardResponse

__all__ = ["DashboardResponse"]
