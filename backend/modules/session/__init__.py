"""
Session module.

Bridges a client-side login to server-side route protection with an
HTTP-only cookie holding the verified token.

Public API:
- create_session / clear_session: Cookie issue and removal
- enforce: The presence-only gate for protected path prefixes
"""

from .service import create_session, clear_session, enforce, is_protected
from .models import CreateSessionRequest, SessionResponse

__all__ = [
    "create_session",
    "clear_session",
    "enforce",
    "is_protected",
    "CreateSessionRequest",
    "SessionResponse",
]
