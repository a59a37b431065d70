"""
Session cookie handling and the route gate.

The gate only checks that a session cookie is present. It does not
validate the token inside it; every endpoint that acts on behalf of a user
verifies the token itself.
"""

import logging
from typing import Optional, Sequence
from urllib.parse import urlencode

from starlette.responses import Response

from shared.config import get_settings
from shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


def create_session(response: Response, token: Optional[str]) -> None:
    """
    Store the token in the session cookie.

    Raises:
        ValidationError: If no token was supplied.
    """
    if not token or not token.strip():
        raise ValidationError("ID token is required", code="TOKEN_REQUIRED")

    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_max_age,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
    logger.debug("Session cookie issued")


def clear_session(response: Response) -> None:
    """Overwrite the session cookie with an empty, already-expired value."""
    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        "",
        max_age=0,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
    logger.debug("Session cookie cleared")


def is_protected(path: str, protected_prefixes: Sequence[str]) -> bool:
    """A path is protected if it is a prefix or lies beneath one."""
    for prefix in protected_prefixes:
        prefix = prefix.rstrip("/")
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def enforce(
    path: str,
    cookie_present: bool,
    protected_prefixes: Optional[Sequence[str]] = None,
    login_path: Optional[str] = None,
) -> Optional[str]:
    """
    Decide whether a request may pass the session gate.

    Args:
        path: Request path.
        cookie_present: Whether a non-empty session cookie was sent.
        protected_prefixes: Defaults to settings.protected_prefixes.
        login_path: Defaults to settings.login_path.

    Returns:
        The login URL to redirect to (carrying the original path in
        ``next``), or None if the request passes unchanged.
    """
    settings = get_settings()
    if protected_prefixes is None:
        protected_prefixes = settings.protected_prefixes
    if login_path is None:
        login_path = settings.login_path

    if cookie_present or not is_protected(path, protected_prefixes):
        return None
    return f"{login_path}?{urlencode({'next': path})}"
