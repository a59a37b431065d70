"""
Session gate middleware.

Redirects requests for protected paths to the login page when no session
cookie is present. Presence only: whatever the cookie holds is verified
later by the endpoint that uses it.
"""

from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from modules.session.service import enforce
from shared.config import get_settings


class SessionGateMiddleware:
    """Pure ASGI middleware applying modules.session.enforce."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        cookie = request.cookies.get(get_settings().session_cookie_name)
        redirect_to = enforce(request.url.path, bool(cookie))

        if redirect_to is not None:
            response = RedirectResponse(redirect_to, status_code=307)
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
