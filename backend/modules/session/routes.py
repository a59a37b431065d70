"""
Session endpoints.

POST stores the browser's token in the session cookie after sign-in;
DELETE clears it on sign-out.
"""

from fastapi import APIRouter, Response

from .models import CreateSessionRequest, SessionResponse
from .service import create_session, clear_session

router = APIRouter()


@router.post("", response_model=SessionResponse)
async def post_session(request: CreateSessionRequest, response: Response) -> SessionResponse:
    """Issue the session cookie."""
    create_session(response, request.id_token)
    return SessionResponse()


@router.delete("", response_model=SessionResponse)
async def delete_session(response: Response) -> SessionResponse:
    """Clear the session cookie. Always succeeds."""
    clear_session(response)
    return SessionResponse()
