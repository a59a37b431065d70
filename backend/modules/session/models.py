"""
Session module data models.
"""

from pydantic import BaseModel, ConfigDict, Field


class CreateSessionRequest(BaseModel):
    """Token obtained by the browser after signing in."""

    model_config = ConfigDict(populate_by_name=True)

    id_token: str = Field(default="", alias="idToken")


class SessionResponse(BaseModel):
    success: bool = True
