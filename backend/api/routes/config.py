"""
Public client configuration.

Hands the browser the values it needs to initialise its own Supabase
client. Only public values are exposed here.
"""

from typing import Optional
from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from shared.exceptions import ConfigurationError

router = APIRouter()


class PublicConfigResponse(BaseModel):
    url: str
    anon_key: str
    project_id: Optional[str] = None
    storage_bucket: Optional[str] = None


@router.get("/public", response_model=PublicConfigResponse)
async def public_config() -> PublicConfigResponse:
    """
    Public provider configuration.

    Raises a configuration error naming the missing variables rather than
    returning an unusable config.
    """
    settings = get_settings()
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_ANON_KEY", settings.supabase_anon_key),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing public configuration: {', '.join(missing)}",
            code="PUBLIC_CONFIG_MISSING",
            details={"missing": missing},
        )

    return PublicConfigResponse(
        url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        project_id=settings.supabase_project_id or None,
        storage_bucket=settings.supabase_storage_bucket or None,
    )
