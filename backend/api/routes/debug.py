"""
Environment diagnostics.

Reports which required variables are set, without revealing their values.
Disabled in production unless ENABLE_DEBUG_ENV is set.
"""

from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import Settings, get_settings
from shared.exceptions import AuthorizationError

router = APIRouter()

# Env var name -> settings attribute
REQUIRED_VARIABLES = {
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_ANON_KEY": "supabase_anon_key",
    "SUPABASE_PROJECT_ID": "supabase_project_id",
    "SUPABASE_STORAGE_BUCKET": "supabase_storage_bucket",
    "SERVICE_ACCOUNT_JSON": "service_account_json",
}


class VariableStatus(BaseModel):
    name: str
    is_set: bool
    length: int
    preview: Optional[str] = None


class EnvSummary(BaseModel):
    total: int
    set: int
    missing: int
    missing_names: list[str]


class EnvStatusResponse(BaseModel):
    environment: str
    timestamp: datetime
    variables: list[VariableStatus]
    summary: EnvSummary


def _preview(value: str) -> Optional[str]:
    if not value:
        return None
    return f"{value[:4]}...{value[-4:]}"


def variable_status(settings: Settings) -> list[VariableStatus]:
    statuses = []
    for name, attribute in REQUIRED_VARIABLES.items():
        value = getattr(settings, attribute) or ""
        statuses.append(
            VariableStatus(
                name=name,
                is_set=bool(value),
                length=len(value),
                preview=_preview(value),
            )
        )
    return statuses


@router.get("/env", response_model=EnvStatusResponse)
async def env_status() -> EnvStatusResponse:
    """Check whether required environment variables are loaded."""
    settings = get_settings()
    if settings.is_production and not settings.enable_debug_env:
        raise AuthorizationError(
            "Debug endpoint disabled in production",
            code="DEBUG_DISABLED",
        )

    variables = variable_status(settings)
    missing = [v.name for v in variables if not v.is_set]
    return EnvStatusResponse(
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
        variables=variables,
        summary=EnvSummary(
            total=len(variables),
            set=len(variables) - len(missing),
            missing=len(missing),
            missing_names=missing,
        ),
    )
