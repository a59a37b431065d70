"""
Centralized configuration for the WhyNot Innovations backend.

All settings are loaded from environment variables with sensible defaults.
Provider settings are namespaced (SUPABASE_*, SESSION_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "WhyNot Innovations API"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    enable_debug_env: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase public configuration (safe to hand to the browser client)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_project_id: str = ""
    supabase_storage_bucket: str = ""

    # Server-side credentials
    service_account_json: str = ""
    supabase_jwt_secret: str = ""

    # Session cookie
    session_cookie_name: str = "wn_session"
    session_max_age: int = 60 * 60 * 24 * 7  # 7 days
    protected_prefixes: list[str] = ["/app"]
    login_path: str = "/login"

    @property
    def is_production(self) -> bool:
        """Anything other than local development is treated as production."""
        return self.environment.lower() != "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
