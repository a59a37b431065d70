"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.database import init_supabase_client
from shared.exceptions import ConfigurationError

from .errors import register_exception_handlers
from .middleware.session import SessionGateMiddleware
from .routes import config, debug, health
from modules.auth.routes import router as auth_router
from modules.dashboard.routes import router as dashboard_router
from modules.innovations.routes import router as innovations_router
from modules.messages.routes import router as messages_router, admin_router as admin_messages_router
from modules.session.routes import router as session_router
from modules.users.routes import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Initialises the Supabase client once at startup. A configuration
    problem is logged here and raised again to the first request that
    needs the client.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    try:
        await init_supabase_client()
    except ConfigurationError as e:
        logger.error("Supabase client not initialised: %s", e.message)
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="WhyNot Innovations portal API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(SessionGateMiddleware)

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(config.router, prefix="/api/config", tags=["config"])
    app.include_router(debug.router, prefix="/api/debug", tags=["debug"])
    app.include_router(session_router, prefix="/api/auth/session", tags=["session"])
    app.include_router(auth_router, prefix="/api/admin", tags=["admin"])
    app.include_router(innovations_router, prefix="/api/innovations", tags=["innovations"])
    app.include_router(messages_router, prefix="/api/messages", tags=["messages"])
    app.include_router(admin_messages_router, prefix="/api/admin/messages", tags=["admin"])
    app.include_router(users_router, prefix="/api/admin/users", tags=["admin"])
    app.include_router(dashboard_router, prefix="/app", tags=["dashboard"])

    return app


# Application instance for uvicorn
app = create_app()
