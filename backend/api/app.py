"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging
from modules.auth.routes import router as authserver_router
from modules.sessionserver.routes import router as sessionserver_router

from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health, launcher, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Seeds the demo account and runs the session sweeper while the
    application is up.
    """
    container = get_container()
    settings = container.settings

    if settings.seed_demo_account:
        account = await container.accounts.ensure_account(
            username=settings.seed_username,
            email=settings.seed_email,
            password=settings.seed_password,
            profile_name=settings.seed_profile_name,
        )
        if account is not None:
            logger.info(
                f"Demo account ready: {settings.seed_username} "
                f"(profile {settings.seed_profile_name})"
            )

    container.sweeper.start()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    await container.sweeper.stop()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Authentication and session server for the legacy game-client protocol",
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

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(authserver_router, prefix="/authserver", tags=["authserver"])
    app.include_router(sessionserver_router, prefix="/sessionserver", tags=["sessionserver"])
    app.include_router(users.router, prefix="/api", tags=["users"])
    app.include_router(launcher.router, prefix="/launcher", tags=["launcher"])

    return app


# Application instance for uvicorn
app = create_app()
