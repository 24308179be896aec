"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.auth.routes import router as auth_router

from .dependencies import ServiceContainer
from .exception_handlers import setup_exception_handlers
from .routes import health, profile

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure root logging once, at the level from settings."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    container: ServiceContainer = app.state.container
    settings = container.settings
    logger.info(
        "Starting %s on %s:%s (users store: %s)",
        settings.app_name,
        settings.host,
        settings.port,
        type(container.users).__name__,
    )
    if settings.uses_dev_secret:
        logger.warning("JWT_SECRET is not set; signing tokens with the development secret")
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Services to serve requests with. Defaults to a container
            built from settings.

    Returns:
        Configured FastAPI instance
    """
    _configure_logging()
    container = container or ServiceContainer()
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="Account registration, login and profile API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    setup_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(profile.router, prefix="/api/profile", tags=["profile"])

    return app


# Application instance for uvicorn
app = create_app()
