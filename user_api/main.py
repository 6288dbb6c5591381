"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: DI container opens MongoDB → ensures indexes → serves /users
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from user_api import __version__
from user_api.api.v1 import register_exception_handlers, user_router
from user_api.api.v1.dependencies import get_user_service
from user_api.application.dto.user_dto import HealthResponse
from user_api.application.services.user_service import UserService
from user_api.core.config import Settings, get_settings
from user_api.core.logging_config import configure_logging
from user_api.di.base_container import BaseContainer
from user_api.di.container import DIContainer

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "User REST API is running"


def create_application(
    container: Optional[BaseContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - The DI container (built from settings unless one is passed in)
    - CORS middleware configuration
    - API route registration and error handlers
    - A lifespan handler that opens and closes the database connection

    Args:
        container: Pre-built container (tests pass one backed by memory)
        settings: Settings to build the container from; read from the environment if omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if container is None:
        container = DIContainer(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """
        Open the database connection before serving and close it afterwards.

        A startup failure is fatal: the exception propagates, uvicorn reports
        the failed startup and the process exits. There is no reconnect loop.
        """
        try:
            container.startup()
        except Exception as e:
            logger.critical(f"❌ Startup failed: {e}")
            raise
        logger.info("🚀 User REST API ready")

        try:
            yield
        finally:
            container.shutdown()
            logger.info("🛑 User REST API stopped")

    application = FastAPI(
        title="User REST API",
        description="CRUD API for user records stored in MongoDB",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(user_router, prefix="/users")

    @application.get("/", response_class=PlainTextResponse)
    def root() -> str:
        """Root endpoint - health check."""
        return ROOT_MESSAGE

    @application.get("/health", response_model=HealthResponse)
    def health(service: UserService = Depends(get_user_service)) -> HealthResponse:
        """Health check endpoint, including a database ping."""
        database = "up" if service.is_store_available() else "down"
        return HealthResponse(status="healthy", database=database)

    return application


def run() -> None:
    """Serve the API with uvicorn on HOST:PORT."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"🚀 Server listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "user_api.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
