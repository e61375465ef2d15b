"""
FastAPI HATEOAS Link Builder sample application.

Main application entry point with routers, middleware, and error handlers.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.weather_router import router as weather_router
from core.constants import (
    API_TITLE,
    API_VERSION,
    API_DESCRIPTION,
    API_MESSAGE_ROOT,
    API_STATUS_HEALTHY,
    API_STATUS_RUNNING,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    ENDPOINT_ROOT,
    ENDPOINT_HEALTH,
    ENDPOINT_DOCS,
    ENV_HOST,
    ENV_PORT,
    ENV_LOG_LEVEL,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    STARTUP_MESSAGE,
    SHUTDOWN_MESSAGE,
    SERVER_START_MESSAGE,
    CORS_ALLOW_ORIGINS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_HEADERS,
)
from core.error_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def get_log_level() -> str:
    """Get log level name from the environment."""
    return os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)


def configure_logging() -> None:
    """Configure root logging with the shared format."""
    logging.basicConfig(
        level=get_log_level().upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


@asynccontextmanager
async def application_lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(STARTUP_MESSAGE)

    yield

    logger.info(SHUTDOWN_MESSAGE)


def create_fastapi_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Separates application creation from configuration for better testability.
    """
    return FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=application_lifespan,
    )


def configure_cors_middleware(application: FastAPI) -> None:
    """Configure CORS middleware with constants."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )


def register_api_routers(application: FastAPI) -> None:
    """Register all API routers with the application."""
    application.include_router(weather_router)


def create_health_check_response() -> dict:
    """Create health check response."""
    return {"status": API_STATUS_HEALTHY}


def create_root_response() -> dict:
    """Create root endpoint response with API information."""
    return {
        "message": API_MESSAGE_ROOT,
        "version": API_VERSION,
        "docs": ENDPOINT_DOCS,
        "health": ENDPOINT_HEALTH,
        "status": API_STATUS_RUNNING
    }


def get_server_configuration() -> tuple[str, int]:
    """Get server host and port from environment variables."""
    host = os.getenv(ENV_HOST, DEFAULT_HOST)
    port = int(os.getenv(ENV_PORT, DEFAULT_PORT))
    return host, port


def start_development_server() -> None:
    """Start development server with configuration from environment."""
    import uvicorn

    configure_logging()
    host, port = get_server_configuration()
    logger.info(f"{SERVER_START_MESSAGE} on {host}:{port}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,  # Enable auto-reload in development
        log_level=get_log_level(),
    )


# Create FastAPI application using factory functions
app = create_fastapi_application()
configure_cors_middleware(app)
register_api_routers(app)
register_exception_handlers(app)


@app.get(ENDPOINT_ROOT, summary="Root endpoint")
async def root_endpoint():
    """Root endpoint providing basic API information."""
    return create_root_response()


@app.get(ENDPOINT_HEALTH, summary="Health check")
async def health_check_endpoint():
    """Health check endpoint for monitoring."""
    return create_health_check_response()


if __name__ == "__main__":
    start_development_server()
