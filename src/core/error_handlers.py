"""
Common error handling utilities for the sample API.

Translates link builder failures that escape an endpoint into HTTP responses.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from builder.exceptions import LinkBuilderError
from core.constants import ERROR_FORECAST_NOT_FOUND, ERROR_LINK_BUILD_FAILED

logger = logging.getLogger(__name__)


def create_not_found_exception(forecast_id: int) -> HTTPException:
    """
    Create HTTP 404 exception for a forecast that does not exist.

    Args:
        forecast_id: ID of the forecast that was not found

    Returns:
        HTTPException with 404 status code
    """
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{ERROR_FORECAST_NOT_FOUND}: {forecast_id}"
    )


def create_link_build_error_response(error: LinkBuilderError) -> JSONResponse:
    """
    Create HTTP 500 response for a link set that could not be built.

    Args:
        error: The builder failure

    Returns:
        JSONResponse with 500 status code
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"{ERROR_LINK_BUILD_FAILED}: {error}"},
    )


async def link_builder_exception_handler(request: Request, error: LinkBuilderError) -> JSONResponse:
    """Log and translate a builder failure raised while handling ``request``."""
    logger.error(f"{ERROR_LINK_BUILD_FAILED} for {request.method} {request.url.path}: {error}")
    return create_link_build_error_response(error)


def register_exception_handlers(application: FastAPI) -> None:
    """Register the builder failure handler with the application."""
    application.add_exception_handler(LinkBuilderError, link_builder_exception_handler)
