"""
FastAPI dependencies for dependency injection.

Provides a fresh link builder per request.
"""

from fastapi import Request

from builder import LinkBuilder
from .context import base_url_from


def get_link_builder(request: Request) -> LinkBuilder:
    """Get a link builder seeded with the request's base URL."""
    return LinkBuilder(base_url_from(request))


def get_base_url(request: Request) -> str:
    """Get the request's base URL for endpoints that build several link sets."""
    return base_url_from(request)
