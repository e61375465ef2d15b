"""
Request-context adapter for the link builder.

Derives the ``scheme://host`` base URL that seeds a LinkBuilder from whatever
request representation the web framework hands an endpoint.
"""

from typing import Any
from urllib.parse import urlsplit

from builder.exceptions import InvalidArgumentError
from builder.validation import NULL_VALUE_MESSAGE, check_not_blank

MISSING_HOST_MESSAGE = "URL must be absolute, with a scheme and a host."


def _base_url_from_string(url: str) -> str:
    parts = urlsplit(check_not_blank(url, "url"))
    if not parts.scheme or not parts.netloc:
        raise InvalidArgumentError(MISSING_HOST_MESSAGE, "url")
    return f"{parts.scheme}://{parts.netloc}"


def base_url_from(request: Any) -> str:
    """
    Extract the base URL, with no path, from a request.

    Accepts a Starlette/FastAPI ``Request``, any object whose ``url`` is either
    a string or exposes ``scheme`` and ``netloc`` (e.g. an Azure Functions
    ``HttpRequest``), or an absolute URL string.

    Raises:
        InvalidArgumentError: If request is None or carries no absolute URL
    """
    if request is None:
        raise InvalidArgumentError(NULL_VALUE_MESSAGE, "request")

    if isinstance(request, str):
        return _base_url_from_string(request)

    url = getattr(request, "url", None)
    if url is None:
        raise InvalidArgumentError(NULL_VALUE_MESSAGE, "request.url")

    if isinstance(url, str):
        return _base_url_from_string(url)

    scheme = getattr(url, "scheme", None)
    netloc = getattr(url, "netloc", None)
    if not scheme or not netloc:
        raise InvalidArgumentError(MISSING_HOST_MESSAGE, "request.url")

    return f"{scheme}://{netloc}"
