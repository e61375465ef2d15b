"""
Tests for deriving a base URL from request contexts.
"""

import pytest
from types import SimpleNamespace
from fastapi import Request

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from api.context import base_url_from
from api.dependencies import get_base_url, get_link_builder
from builder import InvalidArgumentError, LinkBuilder


def make_request(scheme: str = "https", host: bytes = b"foo.bar", path: str = "/WeatherForecast/1") -> Request:
    """Create a Starlette request from a minimal ASGI scope."""
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": scheme,
        "path": path,
        "root_path": "",
        "query_string": b"page=1",
        "headers": [(b"host", host)],
        "server": ("foo.bar", 443),
    })


class TestBaseUrlFrom:
    """Test base URL extraction."""

    @pytest.mark.parametrize("url,expected", [
        ("https://foo.bar", "https://foo.bar"),
        ("https://foo.bar/some/path?x=1", "https://foo.bar"),
        ("http://localhost:8000/WeatherForecast", "http://localhost:8000"),
        ("  https://foo.bar/  ", "https://foo.bar"),
    ])
    def test_from_url_string(self, url, expected):
        """Test that only scheme and host are kept."""
        assert base_url_from(url) == expected

    def test_from_starlette_request(self):
        """Test extraction from a framework request."""
        assert base_url_from(make_request()) == "https://foo.bar"

    def test_from_starlette_request_with_port(self):
        """Test that a non-default port is kept."""
        assert base_url_from(make_request(scheme="http", host=b"localhost:8000")) == "http://localhost:8000"

    def test_from_object_with_url_string(self):
        """Test extraction from a request whose url is a plain string."""
        request = SimpleNamespace(url="https://foo.bar/api/WeatherForecast?page=2")

        assert base_url_from(request) == "https://foo.bar"

    def test_from_object_with_url_parts(self):
        """Test extraction from a url exposing scheme and netloc."""
        request = SimpleNamespace(url=SimpleNamespace(scheme="https", netloc="foo.bar"))

        assert base_url_from(request) == "https://foo.bar"

    def test_none_request(self):
        """Test that a request is required."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            base_url_from(None)
        assert exc_info.value.parameter_name == "request"

    @pytest.mark.parametrize("url", ["", "  ", "not a url", "/relative/only"])
    def test_url_without_host(self, url):
        """Test that relative or blank URLs are rejected."""
        with pytest.raises(InvalidArgumentError):
            base_url_from(url)

    def test_object_without_url(self):
        """Test that an object with no url is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            base_url_from(SimpleNamespace())
        assert exc_info.value.parameter_name == "request.url"

    def test_url_parts_missing_host(self):
        """Test that url parts without a host are rejected."""
        with pytest.raises(InvalidArgumentError):
            base_url_from(SimpleNamespace(url=SimpleNamespace(scheme="https", netloc="")))


class TestDependencies:
    """Test the FastAPI dependencies."""

    def test_get_link_builder(self):
        """Test that a fresh builder is seeded with the request's base URL."""
        builder = get_link_builder(make_request())

        assert isinstance(builder, LinkBuilder)
        assert builder.base_url == "https://foo.bar"
        assert len(builder) == 0
        assert get_link_builder(make_request()) is not builder

    def test_get_base_url(self):
        """Test the base URL dependency."""
        assert get_base_url(make_request()) == "https://foo.bar"
