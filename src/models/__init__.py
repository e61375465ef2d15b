"""
HATEOAS Link Builder - Pydantic Models

This module contains the link value type and the response models that carry links.
"""

from .link import Link
from .hateoas import HATEOASMixin, to_href, to_self_href
from .weather import WeatherForecast, WeatherForecastPage

__all__ = [
    "Link",
    "HATEOASMixin",
    "to_href",
    "to_self_href",
    "WeatherForecast",
    "WeatherForecastPage",
]
