"""
Weather forecast models for the sample API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from models.hateoas import HATEOASMixin

SUMMARIES = [
    "Freezing", "Bracing", "Chilly", "Cool", "Mild", "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
]


class WeatherForecast(HATEOASMixin):
    """One day's forecast with its navigation links."""

    date: datetime = Field(description="Forecast date")
    temperature_c: int = Field(description="Temperature in Celsius", ge=-273)
    summary: Optional[str] = Field(None, description="Short description of the weather")

    @computed_field
    @property
    def temperature_f(self) -> int:
        """Temperature in Fahrenheit."""
        return 32 + int(self.temperature_c / 0.5556)


class WeatherForecastPage(HATEOASMixin):
    """A page of forecasts with collection-level navigation links."""

    items: List[WeatherForecast] = Field(default_factory=list, description="Forecasts in this page")
    page: int = Field(default=0, ge=0, description="Zero-based page number")
    page_count: int = Field(default=0, ge=0, description="Number of pages available")
