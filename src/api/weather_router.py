"""
Weather forecast sample endpoints.

Each response carries links built with a LinkBuilder, exercising literal,
route, query, formatted, conditional, and external links.
"""

import random
from datetime import datetime, timedelta
from typing import List

from fastapi import APIRouter, Depends, Query

from builder import LinkBuilder
from core.constants import (
    EXTERNAL_DETAIL_PATH,
    EXTERNAL_SITE_URL,
    WEATHER_FORECAST_PAGE_SIZE,
    WEATHER_FORECAST_ROUTE,
    WEATHER_FORECAST_TOTAL,
    WEATHER_MAX_TEMPERATURE_C,
    WEATHER_MIN_TEMPERATURE_C,
)
from core.error_handlers import create_not_found_exception
from models.link import Link
from models.weather import SUMMARIES, WeatherForecast, WeatherForecastPage
from .dependencies import get_base_url

router = APIRouter(prefix=f"/{WEATHER_FORECAST_ROUTE}", tags=["weather"])


def calculate_page_count() -> int:
    """Number of pages needed for all forecasts."""
    return -(-WEATHER_FORECAST_TOTAL // WEATHER_FORECAST_PAGE_SIZE)


def create_forecast(index: int, links: List[Link]) -> WeatherForecast:
    """Create a random forecast ``index`` days from now."""
    return WeatherForecast(
        date=datetime.now() + timedelta(days=index),
        temperature_c=random.randint(WEATHER_MIN_TEMPERATURE_C, WEATHER_MAX_TEMPERATURE_C),
        summary=SUMMARIES[index % len(SUMMARIES)],
        links=links,
    )


def build_item_links(base_url: str, index: int) -> List[Link]:
    """Self link for one forecast."""
    return LinkBuilder(base_url).add_formatted_link("self", f"{WEATHER_FORECAST_ROUTE}/{{0}}", index).build()


def build_page_links(base_url: str, page: int, page_count: int) -> List[Link]:
    """Self link plus previous/next links only where those pages exist."""
    return (
        LinkBuilder(base_url)
        .add_query_link("self", WEATHER_FORECAST_ROUTE, "page", page)
        .add_formatted_link("previous", f"{WEATHER_FORECAST_ROUTE}?page={{0}}", page - 1, condition=page > 0)
        .add_query_link("next", WEATHER_FORECAST_ROUTE, "page", page + 1, condition=page + 1 < page_count)
        .build()
    )


@router.get(
    "",
    response_model=WeatherForecastPage,
    summary="List forecasts one page at a time",
)
async def list_forecasts_endpoint(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    base_url: str = Depends(get_base_url),
) -> WeatherForecastPage:
    """
    List forecasts with pagination links.

    - **page**: Zero-based page number; out-of-range pages return no items
    """
    page_count = calculate_page_count()
    first_index = page * WEATHER_FORECAST_PAGE_SIZE + 1
    last_index = min(first_index + WEATHER_FORECAST_PAGE_SIZE, WEATHER_FORECAST_TOTAL + 1)

    items = [
        create_forecast(index, build_item_links(base_url, index))
        for index in range(first_index, last_index)
    ]

    return WeatherForecastPage(
        items=items,
        page=page,
        page_count=page_count,
        links=build_page_links(base_url, page, page_count),
    )


@router.get(
    "/all",
    response_model=WeatherForecastPage,
    summary="List every forecast",
)
async def list_all_forecasts_endpoint(base_url: str = Depends(get_base_url)) -> WeatherForecastPage:
    """List all forecasts, each with route links to itself and its summary type."""
    items = []
    for index in range(1, WEATHER_FORECAST_TOTAL + 1):
        summary = SUMMARIES[index % len(SUMMARIES)]
        links = (
            LinkBuilder(base_url)
            .add_route_link("self", WEATHER_FORECAST_ROUTE, index)
            .add_route_link("item", WEATHER_FORECAST_ROUTE, "item", "type", summary)
            .build()
        )
        items.append(create_forecast(index, links))

    return WeatherForecastPage(
        items=items,
        page=0,
        page_count=1,
        links=LinkBuilder(base_url).add_link("self", f"{WEATHER_FORECAST_ROUTE}/all").build(),
    )


@router.get(
    "/{forecast_id}",
    response_model=WeatherForecast,
    summary="Get one forecast",
)
async def get_forecast_endpoint(
    forecast_id: int,
    encode: bool = Query(False, description="Percent-encode the relative part of each link"),
    base_url: str = Depends(get_base_url),
) -> WeatherForecast:
    """
    Get one forecast with detail and external links.

    Returns 404 for ids outside the forecast range.
    """
    if not 1 <= forecast_id <= WEATHER_FORECAST_TOTAL:
        raise create_not_found_exception(forecast_id)

    links = (
        LinkBuilder(base_url)
        .add_formatted_link("self", f"{WEATHER_FORECAST_ROUTE}/{{0}}", forecast_id)
        .add_formatted_link("detail", f"{WEATHER_FORECAST_ROUTE}/{{0}}/detail/{{1}}?param={{2}}", forecast_id, "x0x0x0", "value")
        .add_formatted_link("delete", f"{WEATHER_FORECAST_ROUTE}/{{0}}", forecast_id, method="DELETE")
        .add_external_link(EXTERNAL_SITE_URL, "external")
        .add_external_link(EXTERNAL_SITE_URL, "externaldetail", EXTERNAL_DETAIL_PATH)
        .build(encode=encode)
    )

    return create_forecast(forecast_id, links)
