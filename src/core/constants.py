"""
Application constants to avoid hardcoded values.

Shared by the sample API and its server entry point.
"""

# API Configuration
API_TITLE = "HATEOAS Link Builder Sample API"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
Sample REST API showing hypermedia links built with the fluent link builder.

## Features

* **Literal links**: relative paths used as-is
* **Route links**: path segments joined with '/'
* **Query links**: name/value pairs folded into a query string
* **Formatted links**: positional templates such as `WeatherForecast/{0}`
* **Conditional links**: links skipped when a condition is false
* **External links**: links to other sites
"""

# Server Configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"

# API Messages
API_STATUS_RUNNING = "running"
API_STATUS_HEALTHY = "healthy"
API_MESSAGE_ROOT = "HATEOAS Link Builder Sample API"

# Sample Weather Forecast Configuration
WEATHER_FORECAST_ROUTE = "WeatherForecast"
WEATHER_FORECAST_TOTAL = 6
WEATHER_FORECAST_PAGE_SIZE = 2
WEATHER_MIN_TEMPERATURE_C = -20
WEATHER_MAX_TEMPERATURE_C = 55
EXTERNAL_SITE_URL = "http://meyer.com"
EXTERNAL_DETAIL_PATH = "products/accent-nonstick-frypan"

# Error Messages
ERROR_FORECAST_NOT_FOUND = "Forecast not found"
ERROR_LINK_BUILD_FAILED = "Failed to build links"

# Application Lifecycle Messages
STARTUP_MESSAGE = "HATEOAS Link Builder Sample API starting up..."
SHUTDOWN_MESSAGE = "HATEOAS Link Builder Sample API shutting down..."
SERVER_START_MESSAGE = "Starting HATEOAS Link Builder Sample API"

# CORS Configuration (Development - restrict in production)
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = ["*"]
CORS_ALLOW_HEADERS = ["*"]

# Environment Variable Names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"

# HTTP Endpoints
ENDPOINT_ROOT = "/"
ENDPOINT_HEALTH = "/health"
ENDPOINT_DOCS = "/docs"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
