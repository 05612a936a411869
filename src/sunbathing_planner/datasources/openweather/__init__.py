"""OpenWeatherMap data source.

Geocoding and One Call 3.0 forecasts. Requires an API key, passed to
:class:`OpenWeatherClient` at construction.

Public API:
  - client: OpenWeatherClient, API URLs, exclude lists
  - models: GeoCoordinate, UvSample, DailyAggregate, OneCallForecast
  - geocoding: geocode (location string -> coordinates)
  - onecall: fetch_today_forecast, fetch_multiday_forecast
"""

from sunbathing_planner.datasources.openweather.client import (
    GEOCODING_API,
    ONECALL_API,
    OpenWeatherClient,
)
from sunbathing_planner.datasources.openweather.geocoding import geocode
from sunbathing_planner.datasources.openweather.models import (
    DailyAggregate,
    GeoCoordinate,
    OneCallForecast,
    UvSample,
)
from sunbathing_planner.datasources.openweather.onecall import (
    fetch_multiday_forecast,
    fetch_today_forecast,
)

__all__ = [
    "GEOCODING_API",
    "ONECALL_API",
    "DailyAggregate",
    "GeoCoordinate",
    "OneCallForecast",
    "OpenWeatherClient",
    "UvSample",
    "fetch_multiday_forecast",
    "fetch_today_forecast",
    "geocode",
]
