"""Hourly and daily UV forecasts from the One Call 3.0 API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sunbathing_planner.datasources.openweather.client import (
    MULTIDAY_EXCLUDE,
    ONECALL_API,
    TODAY_EXCLUDE,
)
from sunbathing_planner.datasources.openweather.models import (
    DailyAggregate,
    OneCallForecast,
    UvSample,
)
from sunbathing_planner.schemas import OneCallResponse

if TYPE_CHECKING:
    from sunbathing_planner.datasources.openweather.client import OpenWeatherClient
    from sunbathing_planner.datasources.openweather.models import GeoCoordinate


def _fetch(
    client: OpenWeatherClient, coord: GeoCoordinate, exclude: tuple[str, ...]
) -> OneCallForecast:
    params: dict[str, Any] = {
        "lat": coord.latitude,
        "lon": coord.longitude,
        "exclude": ",".join(exclude),
        "units": client.units,
    }
    payload = OneCallResponse.model_validate(client.get_json(ONECALL_API, params))

    current = None
    if payload.current is not None:
        current = UvSample(timestamp=payload.current.dt, uv_index=payload.current.uvi)

    return OneCallForecast(
        current=current,
        hourly=tuple(UvSample(timestamp=h.dt, uv_index=h.uvi) for h in payload.hourly),
        daily=tuple(DailyAggregate(timestamp=d.dt, uv_index=d.uvi) for d in payload.daily),
    )


def fetch_today_forecast(client: OpenWeatherClient, coord: GeoCoordinate) -> OneCallForecast:
    """
    Fetch current UV plus the hourly series (48 hours from now).

    Minutely, daily and alert sections are excluded.
    """
    return _fetch(client, coord, TODAY_EXCLUDE)


def fetch_multiday_forecast(client: OpenWeatherClient, coord: GeoCoordinate) -> OneCallForecast:
    """
    Fetch the hourly series plus the daily aggregates (8 days).

    Current, minutely and alert sections are excluded, so ``current`` is None.
    """
    return _fetch(client, coord, MULTIDAY_EXCLUDE)
