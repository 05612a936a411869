"""
Suggestion flow: location string -> coordinates -> forecast -> selection.

Each query makes two sequential round trips: geocoding, then One Call. The
forecast request is only sent once geocoding has returned a candidate.
Library exceptions from either call are converted here into
``LocationNotFoundError`` or ``FetchError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

import pydantic
import requests

from sunbathing_planner.analysis.best_slots import (
    best_time_label,
    find_best_time_today,
    suggest_slots,
)
from sunbathing_planner.datasources.openweather import (
    OpenWeatherClient,
    fetch_multiday_forecast,
    fetch_today_forecast,
    geocode,
)
from sunbathing_planner.exceptions import FetchError, InvalidInputError, LocationNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime, tzinfo

    from sunbathing_planner.analysis.best_slots import ForecastDay
    from sunbathing_planner.config import Settings
    from sunbathing_planner.datasources.openweather import GeoCoordinate, OneCallForecast, UvSample

logger = logging.getLogger(__name__)

# Everything the datasource layer can raise for a failed or garbled round trip
_FETCH_ERRORS = (requests.RequestException, pydantic.ValidationError, ValueError)

# Timestamps that pass validation but cannot be placed on the local calendar
_SELECTION_ERRORS = (OverflowError, OSError, ValueError)


@dataclass(frozen=True)
class TodayOutlook:
    """Current UV and today's best hour for a location."""

    location: str
    current_uv_index: float
    best: UvSample | None
    best_time: str


def validate_location(location: str) -> str:
    """Strip ``location``; raise ``InvalidInputError`` when it is blank."""
    cleaned = location.strip()
    if not cleaned:
        raise InvalidInputError("Location must not be empty")
    return cleaned


class SunbathingPlanner:
    """Runs the geocode -> forecast -> select flow for a location."""

    def __init__(self, client: OpenWeatherClient, tz: tzinfo | None = None) -> None:
        self.client = client
        self.tz = tz

    @classmethod
    def from_settings(cls, settings: Settings) -> SunbathingPlanner:
        tz = ZoneInfo(settings.timezone) if settings.timezone else None
        return cls(OpenWeatherClient.from_settings(settings), tz=tz)

    def resolve(self, location: str) -> GeoCoordinate:
        """Geocode ``location``.

        Raises:
            InvalidInputError: blank location (no request is made).
            LocationNotFoundError: the geocoder had no candidate.
            FetchError: the request or its response failed.
        """
        location = validate_location(location)
        try:
            coord = geocode(self.client, location)
        except _FETCH_ERRORS as e:
            raise FetchError(f"Geocoding request failed for {location!r}: {e}") from e

        if coord is None:
            logger.warning("Location not found: %r", location)
            raise LocationNotFoundError(location)

        logger.info("Resolved %r to (%s, %s)", location, coord.latitude, coord.longitude)
        return coord

    def today(self, location: str, now: datetime | None = None) -> TodayOutlook:
        """Current UV index and the first ideal-band hour today."""
        coord = self.resolve(location)
        forecast = self._fetch(fetch_today_forecast, coord)
        try:
            best = find_best_time_today(forecast.hourly, now=now, tz=self.tz)
            best_time = best_time_label(best, tz=self.tz)
        except _SELECTION_ERRORS as e:
            raise FetchError(f"Unusable forecast timestamps: {e}") from e
        return TodayOutlook(
            location=location.strip(),
            current_uv_index=forecast.current_uv_index,
            best=best,
            best_time=best_time,
        )

    def suggest(self, location: str) -> list[ForecastDay]:
        """Recommended slots for each of the next three forecast days."""
        coord = self.resolve(location)
        forecast = self._fetch(fetch_multiday_forecast, coord)
        try:
            return suggest_slots(forecast.daily, forecast.hourly, tz=self.tz)
        except _SELECTION_ERRORS as e:
            raise FetchError(f"Unusable forecast timestamps: {e}") from e

    def _fetch(
        self,
        fetcher: Callable[[OpenWeatherClient, GeoCoordinate], OneCallForecast],
        coord: GeoCoordinate,
    ) -> OneCallForecast:
        try:
            return fetcher(self.client, coord)
        except _FETCH_ERRORS as e:
            raise FetchError(f"Forecast request failed: {e}") from e
