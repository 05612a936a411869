"""Location name -> coordinates via the OpenWeatherMap direct geocoding API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sunbathing_planner.datasources.openweather.client import GEOCODING_API
from sunbathing_planner.datasources.openweather.models import GeoCoordinate
from sunbathing_planner.schemas import GeoCandidateList

if TYPE_CHECKING:
    from sunbathing_planner.datasources.openweather.client import OpenWeatherClient

logger = logging.getLogger(__name__)


def geocode(client: OpenWeatherClient, location: str) -> GeoCoordinate | None:
    """
    Resolve a free-text location to coordinates.

    Args:
        client: Configured OpenWeatherMap client.
        location: City name, optionally with state/country ("Lisbon,PT").

    Returns:
        Coordinates of the first candidate, or None when nothing matched.

    Raises:
        requests.RequestException: transport, status or JSON failure.
        pydantic.ValidationError: the body is not a list of candidates.
    """
    data = client.get_json(GEOCODING_API, {"q": location, "limit": 1})
    candidates = GeoCandidateList.validate_python(data)
    if not candidates:
        return None

    first = candidates[0]
    logger.debug("Geocoded %r to %s (%s, %s)", location, first.name, first.lat, first.lon)
    return GeoCoordinate(latitude=first.lat, longitude=first.lon)
