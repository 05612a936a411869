"""OpenWeatherMap API client and shared constants.

API docs:
  - Geocoding: https://openweathermap.org/api/geocoding-api
  - One Call 3.0: https://openweathermap.org/api/one-call-3
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sunbathing_planner.services.http import DEFAULT_TIMEOUT, create_session

if TYPE_CHECKING:
    import requests

    from sunbathing_planner.config import Settings

logger = logging.getLogger(__name__)

GEOCODING_API = "https://api.openweathermap.org/geo/1.0/direct"
ONECALL_API = "https://api.openweathermap.org/data/3.0/onecall"

# Sections dropped from the One Call response for each use
TODAY_EXCLUDE = ("minutely", "daily", "alerts")
MULTIDAY_EXCLUDE = ("current", "minutely", "alerts")

DEFAULT_UNITS = "metric"


class OpenWeatherClient:
    """Holds the API key, units and HTTP session for OpenWeatherMap calls."""

    def __init__(
        self,
        api_key: str,
        *,
        units: str = DEFAULT_UNITS,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.units = units
        self.session = session if session is not None else create_session(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenWeatherClient:
        return cls(
            settings.openweathermap_api_key,
            units=settings.units,
            timeout=settings.http_timeout_seconds,
        )

    def get_json(self, url: str, params: dict[str, Any]) -> Any:
        """GET ``url`` with the API key appended and return the decoded body.

        Raises ``requests.RequestException`` on transport errors, non-2xx
        status and undecodable bodies.
        """
        logger.debug("GET %s params=%s", url, params)
        resp = self.session.get(url, params={**params, "appid": self.api_key})
        resp.raise_for_status()
        return resp.json()
