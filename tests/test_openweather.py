"""
Tests for the OpenWeatherMap data source.
"""

from __future__ import annotations

from unittest.mock import Mock

import pydantic
import pytest
import requests

from payloads import GEO_LISBON, ONECALL_MULTIDAY, ONECALL_TODAY, mock_response, ts
from sunbathing_planner.config import Settings
from sunbathing_planner.datasources.openweather import (
    GEOCODING_API,
    ONECALL_API,
    DailyAggregate,
    GeoCoordinate,
    OpenWeatherClient,
    UvSample,
    fetch_multiday_forecast,
    fetch_today_forecast,
    geocode,
)

LISBON = GeoCoordinate(latitude=38.7077, longitude=-9.1365)


def client_returning(payload: object) -> tuple[OpenWeatherClient, Mock]:
    session = Mock()
    session.get.return_value = mock_response(payload)
    return OpenWeatherClient("test-key", session=session), session


class TestOpenWeatherClient:
    """Shared request plumbing."""

    def test_appends_api_key(self) -> None:
        client, session = client_returning([])
        client.get_json(GEOCODING_API, {"q": "Lisbon"})
        session.get.assert_called_once_with(GEOCODING_API, params={"q": "Lisbon", "appid": "test-key"})

    def test_raises_on_http_error(self) -> None:
        session = Mock()
        session.get.return_value = mock_response({"cod": 401}, status=401)
        client = OpenWeatherClient("bad", session=session)
        with pytest.raises(requests.HTTPError):
            client.get_json(ONECALL_API, {})

    def test_from_settings(self) -> None:
        settings = Settings(openweathermap_api_key="k", units="imperial", http_timeout_seconds=5)
        client = OpenWeatherClient.from_settings(settings)
        assert client.api_key == "k"
        assert client.units == "imperial"
        assert isinstance(client.session, requests.Session)

    def test_default_session_created(self) -> None:
        client = OpenWeatherClient("k")
        assert "sunbathing-planner" in client.session.headers["User-Agent"]


class TestGeocode:
    """Location string -> coordinates."""

    def test_first_candidate(self) -> None:
        client, session = client_returning(GEO_LISBON)
        assert geocode(client, "Lisbon") == LISBON
        params = session.get.call_args.kwargs["params"]
        assert params["q"] == "Lisbon"
        assert params["limit"] == 1

    def test_no_candidates(self) -> None:
        client, _ = client_returning([])
        assert geocode(client, "Atlantis") is None

    def test_malformed_body(self) -> None:
        client, _ = client_returning({"cod": "400", "message": "Nothing to geocode"})
        with pytest.raises(pydantic.ValidationError):
            geocode(client, "")

    def test_invalid_latitude(self) -> None:
        client, _ = client_returning([{"lat": 123.0, "lon": 0.0}])
        with pytest.raises(pydantic.ValidationError):
            geocode(client, "Nowhere")


class TestFetchTodayForecast:
    def test_parses_current_and_hourly(self) -> None:
        client, _ = client_returning(ONECALL_TODAY)
        forecast = fetch_today_forecast(client, LISBON)
        assert forecast.current == UvSample(timestamp=ts(15, 7), uv_index=2.4)
        assert forecast.current_uv_index == 2.4
        assert [h.uv_index for h in forecast.hourly] == [1.2, 3.4, 5.6, 4.0]
        assert forecast.daily == ()

    def test_request_params(self) -> None:
        client, session = client_returning(ONECALL_TODAY)
        fetch_today_forecast(client, LISBON)
        url = session.get.call_args.args[0]
        params = session.get.call_args.kwargs["params"]
        assert url == ONECALL_API
        assert params["lat"] == 38.7077
        assert params["lon"] == -9.1365
        assert params["exclude"] == "minutely,daily,alerts"
        assert params["units"] == "metric"
        assert params["appid"] == "test-key"

    def test_missing_uvi_defaults_to_zero(self) -> None:
        client, _ = client_returning({"lat": 0, "lon": 0, "hourly": [{"dt": ts(15)}]})
        forecast = fetch_today_forecast(client, LISBON)
        assert forecast.hourly[0].uv_index == 0.0
        assert forecast.current is None
        assert forecast.current_uv_index == 0.0

    def test_negative_uvi_rejected(self) -> None:
        client, _ = client_returning({"lat": 0, "lon": 0, "hourly": [{"dt": 1, "uvi": -1}]})
        with pytest.raises(pydantic.ValidationError):
            fetch_today_forecast(client, LISBON)


class TestFetchMultidayForecast:
    def test_parses_hourly_and_daily(self) -> None:
        client, _ = client_returning(ONECALL_MULTIDAY)
        forecast = fetch_multiday_forecast(client, LISBON)
        assert forecast.current is None
        assert len(forecast.hourly) == 4
        assert len(forecast.daily) == 5
        assert forecast.daily[0] == DailyAggregate(timestamp=ts(15), uv_index=6.2)

    def test_request_params(self) -> None:
        client, session = client_returning(ONECALL_MULTIDAY)
        fetch_multiday_forecast(client, LISBON)
        params = session.get.call_args.kwargs["params"]
        assert params["exclude"] == "current,minutely,alerts"
        assert params["units"] == "metric"

    def test_units_follow_client(self) -> None:
        session = Mock()
        session.get.return_value = mock_response(ONECALL_MULTIDAY)
        client = OpenWeatherClient("k", units="imperial", session=session)
        fetch_multiday_forecast(client, LISBON)
        assert session.get.call_args.kwargs["params"]["units"] == "imperial"
