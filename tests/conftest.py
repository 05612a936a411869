"""Shared fixtures for the OpenWeatherMap-backed tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from payloads import GEO_LISBON, ONECALL_TODAY, routing_session
from sunbathing_planner.datasources.openweather import OpenWeatherClient

if TYPE_CHECKING:
    from unittest.mock import Mock


@pytest.fixture
def lisbon_session() -> Mock:
    return routing_session(geo=GEO_LISBON, onecall=ONECALL_TODAY)


@pytest.fixture
def lisbon_client(lisbon_session: Mock) -> OpenWeatherClient:
    return OpenWeatherClient("test-key", session=lisbon_session)
