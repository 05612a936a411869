"""
Response schemas for the OpenWeatherMap APIs.

Pydantic models that validate the raw JSON before the datasource layer
normalizes it into dataclasses. Only the fields this application reads are
declared; everything else in the payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Epoch seconds for 9999-12-31T00:00Z; any UTC offset still lands in year 9999
MAX_TIMESTAMP = 253402214400

# =============================================================================
# Geocoding API (geo/1.0/direct)
# =============================================================================


class GeoCandidate(BaseModel):
    """One candidate returned by the direct geocoding endpoint."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    country: str | None = None
    state: str | None = None


GeoCandidateList = TypeAdapter(list[GeoCandidate])


# =============================================================================
# One Call API 3.0
# =============================================================================


class WeatherDescription(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""


class CurrentConditions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dt: int = Field(..., ge=0, le=MAX_TIMESTAMP)
    uvi: float = Field(default=0.0, ge=0)
    temp: float | None = None


class HourlyEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dt: int = Field(..., ge=0, le=MAX_TIMESTAMP)
    uvi: float = Field(default=0.0, ge=0)
    temp: float | None = None
    weather: list[WeatherDescription] = Field(default_factory=list)


class DailyEntry(BaseModel):
    """Daily aggregate; ``temp`` is an object of day/night values here."""

    model_config = ConfigDict(extra="ignore")

    dt: int = Field(..., ge=0, le=MAX_TIMESTAMP)
    uvi: float = Field(default=0.0, ge=0)


class OneCallResponse(BaseModel):
    """Top-level One Call payload. Excluded sections are simply absent."""

    model_config = ConfigDict(extra="ignore")

    lat: float
    lon: float
    current: CurrentConditions | None = None
    hourly: list[HourlyEntry] = Field(default_factory=list)
    daily: list[DailyEntry] = Field(default_factory=list)
