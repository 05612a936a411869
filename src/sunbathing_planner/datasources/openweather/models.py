"""OpenWeatherMap data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import tzinfo


@dataclass(frozen=True)
class GeoCoordinate:
    """A resolved location."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class UvSample:
    """UV index at a point in time (one hourly forecast entry)."""

    timestamp: int  # epoch seconds
    uv_index: float

    def local_time(self, tz: tzinfo | None = None) -> datetime:
        """Timestamp as a datetime in ``tz`` (host local time when None)."""
        if tz is None:
            return datetime.fromtimestamp(self.timestamp)
        return datetime.fromtimestamp(self.timestamp, tz)


@dataclass(frozen=True)
class DailyAggregate(UvSample):
    """One daily forecast entry; ``uv_index`` is the day's maximum."""


@dataclass(frozen=True)
class OneCallForecast:
    """Normalized One Call response."""

    current: UvSample | None
    hourly: tuple[UvSample, ...] = ()
    daily: tuple[DailyAggregate, ...] = ()

    @property
    def current_uv_index(self) -> float:
        """Current UV index, 0.0 when the ``current`` section was excluded."""
        return self.current.uv_index if self.current is not None else 0.0
