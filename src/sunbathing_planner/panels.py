"""
Host-facing state for the two widgets.

The panels wrap ``SunbathingPlanner`` calls and turn every failure into
user-facing state (an error or alert message), so nothing propagates to the
host shell. Each panel numbers its requests; a response that arrives after a
newer request was issued is discarded instead of overwriting newer state.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from sunbathing_planner.exceptions import (
    FetchError,
    InvalidInputError,
    LocationNotFoundError,
    SunbathingPlannerError,
)

if TYPE_CHECKING:
    from datetime import datetime

    from sunbathing_planner.analysis.best_slots import ForecastDay
    from sunbathing_planner.planner import SunbathingPlanner
    from sunbathing_planner.tracker import ExposureTracker

logger = logging.getLogger(__name__)

LOCATION_NOT_FOUND_ALERT = "Location not found. Please try again."
FETCH_ERROR_ALERT = "Error fetching weather data. Please try again."
INVALID_INPUT_ALERT = "Please enter a location."


class ErrorKind(StrEnum):
    """Which failure a panel is showing."""

    NOT_FOUND = "not_found"
    FETCH = "fetch"
    INVALID_INPUT = "invalid_input"


def classify(error: SunbathingPlannerError) -> ErrorKind:
    if isinstance(error, LocationNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, InvalidInputError):
        return ErrorKind.INVALID_INPUT
    return ErrorKind.FETCH


class _Generations:
    """Monotonic request counter; only the latest request may publish."""

    def __init__(self) -> None:
        self._current = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._current


# =============================================================================
# Suggestion panel
# =============================================================================


@dataclass
class SuggestionState:
    """What the suggestion panel shows."""

    location: str = ""
    loading: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
    days: list[ForecastDay] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.loading and self.error is None and not self.days


class SuggestionPanel:
    """Three-day sunbathing suggestions for a location."""

    def __init__(self, planner: SunbathingPlanner) -> None:
        self.planner = planner
        self.state = SuggestionState()
        self._generations = _Generations()

    def load(self, location: str) -> SuggestionState:
        """Fetch suggestions for ``location`` and publish them.

        Returns the panel state after the request; when a newer request was
        issued meanwhile, that is the newer request's state.
        """
        generation = self._generations.next()
        self.state = SuggestionState(location=location, loading=True)

        try:
            days = self.planner.suggest(location)
        except SunbathingPlannerError as e:
            result = SuggestionState(
                location=location, error=e.user_message, error_kind=classify(e)
            )
        else:
            result = SuggestionState(location=location, days=days)

        if self._generations.is_current(generation):
            self.state = result
        else:
            logger.warning("Discarding stale suggestions for %r", location)
        return self.state


# =============================================================================
# Tracker setup
# =============================================================================


@dataclass
class TodayState:
    """What the tracker widget shows above the clock."""

    location: str = ""
    current_uv_index: float | None = None
    best_time: str | None = None
    alert: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def has_weather(self) -> bool:
        return self.current_uv_index is not None


def validate_uv_index(uv_index: float) -> float:
    """Reject negative UV indexes before they reach the tracker."""
    if uv_index < 0:
        raise InvalidInputError(f"UV index must be non-negative, got {uv_index}")
    return uv_index


class TanTrackerWidget:
    """Sets the tracker's UV index from a location's current conditions."""

    def __init__(self, planner: SunbathingPlanner, tracker: ExposureTracker) -> None:
        self.planner = planner
        self.tracker = tracker
        self.state = TodayState()
        self._generations = _Generations()

    def set_location(self, location: str, now: datetime | None = None) -> TodayState:
        """Look up today's outlook and apply its UV index to the tracker.

        On failure the tracker keeps its previous UV index and ``alert`` is
        set; earlier weather stays on display.
        """
        generation = self._generations.next()
        try:
            outlook = self.planner.today(location, now=now)
            uv_index = validate_uv_index(outlook.current_uv_index)
        except SunbathingPlannerError as e:
            if not self._generations.is_current(generation):
                logger.warning("Discarding stale error for %r", location)
                return self.state
            self.state.alert = _alert_for(e)
            self.state.error_kind = classify(e)
            return self.state

        if not self._generations.is_current(generation):
            logger.warning("Discarding stale outlook for %r", location)
            return self.state

        self.tracker.set_uv_index(uv_index)
        self.state = TodayState(
            location=outlook.location,
            current_uv_index=uv_index,
            best_time=outlook.best_time,
        )
        return self.state


def _alert_for(error: SunbathingPlannerError) -> str:
    if isinstance(error, LocationNotFoundError):
        return LOCATION_NOT_FOUND_ALERT
    if isinstance(error, FetchError):
        return FETCH_ERROR_ALERT
    return INVALID_INPUT_ALERT
