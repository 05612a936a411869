"""Error taxonomy shared by the planner, the panels and the CLI."""

from __future__ import annotations


class SunbathingPlannerError(Exception):
    """Base class. ``user_message`` is safe to show in the host shell."""

    user_message = "An error occurred"


class LocationNotFoundError(SunbathingPlannerError):
    """The geocoder returned no candidate for the location string."""

    user_message = "Location not found"

    def __init__(self, location: str) -> None:
        super().__init__(f"Location not found: {location!r}")
        self.location = location


class FetchError(SunbathingPlannerError):
    """Transport, HTTP status or parse failure on an external call."""

    user_message = "Error fetching weather data"


class InvalidInputError(SunbathingPlannerError, ValueError):
    """Caller-side validation failed (blank location, negative UV index)."""

    user_message = "Invalid input"
