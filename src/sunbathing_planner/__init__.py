"""Sunbathing Planner - UV exposure tracking and sunbathing slot suggestions.

Architecture::

    datasources/   External APIs (OpenWeatherMap geocoding + One Call)
    analysis/      Slot selection (today's best hour, 3-day suggestions)
    tracker.py     Exposure session clock and tan progress
    planner.py     Geocode -> forecast -> select flow, error conversion
    panels.py      Host-facing state, stale-response handling
    renderers/     Pure state -> terminal text (Jinja2 templates)
    cli.py         Terminal host shell

Data flow: datasources -> planner -> analysis -> panels -> renderers
"""

__version__ = "0.1.0"

from sunbathing_planner.config import Settings

__all__ = ["Settings", "__version__"]
