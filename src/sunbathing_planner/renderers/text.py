"""Terminal renderings of the tracker and the two panels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sunbathing_planner.renderers import render_template
from sunbathing_planner.tracker import MAX_PROGRESS, format_elapsed

if TYPE_CHECKING:
    from datetime import date

    from sunbathing_planner.panels import SuggestionState, TodayState
    from sunbathing_planner.tracker import ExposureSession

BAR_WIDTH = 20


def day_heading(day: date) -> str:
    """Heading for a forecast day, e.g. ``Mon Oct 19 2026``."""
    return day.strftime("%a %b %d %Y")


def progress_bar(percent: float, width: int = BAR_WIDTH) -> str:
    """Fixed-width text bar for a 0-100 percentage."""
    filled = int(width * min(max(percent, 0.0), MAX_PROGRESS) / MAX_PROGRESS)
    return "#" * filled + "-" * (width - filled)


def build_alert_text(message: str) -> str:
    return render_template("alert.txt.j2", message=message)


def build_today_text(state: TodayState) -> str:
    """Current UV and best time, or the alert when the lookup failed."""
    if state.alert is not None:
        return build_alert_text(state.alert)
    return render_template(
        "today.txt.j2",
        location=state.location,
        current_uv_index=state.current_uv_index or 0.0,
        best_time=state.best_time,
    )


def build_suggestions_text(state: SuggestionState) -> str:
    """Per-day slot list, a loading line, or the error."""
    if state.loading:
        return "Loading suggestions..."
    if state.error is not None:
        return build_alert_text(state.error)
    if not state.days:
        return ""

    days = [
        {
            "heading": day_heading(day.date),
            "slots": [{"time": s.time_of_day, "uv_index": s.uv_index} for s in day.slots],
        }
        for day in state.days
    ]
    title = "Sunbathing Suggestions"
    if state.location:
        title += f" for {state.location}"
    return render_template("suggestions.txt.j2", title=title, days=days)


def build_tracker_line(session: ExposureSession) -> str:
    """One-line clock, progress bar and UV index."""
    return render_template(
        "tracker.txt.j2",
        clock=format_elapsed(session.elapsed_seconds),
        bar=progress_bar(session.progress_percent),
        progress=session.progress_percent,
        uv_index=session.uv_index,
        running=session.running,
    )
