"""Pick recommended sunbathing hours from an hourly UV series.

Two selectors with deliberately different rules:

- ``find_best_time_today``: first hour *today* with UV in the ideal band
  [3, 5], inclusive. Feeds the tracker's "best time today" line.
- ``suggest_slots``: every hour with UV >= 3 (no upper bound) for each of the
  first three forecast days. Feeds the suggestion panel.

Both match days by day-of-month only; month and year are not compared, so a
sample from another month that shares the day number also matches. The
hourly series covers 48 hours, which keeps this from mattering in practice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING

from sunbathing_planner.reference.uv import (
    IDEAL_UV_MAX,
    IDEAL_UV_MIN,
    NOT_RECOMMENDED_LABEL,
    SUGGESTION_DAYS,
    SUGGESTION_UV_MIN,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from sunbathing_planner.datasources.openweather.models import DailyAggregate, UvSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSlot:
    """A recommended hour."""

    time_of_day: str
    uv_index: float


@dataclass(frozen=True)
class ForecastDay:
    """Recommended slots for one calendar day, in chronological order."""

    date: date
    slots: tuple[TimeSlot, ...] = ()

    @property
    def has_slots(self) -> bool:
        return bool(self.slots)


def in_ideal_band(uv_index: float) -> bool:
    """Whether a UV index is within the inclusive ideal band."""
    return IDEAL_UV_MIN <= uv_index <= IDEAL_UV_MAX


def find_best_time_today(
    hourly: Sequence[UvSample],
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> UvSample | None:
    """
    Return the first sample today with UV in the ideal band.

    Args:
        hourly: Hourly samples in chronological order.
        now: Reference time (defaults to the current time in ``tz``).
        tz: Timezone for day matching; host local time when None.

    Returns:
        The earliest matching sample, or None when sunbathing is not
        recommended today.
    """
    if now is None:
        now = datetime.now(tz)
    today = now.day

    todays = [h for h in hourly if h.local_time(tz).day == today]
    for sample in todays:
        if in_ideal_band(sample.uv_index):
            return sample

    logger.debug("No ideal hour among %d samples for day %d", len(todays), today)
    return None


def best_time_label(sample: UvSample | None, tz: tzinfo | None = None) -> str:
    """Display label for ``find_best_time_today``'s result, e.g. ``"9:00"``."""
    if sample is None:
        return NOT_RECOMMENDED_LABEL
    return f"{sample.local_time(tz).hour}:00"


def suggest_slots(
    daily: Sequence[DailyAggregate],
    hourly: Sequence[UvSample],
    tz: tzinfo | None = None,
    days: int = SUGGESTION_DAYS,
) -> list[ForecastDay]:
    """
    Group hourly samples with UV >= 3 under the first ``days`` daily entries.

    Args:
        daily: Daily aggregates; only used to enumerate calendar dates.
        hourly: Hourly samples in chronological order.
        tz: Timezone for day matching and time formatting.
        days: How many leading daily entries to cover.

    Returns:
        One ForecastDay per daily entry, in the same order. Days without a
        qualifying hour are included with no slots.
    """
    result: list[ForecastDay] = []
    for day in daily[:days]:
        day_dt = day.local_time(tz)
        slots: list[TimeSlot] = []
        for hour in hourly:
            hour_dt = hour.local_time(tz)
            if hour_dt.day == day_dt.day and hour.uv_index >= SUGGESTION_UV_MIN:
                slots.append(TimeSlot(time_of_day=hour_dt.strftime("%H:%M"), uv_index=hour.uv_index))
        result.append(ForecastDay(date=day_dt.date(), slots=tuple(slots)))

    logger.debug(
        "Suggested %d slots across %d days",
        sum(len(d.slots) for d in result),
        len(result),
    )
    return result
