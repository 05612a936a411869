"""
Tests for today's best hour and the three-day slot suggestions.

All timestamps are built in UTC and the selectors are given ``tz=UTC`` so
day matching does not depend on the machine's timezone.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from sunbathing_planner.analysis import (
    ForecastDay,
    TimeSlot,
    best_time_label,
    find_best_time_today,
    in_ideal_band,
    suggest_slots,
)
from sunbathing_planner.datasources.openweather import DailyAggregate, UvSample


def ts(year: int, month: int, day: int, hour: int = 0) -> int:
    return int(datetime(year, month, day, hour, tzinfo=UTC).timestamp())


def hourly(day: int, values: list[float], start_hour: int = 8, month: int = 10) -> list[UvSample]:
    return [
        UvSample(timestamp=ts(2026, month, day, start_hour + i), uv_index=v)
        for i, v in enumerate(values)
    ]


NOW = datetime(2026, 10, 15, 7, 30, tzinfo=UTC)


class TestIdealBand:
    @pytest.mark.parametrize(
        ("uv", "expected"),
        [(2.9, False), (3.0, True), (4.0, True), (5.0, True), (5.1, False)],
    )
    def test_bounds_inclusive(self, uv: float, expected: bool) -> None:
        assert in_ideal_band(uv) is expected


class TestFindBestTimeToday:
    """Single-day selector."""

    def test_first_value_in_band(self) -> None:
        samples = hourly(15, [2.0, 3.0, 4.5, 6.0])
        best = find_best_time_today(samples, now=NOW, tz=UTC)
        assert best is not None
        assert best.uv_index == 3.0
        assert best.timestamp == ts(2026, 10, 15, 9)

    def test_upper_bound_inclusive(self) -> None:
        samples = hourly(15, [1.0, 5.0, 4.0])
        best = find_best_time_today(samples, now=NOW, tz=UTC)
        assert best is not None
        assert best.uv_index == 5.0

    def test_just_above_band_excluded(self) -> None:
        samples = hourly(15, [5.1, 6.0, 2.0])
        assert find_best_time_today(samples, now=NOW, tz=UTC) is None

    def test_no_match_today(self) -> None:
        samples = hourly(15, [0.5, 1.0, 7.0, 8.0]) + hourly(16, [3.5, 4.0])
        assert find_best_time_today(samples, now=NOW, tz=UTC) is None

    def test_ignores_other_days(self) -> None:
        samples = hourly(14, [4.0]) + hourly(15, [1.0, 4.2]) + hourly(16, [3.0])
        best = find_best_time_today(samples, now=NOW, tz=UTC)
        assert best is not None
        assert best.uv_index == 4.2

    def test_empty_series(self) -> None:
        assert find_best_time_today([], now=NOW, tz=UTC) is None

    def test_day_of_month_only_matches_other_month(self) -> None:
        """Month is not compared: the 15th of another month also matches."""
        samples = hourly(15, [4.0], month=11)
        best = find_best_time_today(samples, now=NOW, tz=UTC)
        assert best is not None
        assert best.timestamp == ts(2026, 11, 15, 8)

    def test_uses_timezone_for_day_boundary(self) -> None:
        # 23:00 UTC on the 14th is already the 15th in UTC+2
        plus_two = timezone(timedelta(hours=2))
        samples = [UvSample(timestamp=ts(2026, 10, 14, 23), uv_index=3.5)]
        now = datetime(2026, 10, 15, 8, tzinfo=plus_two)
        assert find_best_time_today(samples, now=now, tz=plus_two) is not None
        assert find_best_time_today(samples, now=NOW, tz=UTC) is None


class TestBestTimeLabel:
    def test_hour_label(self) -> None:
        sample = UvSample(timestamp=ts(2026, 10, 15, 14), uv_index=4.0)
        assert best_time_label(sample, tz=UTC) == "14:00"

    def test_hour_not_zero_padded(self) -> None:
        sample = UvSample(timestamp=ts(2026, 10, 15, 9), uv_index=4.0)
        assert best_time_label(sample, tz=UTC) == "9:00"

    def test_not_recommended(self) -> None:
        assert best_time_label(None) == "Not recommended today"


def daily(days: list[int], month: int = 10) -> list[DailyAggregate]:
    return [DailyAggregate(timestamp=ts(2026, month, d, 12), uv_index=6.0) for d in days]


class TestSuggestSlots:
    """Multi-day selector."""

    def test_three_days_from_five(self) -> None:
        result = suggest_slots(daily([15, 16, 17, 18, 19]), [], tz=UTC)
        assert [d.date for d in result] == [date(2026, 10, 15), date(2026, 10, 16), date(2026, 10, 17)]

    def test_keeps_daily_order(self) -> None:
        result = suggest_slots(daily([17, 15, 16, 20]), [], tz=UTC)
        assert [d.date.day for d in result] == [17, 15, 16]

    def test_fewer_than_three_days(self) -> None:
        result = suggest_slots(daily([15]), [], tz=UTC)
        assert len(result) == 1

    def test_no_upper_bound(self) -> None:
        samples = hourly(15, [2.9, 3.0, 5.0, 8.5, 11.2])
        result = suggest_slots(daily([15, 16, 17]), samples, tz=UTC)
        assert [s.uv_index for s in result[0].slots] == [3.0, 5.0, 8.5, 11.2]

    def test_slots_grouped_per_day_in_order(self) -> None:
        samples = hourly(15, [3.0, 4.0]) + hourly(16, [1.0, 6.0], start_hour=11)
        result = suggest_slots(daily([15, 16, 17]), samples, tz=UTC)
        assert result[0] == ForecastDay(
            date=date(2026, 10, 15),
            slots=(TimeSlot("08:00", 3.0), TimeSlot("09:00", 4.0)),
        )
        assert result[1].slots == (TimeSlot("12:00", 6.0),)

    def test_day_without_slots_is_kept(self) -> None:
        samples = hourly(15, [4.0])
        result = suggest_slots(daily([15, 16, 17]), samples, tz=UTC)
        assert len(result) == 3
        assert result[2].slots == ()
        assert result[2].has_slots is False

    def test_empty_daily(self) -> None:
        assert suggest_slots([], hourly(15, [4.0]), tz=UTC) == []

    def test_time_format_zero_padded(self) -> None:
        samples = [UvSample(timestamp=ts(2026, 10, 15, 7), uv_index=3.2)]
        result = suggest_slots(daily([15]), samples, tz=UTC)
        assert result[0].slots[0].time_of_day == "07:00"
