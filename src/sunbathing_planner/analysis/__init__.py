"""Selection logic over forecast data.

Dependency rule: analysis/ imports from datasources/ models only.
It never fetches data or renders output.

Modules:
  - best_slots: hourly UV series -> today's best hour, 3-day suggestions
"""

from sunbathing_planner.analysis.best_slots import (
    ForecastDay,
    TimeSlot,
    best_time_label,
    find_best_time_today,
    in_ideal_band,
    suggest_slots,
)

__all__ = [
    "ForecastDay",
    "TimeSlot",
    "best_time_label",
    "find_best_time_today",
    "in_ideal_band",
    "suggest_slots",
]
