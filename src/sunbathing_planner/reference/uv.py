"""UV exposure thresholds used by the slot selectors."""

# "Ideal" sunbathing band for today's best time, inclusive on both ends.
IDEAL_UV_MIN: float = 3.0
IDEAL_UV_MAX: float = 5.0

# Multi-day suggestions only apply the lower bound.
SUGGESTION_UV_MIN: float = 3.0

# Number of daily forecast entries the suggestion panel covers.
SUGGESTION_DAYS: int = 3

NOT_RECOMMENDED_LABEL = "Not recommended today"
