"""Static sunbathing constants.

Reference data that doesn't change with API calls: the UV bands and the
suggestion horizon.
"""

from sunbathing_planner.reference.uv import IDEAL_UV_MAX as IDEAL_UV_MAX
from sunbathing_planner.reference.uv import IDEAL_UV_MIN as IDEAL_UV_MIN
from sunbathing_planner.reference.uv import NOT_RECOMMENDED_LABEL as NOT_RECOMMENDED_LABEL
from sunbathing_planner.reference.uv import SUGGESTION_DAYS as SUGGESTION_DAYS
from sunbathing_planner.reference.uv import SUGGESTION_UV_MIN as SUGGESTION_UV_MIN
