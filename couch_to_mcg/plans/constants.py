"""Plan-wide constants for the 2026 Melbourne season.

These are the defaults behind `Settings` and `PlanCalendar`. Phase windows are
anchored to calendar dates of the 2026 season and do not scale with a
different start or race date.
"""

from datetime import date

DEFAULT_START_DATE = date(2026, 2, 8)
DEFAULT_RACE_DATE = date(2026, 10, 11)
DEFAULT_RACE_NAME = "Melbourne Half Marathon"

# Phase 2 covers May-Jul, phase 3 runs from August to race day
DEFAULT_PHASE_2_START = date(2026, 5, 1)
DEFAULT_PHASE_3_START = date(2026, 8, 1)

RACE_DISTANCE_KM = 21.1
DEFAULT_ACTIVITY_ID = "default"

# Long run progressions: (from_km, to_km)
PHASE_1_LONG_RUN_KM = (6.0, 10.0)
PHASE_2_LONG_RUN_KM = (10.0, 16.0)
PHASE_3_LONG_RUN_KM = (16.0, 21.0)

PHASE_2_LONG_RUN_WEEKS = 13
PHASE_3_LONG_RUN_WEEKS = 10

# Whole weeks to race at or below which the taper rules apply
FINAL_WEEK_THRESHOLD = 1

DEFAULT_PERCEIVED_EFFORT = 5
ACTIVITY_ID_LENGTH = 9
