"""Deterministic phase resolution.

Phases are assigned by calendar window, not by elapsed weeks from the start
date:
- before phase_2_start: Base Building
- before phase_3_start: Strength & Power
- from phase_3_start through race day: Taper & Peak

The race date is always Taper & Peak, even when misconfigured to fall in an
earlier window.
"""

from datetime import date

from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.constants import FINAL_WEEK_THRESHOLD
from couch_to_mcg.plans.types import Phase


def resolve_phase(day: date, calendar: PlanCalendar) -> Phase:
    """Resolve the macro-cycle phase a date falls in.

    Args:
        day: Date to resolve
        calendar: Plan calendar supplying the boundaries

    Returns:
        Phase for the date
    """
    if day == calendar.race_date:
        return Phase.TAPER_AND_PEAK
    if day < calendar.phase_2_start:
        return Phase.BASE_BUILDING
    if day < calendar.phase_3_start:
        return Phase.STRENGTH_AND_POWER
    return Phase.TAPER_AND_PEAK


def is_final_week(day: date, calendar: PlanCalendar) -> bool:
    """True when at most one whole week remains before the race.

    With whole-week truncation this covers the 13 days leading up to race day.
    """
    return calendar.weeks_to_race(day) <= FINAL_WEEK_THRESHOLD
