"""Tests for calendar-window phase resolution."""

from datetime import date

from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.phase import is_final_week, resolve_phase
from couch_to_mcg.plans.types import Phase


def test_phase_windows(season):
    """Jan-Apr is base, May-Jul strength, August onward taper."""
    assert resolve_phase(date(2026, 2, 8), season) == Phase.BASE_BUILDING
    assert resolve_phase(date(2026, 4, 30), season) == Phase.BASE_BUILDING
    assert resolve_phase(date(2026, 5, 1), season) == Phase.STRENGTH_AND_POWER
    assert resolve_phase(date(2026, 7, 31), season) == Phase.STRENGTH_AND_POWER
    assert resolve_phase(date(2026, 8, 1), season) == Phase.TAPER_AND_PEAK
    assert resolve_phase(date(2026, 10, 11), season) == Phase.TAPER_AND_PEAK


def test_race_day_is_always_taper():
    """A race date inside the base window still resolves to Taper & Peak."""
    calendar = PlanCalendar(race_date=date(2026, 3, 15))
    assert resolve_phase(date(2026, 3, 15), calendar) == Phase.TAPER_AND_PEAK
    assert resolve_phase(date(2026, 3, 14), calendar) == Phase.BASE_BUILDING


def test_final_week_covers_thirteen_days_before_race(season):
    """Whole-week truncation puts the final-week cut 13 days out."""
    assert not is_final_week(date(2026, 9, 27), season)
    assert is_final_week(date(2026, 9, 28), season)
    assert is_final_week(date(2026, 10, 10), season)
