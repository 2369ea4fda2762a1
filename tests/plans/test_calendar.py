"""Tests for the plan calendar and whole-week arithmetic."""

from datetime import date

import pytest

from couch_to_mcg.plans.calendar import LongRunProgression, PlanCalendar, whole_weeks_between
from couch_to_mcg.plans.errors import PlanConfigurationError
from couch_to_mcg.plans.types import Phase


def test_whole_weeks_truncates_toward_zero():
    """Partial weeks are dropped in both directions."""
    start = date(2026, 2, 8)
    assert whole_weeks_between(start, date(2026, 2, 14)) == 0
    assert whole_weeks_between(start, date(2026, 2, 15)) == 1
    assert whole_weeks_between(start, date(2026, 4, 30)) == 11
    assert whole_weeks_between(date(2026, 2, 18), start) == -1


def test_default_calendar_spans_246_days(season):
    """The 2026 season runs 2026-02-08 to 2026-10-11 inclusive."""
    assert season.start_date == date(2026, 2, 8)
    assert season.race_date == date(2026, 10, 11)
    assert season.is_valid
    assert season.total_days == 246

    dates = list(season.dates())
    assert dates[0] == season.start_date
    assert dates[-1] == season.race_date


def test_race_before_start_has_no_dates():
    calendar = PlanCalendar(start_date=date(2026, 10, 12), race_date=date(2026, 10, 11))
    assert not calendar.is_valid
    assert calendar.total_days == 0
    assert list(calendar.dates()) == []


def test_phase_boundaries_out_of_order_raise():
    with pytest.raises(PlanConfigurationError, match="phase_3_start"):
        PlanCalendar(phase_2_start=date(2026, 8, 1), phase_3_start=date(2026, 5, 1))


def test_phase_1_end_is_day_before_phase_2(season):
    assert season.phase_1_end == date(2026, 4, 30)


def test_long_run_progressions(season):
    """Each phase has its own long-run window."""
    base = season.long_run_progression(Phase.BASE_BUILDING)
    assert (base.from_km, base.to_km, base.anchor, base.total_weeks) == (6.0, 10.0, date(2026, 2, 8), 11)

    strength = season.long_run_progression(Phase.STRENGTH_AND_POWER)
    assert (strength.from_km, strength.to_km, strength.anchor, strength.total_weeks) == (
        10.0,
        16.0,
        date(2026, 5, 1),
        13,
    )

    taper = season.long_run_progression(Phase.TAPER_AND_PEAK)
    assert (taper.from_km, taper.to_km, taper.anchor, taper.total_weeks) == (16.0, 21.0, date(2026, 8, 1), 10)


def test_progression_is_capped_and_handles_zero_weeks():
    progression = LongRunProgression(from_km=6.0, to_km=10.0, anchor=date(2026, 1, 4), total_weeks=0)
    # zero total weeks counts as one, so week 1 already hits the cap
    assert progression.distance_on(date(2026, 1, 4)) == 6.0
    assert progression.distance_on(date(2026, 1, 11)) == 10.0
    assert progression.distance_on(date(2026, 3, 1)) == 10.0


def test_from_settings_reads_configured_dates():
    from couch_to_mcg.config.settings import Settings

    config = Settings(start_date=date(2026, 3, 1), race_date=date(2026, 9, 27), race_name="Test Half")
    calendar = PlanCalendar.from_settings(config)
    assert calendar.start_date == date(2026, 3, 1)
    assert calendar.race_date == date(2026, 9, 27)
    assert calendar.race_name == "Test Half"
    assert calendar.phase_2_start == date(2026, 5, 1)
