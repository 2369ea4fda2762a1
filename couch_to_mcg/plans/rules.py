"""Per-phase weekday rule table.

Maps a date to the single default session prescribed for it. Rules are keyed
by (phase, weekday); Taper & Peak splits into a final-week table (at most one
whole week to race) and a build table. Long runs interpolate linearly across
each phase's progression window. Any weekday without a rule is a rest day.
"""

import calendar as weekdays
from dataclasses import dataclass
from datetime import date

from couch_to_mcg.plans.calendar import PlanCalendar, whole_weeks_between
from couch_to_mcg.plans.constants import RACE_DISTANCE_KM
from couch_to_mcg.plans.phase import is_final_week, resolve_phase
from couch_to_mcg.plans.types import ActivityKind, Phase


@dataclass(frozen=True)
class Prescription:
    """Rule-table output for one day, before rounding and wrapping."""

    kind: ActivityKind
    description: str
    distance_km: float | None = None


REST = Prescription(ActivityKind.REST, "Take it easy and recover.")

BASE_BUILDING_RULES: dict[int, Prescription] = {
    weekdays.TUESDAY: Prescription(ActivityKind.EASY_RUN, "Easy effort, focus on form.", 5.0),
    weekdays.THURSDAY: Prescription(ActivityKind.EASY_RUN, "Maintain a steady, comfortable pace.", 6.0),
}

STRENGTH_AND_POWER_RULES: dict[int, Prescription] = {
    weekdays.TUESDAY: Prescription(ActivityKind.EASY_RUN, "Recovery pace run.", 7.0),
    weekdays.THURSDAY: Prescription(
        ActivityKind.HILL_REPEATS,
        "Find a moderate incline. 60s up, walk down. Repeat 6-8 times.",
    ),
    weekdays.SATURDAY: Prescription(
        ActivityKind.GYM_WORKOUT,
        "Focus on leg strength: Squats, Lunges, and Calf Raises.",
    ),
}

TAPER_BUILD_RULES: dict[int, Prescription] = {
    weekdays.MONDAY: Prescription(ActivityKind.EASY_RUN, "Aerobic maintenance.", 8.0),
    weekdays.WEDNESDAY: Prescription(ActivityKind.EASY_RUN, "Comfortable pace with light speed play.", 10.0),
}

FINAL_WEEK_RULES: dict[int, Prescription] = {
    weekdays.TUESDAY: Prescription(ActivityKind.EASY_RUN, "Keep the legs moving, very light.", 4.0),
    weekdays.THURSDAY: Prescription(ActivityKind.EASY_RUN, "Pre-race shakeout run.", 3.0),
}

LONG_RUN_DESCRIPTIONS: dict[Phase, str] = {
    Phase.BASE_BUILDING: "Build your endurance base. Slow and steady.",
    Phase.STRENGTH_AND_POWER: "Developing strength and stamina.",
    Phase.TAPER_AND_PEAK: "Final peak mileage before the big day.",
}

# Taper build Fridays alternate by parity of whole weeks since phase_3_start
ALTERNATING_STRENGTH: tuple[Prescription, Prescription] = (
    Prescription(ActivityKind.GYM_WORKOUT, "Heavy lower body lifting with low reps."),
    Prescription(ActivityKind.STRENGTH, "Core stability and single-leg balance work."),
)


def race_prescription(calendar: PlanCalendar) -> Prescription:
    return Prescription(
        ActivityKind.RACE,
        f"THIS IS IT! The {calendar.race_name}. You've got this!",
        RACE_DISTANCE_KM,
    )


def _rules_for(day: date, phase: Phase, calendar: PlanCalendar) -> tuple[dict[int, Prescription], bool]:
    """Return the weekday table for a day and whether it includes a Sunday long run."""
    if phase == Phase.BASE_BUILDING:
        return BASE_BUILDING_RULES, True
    if phase == Phase.STRENGTH_AND_POWER:
        return STRENGTH_AND_POWER_RULES, True
    if is_final_week(day, calendar):
        return FINAL_WEEK_RULES, False
    return TAPER_BUILD_RULES, True


def prescribe(day: date, calendar: PlanCalendar) -> Prescription:
    """Select the default session for a date.

    Race day short-circuits every phase rule. Distances are returned
    unrounded.

    Args:
        day: Date inside the plan
        calendar: Plan calendar

    Returns:
        Prescription for the day (REST when no rule matches)
    """
    if day == calendar.race_date:
        return race_prescription(calendar)

    phase = resolve_phase(day, calendar)
    rules, has_long_run = _rules_for(day, phase, calendar)
    weekday = day.weekday()

    if has_long_run and weekday == weekdays.SUNDAY:
        progression = calendar.long_run_progression(phase)
        return Prescription(ActivityKind.LONG_RUN, LONG_RUN_DESCRIPTIONS[phase], progression.distance_on(day))

    if rules is TAPER_BUILD_RULES and weekday == weekdays.FRIDAY:
        week = whole_weeks_between(calendar.phase_3_start, day)
        return ALTERNATING_STRENGTH[week % 2]

    return rules.get(weekday, REST)
