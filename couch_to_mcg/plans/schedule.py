"""Schedule generation engine.

Deterministic, side-effect-free mapping from a plan calendar plus sparse user
inputs to the full day-by-day training schedule:

1. Walk every date from start to race inclusive
2. Resolve phase and prescribe the default session from the rule table
3. Round distance and wrap it as the day's single "default" activity
4. Replace the activity list wholesale when the day has an override
5. Stamp completion from the supplied completed-date set

A race date before the start date yields an empty schedule rather than an
error; callers treat that as "no valid plan".
"""

from collections.abc import Iterable, Mapping
from datetime import date

from loguru import logger

from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.constants import DEFAULT_ACTIVITY_ID
from couch_to_mcg.plans.distance import round_distance_km
from couch_to_mcg.plans.phase import resolve_phase
from couch_to_mcg.plans.rules import Prescription, prescribe
from couch_to_mcg.plans.types import DayOverride, TrainingActivity, TrainingDay
from couch_to_mcg.plans.validators import normalize_activity

DateLike = date | str
OverrideLike = DayOverride | Mapping


def coerce_date(value: DateLike) -> date:
    """Accept a date or an ISO `YYYY-MM-DD` string."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def default_activity(prescription: Prescription) -> TrainingActivity:
    return TrainingActivity(
        id=DEFAULT_ACTIVITY_ID,
        activity=prescription.kind.value,
        description=prescription.description,
        distance_km=round_distance_km(prescription.distance_km),
    )


def _normalize_overrides(overrides: Mapping[DateLike, OverrideLike] | None) -> dict[date, DayOverride]:
    if not overrides:
        return {}
    return {coerce_date(key): DayOverride.model_validate(value) for key, value in overrides.items()}


def build_training_day(
    day: date,
    calendar: PlanCalendar,
    override: DayOverride | None = None,
    is_completed: bool = False,
) -> TrainingDay:
    """Build a single TrainingDay.

    The override, when present, replaces the computed activities entirely
    (distances rounded to one decimal); the phase always comes from the calendar.
    """
    phase = resolve_phase(day, calendar)
    if override is not None:
        if not override.activities:
            logger.warning(f"Override for {day.isoformat()} has no activities; applying it as-is")
        activities = [normalize_activity(a) for a in override.activities]
    else:
        activities = [default_activity(prescribe(day, calendar))]

    return TrainingDay(date=day, phase=phase, activities=activities, is_completed=is_completed)


def generate_schedule(
    completed_dates: Iterable[DateLike] = (),
    overrides: Mapping[DateLike, OverrideLike] | None = None,
    *,
    calendar: PlanCalendar | None = None,
) -> list[TrainingDay]:
    """Generate the full training schedule.

    Args:
        completed_dates: Dates the user marked done (dates or ISO strings)
        overrides: Date -> DayOverride (or its raw JSON dict)
        calendar: Plan calendar; defaults to the configured plan

    Returns:
        One TrainingDay per date from start to race inclusive, ascending.
        Empty when the race date precedes the start date.
    """
    if calendar is None:
        calendar = PlanCalendar.from_settings()

    if not calendar.is_valid:
        logger.warning(
            f"Race date {calendar.race_date.isoformat()} precedes start date "
            f"{calendar.start_date.isoformat()}; no schedule generated"
        )
        return []

    completed = {coerce_date(d) for d in completed_dates}
    day_overrides = _normalize_overrides(overrides)

    schedule = [
        build_training_day(day, calendar, override=day_overrides.get(day), is_completed=day in completed)
        for day in calendar.dates()
    ]

    logger.debug(
        f"Generated {len(schedule)} days ({calendar.start_date.isoformat()} to {calendar.race_date.isoformat()}), "
        f"{len(day_overrides)} overrides, {len(completed)} completed"
    )
    return schedule


def schedule_to_json(schedule: Iterable[TrainingDay]) -> list[dict]:
    """Render a schedule in its JSON shape (camelCase keys, ISO dates)."""
    return [day.to_json_dict() for day in schedule]
