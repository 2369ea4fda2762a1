"""Day override editing.

Helpers that turn a single slot edit (add, remove, update one activity) into
a complete replacement DayOverride. The day's current activities are the
existing override when there is one, otherwise the generated defaults.
"""

import uuid
from collections.abc import Mapping

from couch_to_mcg.plans.constants import ACTIVITY_ID_LENGTH
from couch_to_mcg.plans.errors import ActivityNotFoundError, OverrideValidationError
from couch_to_mcg.plans.types import ActivityKind, DayOverride, TrainingActivity, TrainingDay
from couch_to_mcg.plans.validators import validate_override


def new_activity_id() -> str:
    return uuid.uuid4().hex[:ACTIVITY_ID_LENGTH]


def current_activities(day: TrainingDay, overrides: Mapping[str, DayOverride]) -> list[TrainingActivity]:
    override = overrides.get(day.iso_date)
    if override is not None:
        return list(override.activities)
    return list(day.activities)


def add_activity_slot(
    day: TrainingDay,
    overrides: Mapping[str, DayOverride],
    activity_id: str | None = None,
) -> DayOverride:
    """Append a blank Easy Run slot to the day."""
    new_activity = TrainingActivity(
        id=activity_id or new_activity_id(),
        activity=ActivityKind.EASY_RUN.value,
        description="New activity for today.",
    )
    return validate_override(
        DayOverride(activities=[*current_activities(day, overrides), new_activity]),
        day=day.iso_date,
    )


def remove_activity_slot(day: TrainingDay, overrides: Mapping[str, DayOverride], activity_id: str) -> DayOverride:
    """Remove one activity from the day.

    Raises:
        ActivityNotFoundError: If the day has no activity with that id
        OverrideValidationError: If it is the day's only activity
    """
    activities = current_activities(day, overrides)
    if all(a.id != activity_id for a in activities):
        raise ActivityNotFoundError(day.iso_date, activity_id)
    if len(activities) <= 1:
        raise OverrideValidationError(["a day must keep at least one activity"], day=day.iso_date)

    return validate_override(
        DayOverride(activities=[a for a in activities if a.id != activity_id]),
        day=day.iso_date,
    )


def update_activity_slot(
    day: TrainingDay,
    overrides: Mapping[str, DayOverride],
    activity_id: str,
    **updates,
) -> DayOverride:
    """Apply a partial update to one activity of the day.

    Args:
        day: Generated day being edited
        overrides: Current overrides keyed by ISO date
        activity_id: Id of the activity to update
        **updates: Field values by attribute name, e.g. activity="Yoga", distance_km=5

    Raises:
        ActivityNotFoundError: If the day has no activity with that id
    """
    activities = current_activities(day, overrides)
    for index, activity in enumerate(activities):
        if activity.id == activity_id:
            merged = {**activity.model_dump(), **updates}
            activities[index] = TrainingActivity.model_validate(merged)
            break
    else:
        raise ActivityNotFoundError(day.iso_date, activity_id)

    return validate_override(DayOverride(activities=activities), day=day.iso_date)
