"""Override validators with hard guardrails.

Applied at the write boundary (store, slot editing) so that the generator can
stay total. Enforces:
- At least one activity per day
- Activity ids unique within the day and non-blank
- Activity labels non-blank
Distances are normalized to one decimal place on the way through.
"""

from collections import Counter

from couch_to_mcg.plans.distance import round_distance_km
from couch_to_mcg.plans.errors import OverrideValidationError
from couch_to_mcg.plans.types import ActivityKind, DayOverride, TrainingActivity


def validate_override(override: DayOverride, day: str | None = None) -> DayOverride:
    """Validate a day override and return it with distances rounded.

    Args:
        override: Override to validate
        day: ISO date the override targets (used in error messages)

    Returns:
        New DayOverride with every distance rounded to one decimal

    Raises:
        OverrideValidationError: If any invariant is violated
    """
    details: list[str] = []

    if not override.activities:
        details.append("activities must not be empty")

    id_counts = Counter(a.id for a in override.activities)
    duplicates = sorted(activity_id for activity_id, count in id_counts.items() if count > 1)
    if duplicates:
        details.append(f"duplicate activity ids: {', '.join(duplicates)}")

    if any(not a.id.strip() for a in override.activities):
        details.append("activity ids must not be blank")

    if any(not a.activity.strip() for a in override.activities):
        details.append("activity labels must not be blank")

    if details:
        raise OverrideValidationError(details, day=day)

    return DayOverride(activities=[normalize_activity(a) for a in override.activities])


def normalize_activity(activity: TrainingActivity) -> TrainingActivity:
    rounded = round_distance_km(activity.distance_km)
    if rounded == activity.distance_km:
        return activity
    return activity.model_copy(update={"distance_km": rounded})


def normalize_override(override: DayOverride) -> DayOverride:
    """Round every distance without checking the other invariants."""
    return DayOverride(activities=[normalize_activity(a) for a in override.activities])


def validate_custom_activity_name(name: str) -> str | None:
    """Normalize a user-defined activity label.

    Returns:
        The trimmed label, or None when it is blank or a built-in kind
    """
    label = name.strip()
    if not label or label in {kind.value for kind in ActivityKind}:
        return None
    return label
