"""Canonical training plan schema.

This module defines the value objects exchanged between the schedule
generator and its collaborators:
- TrainingActivity: one prescribed session within a day
- TrainingDay: the per-date output record (phase, activities, completion)
- DayOverride: a user-authored full replacement of a day's activities

All models serialize to the camelCase JSON shape used by the stores
(`distanceKm`, `isCompleted`, `goalTime`, ...) and accept either snake_case
or camelCase on input.
"""

import datetime as dt
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Phase(StrEnum):
    BASE_BUILDING = "Base Building"
    STRENGTH_AND_POWER = "Strength & Power"
    TAPER_AND_PEAK = "Taper & Peak"


class ActivityKind(StrEnum):
    """Default activity vocabulary produced by the rule table.

    Activity labels are an open set: user-defined names are stored as plain
    strings alongside these.
    """

    EASY_RUN = "Easy Run"
    LONG_RUN = "Long Run"
    HILL_REPEATS = "Hill Repeats"
    STRENGTH = "Strength Training"
    GYM_WORKOUT = "Gym Workout"
    REST = "Rest Day"
    RACE = "Race"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump to the persisted JSON shape (camelCase, unset optionals dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TrainingActivity(CamelModel):
    """One prescribed session within a day.

    Attributes:
        id: "default" for generated entries, opaque token for user-added ones
        activity: ActivityKind value or any user-defined label
        description: Free-text guidance
        distance_km: Optional distance, rounded to one decimal place when generated
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    activity: str
    description: str = ""
    distance_km: float | None = Field(default=None, ge=0)


class DayOverride(CamelModel):
    """Complete replacement of one day's activity list.

    Content is not validated here; see `validators.validate_override`, which
    the store applies at write time.
    """

    activities: list[TrainingActivity]


class TrainingDay(CamelModel):
    """Generated plan entry for a single calendar date."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    date: dt.date
    phase: Phase
    activities: list[TrainingActivity]
    is_completed: bool = False

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def total_distance_km(self) -> float:
        return sum(a.distance_km or 0.0 for a in self.activities)


class UserProfile(CamelModel):
    name: str = "Runner"
    goal_time: str = "2:00:00"
    shoe_model: str = ""


class RunLog(CamelModel):
    """Journal entry for a completed day."""

    notes: str = ""
    actual_distance: float | None = Field(default=None, ge=0)
    perceived_effort: int = Field(default=5, ge=1, le=10)


class Tip(BaseModel):
    category: Literal["Shoes", "Nutrition", "Pacing"]
    content: str
