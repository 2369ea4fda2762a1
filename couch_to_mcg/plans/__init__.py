"""Plans module - deterministic schedule generation.

This module provides:
- The plan calendar (start, race, phase boundaries, long-run windows)
- Phase resolution and the per-phase weekday rule table
- Schedule generation with override and completion merging
- Override validation and slot editing
- Progress and stats over a generated schedule
"""

from couch_to_mcg.plans.calendar import LongRunProgression, PlanCalendar, whole_weeks_between
from couch_to_mcg.plans.distance import round_distance_km
from couch_to_mcg.plans.errors import (
    ActivityNotFoundError,
    OverrideValidationError,
    PlanConfigurationError,
    PlanError,
)
from couch_to_mcg.plans.overrides import add_activity_slot, remove_activity_slot, update_activity_slot
from couch_to_mcg.plans.phase import is_final_week, resolve_phase
from couch_to_mcg.plans.rules import Prescription, prescribe
from couch_to_mcg.plans.schedule import build_training_day, generate_schedule, schedule_to_json
from couch_to_mcg.plans.types import (
    ActivityKind,
    DayOverride,
    Phase,
    RunLog,
    TrainingActivity,
    TrainingDay,
    UserProfile,
)
from couch_to_mcg.plans.validators import normalize_override, validate_override

__all__ = [
    "ActivityKind",
    "ActivityNotFoundError",
    "DayOverride",
    "LongRunProgression",
    "OverrideValidationError",
    "Phase",
    "PlanCalendar",
    "PlanConfigurationError",
    "PlanError",
    "Prescription",
    "RunLog",
    "TrainingActivity",
    "TrainingDay",
    "UserProfile",
    "add_activity_slot",
    "build_training_day",
    "generate_schedule",
    "is_final_week",
    "normalize_override",
    "prescribe",
    "remove_activity_slot",
    "resolve_phase",
    "round_distance_km",
    "schedule_to_json",
    "update_activity_slot",
    "validate_override",
    "whole_weeks_between",
]
