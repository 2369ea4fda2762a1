"""Training store - completion, override, journal and profile state.

Owns the user-authored inputs to the schedule generator and keeps the
generated schedule current: every mutation persists the affected blob, then
regenerates the schedule in full. Overrides are validated here, at the write
boundary, never inside the generator.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from loguru import logger

from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.constants import DEFAULT_PERCEIVED_EFFORT
from couch_to_mcg.plans.errors import OverrideValidationError
from couch_to_mcg.plans.overrides import add_activity_slot, remove_activity_slot, update_activity_slot
from couch_to_mcg.plans.schedule import DateLike, coerce_date, generate_schedule
from couch_to_mcg.plans.types import DayOverride, RunLog, TrainingDay, UserProfile
from couch_to_mcg.plans.validators import normalize_override, validate_custom_activity_name, validate_override
from couch_to_mcg.state.storage import StorageAdapter, StorageKey
from couch_to_mcg.state.sync import DisabledSyncService, SyncService


class TrainingStore:
    """Single-owner state container for one user's plan.

    Attributes:
        profile: User profile
        completed_dates: ISO dates marked done, in the order they were marked
        run_logs: Journal entries keyed by ISO date
        overrides: Day overrides keyed by ISO date
        custom_activities: User-defined activity labels
        schedule: Generated schedule for the current inputs
    """

    def __init__(
        self,
        storage: StorageAdapter,
        calendar: PlanCalendar | None = None,
        sync: SyncService | None = None,
    ):
        self._storage = storage
        self._calendar = calendar or PlanCalendar.from_settings()
        self._sync = sync or DisabledSyncService()

        self.profile = UserProfile()
        self.completed_dates: list[str] = []
        self.run_logs: dict[str, RunLog] = {}
        self.overrides: dict[str, DayOverride] = {}
        self.custom_activities: list[str] = []
        self.schedule: list[TrainingDay] = []
        self.is_initialized = False

    @property
    def has_valid_plan(self) -> bool:
        return bool(self.schedule)

    def initialize(self) -> None:
        """Load every blob from storage (missing keys fall back to defaults)."""
        profile = self._storage.get(StorageKey.PROFILE)
        completed = self._storage.get(StorageKey.COMPLETED_DATES)
        run_logs = self._storage.get(StorageKey.RUN_LOGS)
        overrides = self._storage.get(StorageKey.OVERRIDES)
        custom = self._storage.get(StorageKey.CUSTOM_ACTIVITIES)

        self.profile = UserProfile.model_validate(profile) if profile else UserProfile()
        self.completed_dates = list(completed or [])
        self.run_logs = {d: RunLog.model_validate(log) for d, log in (run_logs or {}).items()}
        self.overrides = {d: normalize_override(DayOverride.model_validate(o)) for d, o in (overrides or {}).items()}
        self.custom_activities = list(custom or [])

        self._regenerate()
        self.is_initialized = True
        logger.info(
            f"Training store initialized: {len(self.schedule)} days, "
            f"{len(self.completed_dates)} completed, {len(self.overrides)} overrides"
        )

    def update_profile(self, profile: UserProfile) -> None:
        self._write(StorageKey.PROFILE, profile.to_json_dict())
        self.profile = profile
        logger.info("Profile updated")

    def toggle_completion(self, day: DateLike) -> bool:
        """Flip the completion flag for a date.

        Returns:
            True if the date is now completed
        """
        iso = coerce_date(day).isoformat()
        if iso in self.completed_dates:
            completed = [d for d in self.completed_dates if d != iso]
        else:
            completed = [*self.completed_dates, iso]

        self._write(StorageKey.COMPLETED_DATES, completed)
        self.completed_dates = completed
        self._regenerate()

        is_completed = iso in completed
        logger.info(f"Completion toggled for {iso}: {is_completed}")
        return is_completed

    def update_log(self, day: DateLike, **fields: Any) -> RunLog:
        """Merge fields into the day's journal entry."""
        iso = coerce_date(day).isoformat()
        existing = self.run_logs.get(iso) or RunLog(notes="", perceived_effort=DEFAULT_PERCEIVED_EFFORT)
        log = RunLog.model_validate({**existing.model_dump(), **fields})

        run_logs = {**self.run_logs, iso: log}
        self._write(StorageKey.RUN_LOGS, {d: entry.to_json_dict() for d, entry in run_logs.items()})
        self.run_logs = run_logs
        logger.info(f"Run log updated for {iso}")
        return log

    def update_override(self, day: DateLike, override: DayOverride) -> DayOverride:
        """Validate and store a full replacement of the day's activities.

        Raises:
            OverrideValidationError: If the override breaks a day invariant
        """
        iso = coerce_date(day).isoformat()
        validated = validate_override(override, day=iso)

        overrides = {**self.overrides, iso: validated}
        self._write_overrides(overrides)
        self.overrides = overrides
        self._regenerate()
        logger.info(f"Override stored for {iso} ({len(validated.activities)} activities)")
        return validated

    def clear_override(self, day: DateLike) -> bool:
        """Drop the day's override so the generated plan applies again.

        Returns:
            False if the day had no override
        """
        iso = coerce_date(day).isoformat()
        if iso not in self.overrides:
            return False

        overrides = {d: o for d, o in self.overrides.items() if d != iso}
        self._write_overrides(overrides)
        self.overrides = overrides
        self._regenerate()
        logger.info(f"Override cleared for {iso}")
        return True

    def add_activity(self, day: DateLike, activity_id: str | None = None) -> DayOverride:
        """Append a blank Easy Run slot to the day and store the result."""
        training_day = self._require_day(day)
        return self.update_override(training_day.date, add_activity_slot(training_day, self.overrides, activity_id))

    def remove_activity(self, day: DateLike, activity_id: str) -> DayOverride:
        """Drop one activity from the day (the last one is never removed).

        Raises:
            ActivityNotFoundError: If the day has no activity with that id
            OverrideValidationError: If it is the day's only activity
        """
        training_day = self._require_day(day)
        return self.update_override(training_day.date, remove_activity_slot(training_day, self.overrides, activity_id))

    def update_activity(self, day: DateLike, activity_id: str, **updates: Any) -> DayOverride:
        """Partially update one activity of the day, e.g. activity="Yoga"."""
        training_day = self._require_day(day)
        return self.update_override(
            training_day.date,
            update_activity_slot(training_day, self.overrides, activity_id, **updates),
        )

    def add_custom_activity(self, name: str) -> bool:
        """Remember a user-defined activity label.

        Returns:
            False when the label is blank, built in, or already known
        """
        label = validate_custom_activity_name(name)
        if label is None or label in self.custom_activities:
            return False

        custom = [*self.custom_activities, label]
        self._write(StorageKey.CUSTOM_ACTIVITIES, custom)
        self.custom_activities = custom
        logger.info(f"Custom activity added: {label}")
        return True

    def reset_all_data(self) -> None:
        self._storage.clear()
        self.profile = UserProfile()
        self.completed_dates = []
        self.run_logs = {}
        self.overrides = {}
        self.custom_activities = []
        self._regenerate()
        logger.info("All training data reset")

    def day(self, day: DateLike) -> TrainingDay | None:
        target = coerce_date(day)
        if not self._calendar.contains(target):
            return None
        return self.schedule[(target - self._calendar.start_date).days]

    def today(self, today: date | None = None) -> TrainingDay | None:
        return self.day(today or date.today())

    def _require_day(self, day: DateLike) -> TrainingDay:
        training_day = self.day(day)
        if training_day is None:
            iso = coerce_date(day).isoformat()
            raise OverrideValidationError(["date is outside the training plan"], day=iso)
        return training_day

    def _write_overrides(self, overrides: dict[str, DayOverride]) -> None:
        self._write(StorageKey.OVERRIDES, {d: o.to_json_dict() for d, o in overrides.items()})

    def _write(self, key: StorageKey, value: Any) -> None:
        self._storage.set(key, value)
        if self._sync.is_enabled():
            self._sync.sync_to_remote(key, value)

    def _regenerate(self) -> None:
        self.schedule = generate_schedule(self.completed_dates, self.overrides, calendar=self._calendar)
        if not self.schedule:
            logger.warning("No valid plan: race date precedes start date")
