"""Plan calendar: the fixed date frame a schedule is generated over.

A PlanCalendar carries the start and race dates together with the phase
boundaries and long-run progression windows. Defaults reproduce the 2026
season exactly; every boundary is an explicit date rather than a month or
year check, so it can be configured through settings.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta

from couch_to_mcg.plans.constants import (
    DEFAULT_PHASE_2_START,
    DEFAULT_PHASE_3_START,
    DEFAULT_RACE_DATE,
    DEFAULT_RACE_NAME,
    DEFAULT_START_DATE,
    PHASE_1_LONG_RUN_KM,
    PHASE_2_LONG_RUN_KM,
    PHASE_2_LONG_RUN_WEEKS,
    PHASE_3_LONG_RUN_KM,
    PHASE_3_LONG_RUN_WEEKS,
)
from couch_to_mcg.plans.errors import PlanConfigurationError
from couch_to_mcg.plans.types import Phase


def whole_weeks_between(earlier: date, later: date) -> int:
    """Return the number of whole weeks from earlier to later.

    Truncates toward zero, so a negative span of 10 days is -1 week.
    """
    return int((later - earlier).days / 7)


@dataclass(frozen=True)
class LongRunProgression:
    """Linear long-run build from from_km toward to_km.

    Attributes:
        from_km: Distance in the anchor week
        to_km: Cap, reached after total_weeks
        anchor: Date whole weeks are counted from
        total_weeks: Length of the build (0 is treated as 1)
    """

    from_km: float
    to_km: float
    anchor: date
    total_weeks: int

    def distance_on(self, day: date) -> float:
        week = whole_weeks_between(self.anchor, day)
        fraction = week / (self.total_weeks or 1)
        return min(self.to_km, self.from_km + fraction * (self.to_km - self.from_km))


@dataclass(frozen=True)
class PlanCalendar:
    """Immutable plan frame.

    Attributes:
        start_date: First day of training
        race_date: Race day (last day of the plan)
        phase_2_start: First day of Strength & Power
        phase_3_start: First day of Taper & Peak
        race_name: Shown in the race-day description
    """

    start_date: date = DEFAULT_START_DATE
    race_date: date = DEFAULT_RACE_DATE
    phase_2_start: date = DEFAULT_PHASE_2_START
    phase_3_start: date = DEFAULT_PHASE_3_START
    race_name: str = DEFAULT_RACE_NAME

    def __post_init__(self) -> None:
        if self.phase_3_start < self.phase_2_start:
            raise PlanConfigurationError(
                f"phase_3_start ({self.phase_3_start}) must not precede phase_2_start ({self.phase_2_start})"
            )

    @classmethod
    def from_settings(cls, config=None) -> "PlanCalendar":
        """Build the calendar from application settings (module settings by default)."""
        if config is None:
            from couch_to_mcg.config.settings import settings as config  # noqa: PLC0415

        return cls(
            start_date=config.start_date,
            race_date=config.race_date,
            phase_2_start=config.phase_2_start,
            phase_3_start=config.phase_3_start,
            race_name=config.race_name,
        )

    @property
    def is_valid(self) -> bool:
        """False when the race precedes the start (no plan can be generated)."""
        return self.race_date >= self.start_date

    @property
    def total_days(self) -> int:
        if not self.is_valid:
            return 0
        return (self.race_date - self.start_date).days + 1

    @property
    def phase_1_end(self) -> date:
        return self.phase_2_start - timedelta(days=1)

    def dates(self) -> Iterator[date]:
        """Yield every plan date from start to race inclusive."""
        for offset in range(self.total_days):
            yield self.start_date + timedelta(days=offset)

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.race_date

    def weeks_to_race(self, day: date) -> int:
        return whole_weeks_between(day, self.race_date)

    def long_run_progression(self, phase: Phase) -> LongRunProgression:
        """Return the long-run window for a phase."""
        if phase == Phase.BASE_BUILDING:
            from_km, to_km = PHASE_1_LONG_RUN_KM
            return LongRunProgression(
                from_km=from_km,
                to_km=to_km,
                anchor=self.start_date,
                total_weeks=whole_weeks_between(self.start_date, self.phase_1_end),
            )
        if phase == Phase.STRENGTH_AND_POWER:
            from_km, to_km = PHASE_2_LONG_RUN_KM
            return LongRunProgression(
                from_km=from_km,
                to_km=to_km,
                anchor=self.phase_2_start,
                total_weeks=PHASE_2_LONG_RUN_WEEKS,
            )
        from_km, to_km = PHASE_3_LONG_RUN_KM
        return LongRunProgression(
            from_km=from_km,
            to_km=to_km,
            anchor=self.phase_3_start,
            total_weeks=PHASE_3_LONG_RUN_WEEKS,
        )
