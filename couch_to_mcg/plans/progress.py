"""Progress and stats derived from a generated schedule.

Pure signal extraction over TrainingDay sequences, for the dashboard and CLI.
Rest days never count as sessions; distance totals sum every activity's
distance on completed days.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from couch_to_mcg.plans.distance import round_distance_km, round_half_up
from couch_to_mcg.plans.schedule import DateLike, coerce_date
from couch_to_mcg.plans.types import ActivityKind, RunLog, TrainingDay


@dataclass(frozen=True)
class ProgressSummary:
    training_days: int
    completed_training_days: int
    percent: int


@dataclass(frozen=True)
class WeeklyStats:
    """Completed work over the seven days ending today (inclusive)."""

    distance_km: float
    completed_count: int
    total_scheduled: int
    avg_effort: float


@dataclass(frozen=True)
class AllTimeStats:
    total_distance_km: float
    longest_run_km: float
    total_sessions: int


def is_training_day(day: TrainingDay) -> bool:
    """True when the day has at least one non-rest activity."""
    return any(a.activity != ActivityKind.REST for a in day.activities)


def find_day(schedule: Iterable[TrainingDay], day: DateLike) -> TrainingDay | None:
    target = coerce_date(day)
    return next((d for d in schedule if d.date == target), None)


def todays_session(schedule: Iterable[TrainingDay], today: date | None = None) -> TrainingDay | None:
    return find_day(schedule, today or date.today())


def progress_summary(schedule: Sequence[TrainingDay]) -> ProgressSummary:
    """Share of training (non-rest) days completed, as a whole percent."""
    training = [d for d in schedule if is_training_day(d)]
    completed = sum(1 for d in training if d.is_completed)
    percent = int(completed / len(training) * 100 + 0.5) if training else 0
    return ProgressSummary(training_days=len(training), completed_training_days=completed, percent=percent)


def weekly_stats(
    schedule: Sequence[TrainingDay],
    run_logs: Mapping[str, RunLog],
    today: date | None = None,
) -> WeeklyStats:
    """Summarize the last seven days of training.

    Args:
        schedule: Generated schedule
        run_logs: Journal entries keyed by ISO date
        today: Last day of the window (defaults to the current date)

    Returns:
        WeeklyStats; avg_effort is 0.0 when no completed day has a log
    """
    today = today or date.today()
    window_start = today - timedelta(days=6)

    scheduled = [d for d in schedule if window_start <= d.date <= today and is_training_day(d)]
    completed = [d for d in scheduled if d.is_completed]

    efforts = [run_logs[d.iso_date].perceived_effort for d in completed if d.iso_date in run_logs]
    avg_effort = round_half_up(sum(efforts) / len(efforts)) if efforts else 0.0

    return WeeklyStats(
        distance_km=round_distance_km(sum(d.total_distance_km for d in completed)),
        completed_count=len(completed),
        total_scheduled=len(scheduled),
        avg_effort=avg_effort,
    )


def all_time_stats(schedule: Sequence[TrainingDay]) -> AllTimeStats:
    completed = [d for d in schedule if d.is_completed]
    return AllTimeStats(
        total_distance_km=round_distance_km(sum(d.total_distance_km for d in completed)),
        longest_run_km=round_distance_km(max((d.total_distance_km for d in completed), default=0.0)),
        total_sessions=sum(1 for d in completed if is_training_day(d)),
    )
