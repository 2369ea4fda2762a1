"""Root conftest for all tests.

Shared fixtures: the default 2026 season calendar, its generated schedule,
an in-memory training store, and a loguru sink for asserting on log output.
"""

import pytest
from loguru import logger

from couch_to_mcg.plans.calendar import PlanCalendar
from couch_to_mcg.plans.schedule import generate_schedule
from couch_to_mcg.state.storage import InMemoryStorage
from couch_to_mcg.state.store import TrainingStore


@pytest.fixture
def season() -> PlanCalendar:
    return PlanCalendar()


@pytest.fixture
def default_schedule(season):
    return generate_schedule(calendar=season)


@pytest.fixture
def by_date(default_schedule):
    """Default schedule indexed by ISO date."""
    return {day.iso_date: day for day in default_schedule}


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage, season) -> TrainingStore:
    training_store = TrainingStore(storage, calendar=season)
    training_store.initialize()
    return training_store


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
