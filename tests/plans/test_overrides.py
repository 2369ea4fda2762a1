"""Tests for slot-level override editing."""

import pytest

from couch_to_mcg.plans.errors import ActivityNotFoundError, OverrideValidationError
from couch_to_mcg.plans.overrides import (
    add_activity_slot,
    current_activities,
    new_activity_id,
    remove_activity_slot,
    update_activity_slot,
)
from couch_to_mcg.plans.types import DayOverride, TrainingActivity


@pytest.fixture
def tuesday(by_date):
    return by_date["2026-02-10"]


def test_new_activity_id_is_nine_chars():
    assert len(new_activity_id()) == 9
    assert new_activity_id() != new_activity_id()


def test_current_activities_prefers_override(tuesday):
    override = DayOverride(activities=[TrainingActivity(id="x", activity="Yoga")])
    assert current_activities(tuesday, {}) == tuesday.activities
    assert current_activities(tuesday, {"2026-02-10": override}) == override.activities


def test_add_slot_appends_easy_run(tuesday):
    override = add_activity_slot(tuesday, {}, activity_id="extra")
    assert [a.id for a in override.activities] == ["default", "extra"]
    assert override.activities[1].activity == "Easy Run"
    assert override.activities[1].distance_km is None


def test_remove_slot(tuesday):
    with_extra = add_activity_slot(tuesday, {}, activity_id="extra")
    override = remove_activity_slot(tuesday, {"2026-02-10": with_extra}, "default")
    assert [a.id for a in override.activities] == ["extra"]


def test_remove_last_slot_refused(tuesday):
    with pytest.raises(OverrideValidationError, match="at least one activity"):
        remove_activity_slot(tuesday, {}, "default")


def test_remove_unknown_slot(tuesday):
    with pytest.raises(ActivityNotFoundError, match="No activity 'nope' on 2026-02-10"):
        remove_activity_slot(tuesday, {}, "nope")


def test_update_slot_merges_fields_and_rounds(tuesday):
    override = update_activity_slot(tuesday, {}, "default", activity="Tempo Run", distance_km=6.66)
    updated = override.activities[0]
    assert updated.activity == "Tempo Run"
    assert updated.distance_km == 6.7
    assert updated.description == "Easy effort, focus on form."
    # the generated day itself is untouched
    assert tuesday.activities[0].activity == "Easy Run"


def test_update_unknown_slot(tuesday):
    with pytest.raises(ActivityNotFoundError):
        update_activity_slot(tuesday, {}, "nope", activity="Yoga")
