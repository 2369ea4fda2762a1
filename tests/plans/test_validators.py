"""Tests for override validation and distance rounding."""

import pytest
from pydantic import ValidationError

from couch_to_mcg.plans.distance import round_distance_km, round_half_up
from couch_to_mcg.plans.errors import OverrideValidationError
from couch_to_mcg.plans.types import DayOverride, TrainingActivity
from couch_to_mcg.plans.validators import validate_custom_activity_name, validate_override


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (7.333, 7.3),
        (6.3636, 6.4),
        (10.25, 10.3),
        (5.0, 5.0),
        (0.0, 0.0),
        (None, None),
    ],
)
def test_round_distance_km(raw, expected):
    assert round_distance_km(raw) == expected


@pytest.mark.parametrize(("raw", "expected"), [(6.25, 6.3), (6.24, 6.2), (2.5, 2.5), (0.05, 0.1)])
def test_round_half_up(raw, expected):
    """Ties go up, unlike the builtin round."""
    assert round_half_up(raw) == expected


def test_empty_override_rejected():
    with pytest.raises(OverrideValidationError) as exc_info:
        validate_override(DayOverride(activities=[]), day="2026-02-10")
    assert exc_info.value.day == "2026-02-10"
    assert "activities must not be empty" in exc_info.value.details
    assert "2026-02-10" in str(exc_info.value)


def test_duplicate_ids_rejected():
    override = DayOverride(
        activities=[
            TrainingActivity(id="a", activity="Easy Run"),
            TrainingActivity(id="a", activity="Yoga"),
        ]
    )
    with pytest.raises(OverrideValidationError, match="duplicate activity ids: a"):
        validate_override(override)


def test_blank_label_rejected():
    with pytest.raises(OverrideValidationError, match="labels must not be blank"):
        validate_override(DayOverride(activities=[TrainingActivity(id="a", activity="  ")]))


def test_negative_distance_rejected_by_model():
    with pytest.raises(ValidationError):
        TrainingActivity(id="a", activity="Easy Run", distance_km=-1)


def test_valid_override_rounds_distances():
    override = DayOverride(
        activities=[
            TrainingActivity(id="a", activity="Easy Run", description="", distance_km=7.333),
            TrainingActivity(id="b", activity="Yoga", description="stretch"),
        ]
    )
    validated = validate_override(override)
    assert [a.distance_km for a in validated.activities] == [7.3, None]
    assert validated.activities[1] is override.activities[1]


def test_override_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_override(DayOverride(activities=[]))


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("  Yoga ", "Yoga"),
        ("Swim", "Swim"),
        ("", None),
        ("   ", None),
        ("Easy Run", None),
        ("Rest Day", None),
    ],
)
def test_validate_custom_activity_name(name, expected):
    assert validate_custom_activity_name(name) == expected
