"""Domain-specific errors for plan configuration and override editing.

Generating a schedule never raises: a race date before the start date yields
an empty schedule. These errors belong to the write boundary (override
validation, slot editing) and to plan configuration.
"""


class PlanError(Exception):
    """Base exception for all plan errors."""

    pass


class PlanConfigurationError(PlanError):
    """Raised when plan calendar boundaries are out of order."""

    pass


class OverrideValidationError(PlanError, ValueError):
    """Raised when a day override would break a schedule invariant.

    Attributes:
        day: ISO date the override targets (None when not yet attached)
        details: List of violation strings
    """

    def __init__(self, details: list[str], day: str | None = None):
        self.day = day
        self.details = details
        prefix = f"Invalid override for {day}" if day else "Invalid override"
        super().__init__(f"{prefix}: {'; '.join(details)}")


class ActivityNotFoundError(PlanError, KeyError):
    """Raised when a slot edit references an activity id the day doesn't have."""

    def __init__(self, day: str, activity_id: str):
        self.day = day
        self.activity_id = activity_id
        super().__init__(f"No activity '{activity_id}' on {day}")

    def __str__(self) -> str:
        return str(self.args[0])
