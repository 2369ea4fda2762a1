"""Distance rounding - kilometres, one decimal place."""

import math


def round_half_up(value: float) -> float:
    """Round to one decimal place, halves rounding up (6.25 -> 6.3).

    Python's round() rounds halves to even; plan figures round 0.05 up, so
    this scales and floors instead.
    """
    return math.floor(value * 10 + 0.5) / 10


def round_distance_km(distance_km: float | None) -> float | None:
    """Round a distance to one decimal place, halves rounding up.

    Args:
        distance_km: Distance in km, or None for non-distance activities

    Returns:
        Rounded distance, or None when no distance was given
    """
    if distance_km is None:
        return None
    return round_half_up(distance_km)
