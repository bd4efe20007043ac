"""Calendar-date and rounding helpers shared by the pricing mappers.

No I/O. Dates are plain ``datetime.date`` values, never instants.
"""

import math
from collections.abc import Iterator
from datetime import date, timedelta


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from *start* to *end* inclusive.

    Yields nothing when *end* is before *start*.
    """
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5  # Sat=5, Sun=6


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 → 3).

    The builtin ``round`` uses banker's rounding (2.5 → 2), which would
    drift from amounts shown to clients.
    """
    return math.floor(value + 0.5)


def round_cents(value: float) -> float:
    """Round to 2 decimals with the same half-up rule."""
    return round_half_up(value * 100) / 100


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
