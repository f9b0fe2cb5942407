"""
Calendar-day difference between two zones' readings of the same instant.
"""

import math

from pendulum import DateTime

from .civil_time import to_zone

SECONDS_PER_DAY = 24 * 60 * 60


def shift_days(base_midnight: DateTime, other_midnight: DateTime) -> int:
    """
    Signed number of days from ``base_midnight`` to ``other_midnight``.

    Both arguments are start-of-day instants, each in its own zone. They are
    compared by their wall-clock readings, so the result counts calendar
    days rather than elapsed hours. A zone whose day starts at 01:00 (DST
    change at midnight) leaves a sub-day remainder, which is rounded to the
    nearest day with ties away from zero.

    Returns:
        0 for the same date, positive when the other date is later,
        negative when it is earlier
    """
    delta = other_midnight.naive() - base_midnight.naive()
    days = delta.total_seconds() / SECONDS_PER_DAY
    return int(math.copysign(math.floor(abs(days) + 0.5), days))


def day_shift(instant: DateTime, base_zone: str, other_zone: str) -> int:
    """Day offset of ``other_zone``'s date for ``instant`` relative to ``base_zone``'s."""
    base_midnight = to_zone(instant, base_zone).start_of("day")
    other_midnight = to_zone(instant, other_zone).start_of("day")
    return shift_days(base_midnight, other_midnight)
