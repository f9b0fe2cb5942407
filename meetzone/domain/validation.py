"""
Shape checks for the primitive strings handed to the engine.

These only look at the structure of the text. Range problems such as
``"99:99"`` pass here and are rejected when the value is resolved.
"""

import re
from typing import Tuple

from .exceptions import MalformedInput

TIME_PATTERN = re.compile(r"\d{2}:\d{2}")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_valid_time_shape(value: str) -> bool:
    """Return True if ``value`` looks like ``HH:mm``."""
    return bool(TIME_PATTERN.fullmatch(value))


def is_valid_date_shape(value: str) -> bool:
    """Return True if ``value`` looks like ``yyyy-MM-dd``."""
    return bool(DATE_PATTERN.fullmatch(value))


def split_time(value: str) -> Tuple[int, int]:
    """
    Split an ``HH:mm`` string into (hour, minute).

    Raises:
        MalformedInput: If the string does not have the ``HH:mm`` shape
    """
    if not is_valid_time_shape(value):
        raise MalformedInput(f"Time must be in HH:mm format, got '{value}'")
    hour, minute = value.split(":")
    return int(hour), int(minute)


def split_date(value: str) -> Tuple[int, int, int]:
    """
    Split a ``yyyy-MM-dd`` string into (year, month, day).

    Raises:
        MalformedInput: If the string does not have the ``yyyy-MM-dd`` shape
    """
    if not is_valid_date_shape(value):
        raise MalformedInput(f"Date must be in yyyy-MM-dd format, got '{value}'")
    year, month, day = value.split("-")
    return int(year), int(month), int(day)


def compare_time_of_day(a: str, b: str) -> int:
    """
    Compare two ``HH:mm`` strings field by field.

    Returns a negative number if ``a`` is earlier, zero if equal and a
    positive number if ``a`` is later.
    """
    a_hour, a_minute = split_time(a)
    b_hour, b_minute = split_time(b)
    if a_hour != b_hour:
        return a_hour - b_hour
    return a_minute - b_minute
