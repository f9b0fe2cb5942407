"""
Domain models for meeting candidates, participants and resolved instants.
"""

from dataclasses import dataclass
from typing import Optional

from pendulum import Date, DateTime, Time

from .exceptions import InvalidWindow, MalformedInput
from .validation import compare_time_of_day, is_valid_date_shape, is_valid_time_shape


@dataclass(frozen=True)
class Candidate:
    """
    One proposed meeting slot, always read as wall-clock time in the base zone.

    Invariant: both times are ``HH:mm`` and end is strictly after start.
    """
    date: str   # yyyy-MM-dd
    start: str  # HH:mm
    end: str    # HH:mm

    def __post_init__(self):
        if not is_valid_date_shape(self.date):
            raise MalformedInput(f"Date must be in yyyy-MM-dd format, got '{self.date}'")
        for value in (self.start, self.end):
            if not is_valid_time_shape(value):
                raise MalformedInput(f"Time must be in HH:mm format, got '{value}'")
        if compare_time_of_day(self.end, self.start) <= 0:
            raise InvalidWindow(f"End time {self.end} must be after start time {self.start}")

    def __str__(self) -> str:
        return f"{self.date} {self.start}-{self.end}"


@dataclass(frozen=True)
class Participant:
    """A person (or city) taking part, identified by a label and a zone."""
    label: str
    zone: str  # IANA identifier, e.g. "Asia/Tokyo"


@dataclass(frozen=True)
class AbbreviationEntry:
    """
    Curated short labels for one zone.

    A missing daylight label means the zone is treated as never shifting.
    """
    standard: str
    daylight: Optional[str] = None


@dataclass(frozen=True)
class CivilProjection:
    """Wall-clock reading of an instant in a particular zone."""
    date: Date
    time: Time
    utc_offset_minutes: int


@dataclass(frozen=True)
class TimeWindow:
    """
    A resolved meeting span.

    Invariant: start must be before end. Both ends are ordered by their
    absolute moment, so two readings of a repeated hour compare correctly.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start.timestamp() >= self.end.timestamp():
            raise InvalidWindow(f"Start time {self.start} must be before end time {self.end}")
