"""
Domain layer - Pure timezone conversion and formatting logic without I/O.
"""

from .abbreviations import DEFAULT_ABBREVIATIONS, AbbreviationResolver, DstPolicy, abbreviate
from .civil_time import load_zone, project, resolve, to_zone
from .day_shift import day_shift, shift_days
from .exceptions import InvalidWindow, MalformedInput, MeetzoneError, ProposalError, UnknownZone
from .formatters import LineFormatter, TableFormatter, format_line, format_table
from .models import AbbreviationEntry, Candidate, CivilProjection, Participant, TimeWindow
from .validation import compare_time_of_day, is_valid_date_shape, is_valid_time_shape

__all__ = [
    "AbbreviationEntry",
    "AbbreviationResolver",
    "Candidate",
    "CivilProjection",
    "DEFAULT_ABBREVIATIONS",
    "DstPolicy",
    "InvalidWindow",
    "LineFormatter",
    "MalformedInput",
    "MeetzoneError",
    "Participant",
    "ProposalError",
    "TableFormatter",
    "TimeWindow",
    "UnknownZone",
    "abbreviate",
    "compare_time_of_day",
    "day_shift",
    "format_line",
    "format_table",
    "is_valid_date_shape",
    "is_valid_time_shape",
    "load_zone",
    "project",
    "resolve",
    "shift_days",
    "to_zone",
]
