"""
Copy-pasteable renderings of one meeting candidate.

Two layouts are supported:

- a single line, e.g.
  ``Jan 19, 2026 (Mon): 8:00 PM–9:00 PM JST / 6:00 AM–7:00 AM EST``
- an aligned table with one row per participant

Both are pure functions of their arguments. A failure anywhere raises
before any text is returned, so callers never see half a line.
"""

import logging
from typing import List, Optional, Sequence

from pendulum import DateTime

from .abbreviations import AbbreviationResolver
from .civil_time import project, resolve, to_zone
from .day_shift import day_shift
from .models import Candidate, Participant, TimeWindow

logger = logging.getLogger(__name__)

LOCALE = "en"
HEAD_DATE_FORMAT = "MMM D, YYYY (ddd)"
TIME_FORMAT_24H = "HH:mm"
TIME_FORMAT_12H = "h:mm A"
RANGE_SEPARATOR = "–"
SEGMENT_SEPARATOR = " / "
HEAD_SEPARATOR = ": "


def resolve_window(base_zone: str, candidate: Candidate) -> TimeWindow:
    """Resolve a candidate's start and end in the base zone."""
    start = resolve(candidate.date, candidate.start, base_zone)
    end = resolve(candidate.date, candidate.end, base_zone)
    return TimeWindow(start=start, end=end)


def format_head_date(instant: DateTime) -> str:
    """Format the date part, e.g. ``Jan 19, 2026 (Mon)``."""
    return instant.format(HEAD_DATE_FORMAT, locale=LOCALE)


def format_time(instant: DateTime, use_24h: bool) -> str:
    """Format a time of day as ``20:00`` or ``8:00 PM``."""
    fmt = TIME_FORMAT_24H if use_24h else TIME_FORMAT_12H
    return instant.format(fmt, locale=LOCALE)


def format_day_shift(days: int) -> str:
    """Suffix such as `` (+1d)``; empty when the date is unchanged."""
    if days == 0:
        return ""
    return f" ({days:+d}d)"


def format_utc_offset(minutes: int) -> str:
    """Format an offset in minutes as ``UTC+9``, ``UTC-5`` or ``UTC+5:30``."""
    sign = "-" if minutes < 0 else "+"
    hours, remainder = divmod(abs(minutes), 60)
    if remainder:
        return f"UTC{sign}{hours}:{remainder:02d}"
    return f"UTC{sign}{hours}"


class LineFormatter:
    """
    Renders one candidate as a single line.

    Layout: ``<head date>: <base segment> / <participant segment> / ...``
    where each segment is ``<start>–<end> <abbrev>[ (±Nd)]``.
    """

    def __init__(self, abbreviations: Optional[AbbreviationResolver] = None):
        self.abbreviations = abbreviations or AbbreviationResolver()

    def format_line(
        self,
        base_zone: str,
        base_label: str,
        candidate: Candidate,
        participants: Sequence[Participant],
        use_24h: bool,
        show_labels: bool = False,
    ) -> str:
        """
        Format a candidate for the base zone and every participant.

        Args:
            base_zone: IANA zone the candidate is written in
            base_label: Display name of the base city
            candidate: Date and start/end wall-clock times in the base zone
            participants: Zones to convert into, rendered in input order
            use_24h: ``HH:mm`` when True, ``h:mm AM/PM`` otherwise
            show_labels: Prefix every segment with its city label

        Returns:
            The formatted line

        Raises:
            MalformedInput: If the candidate values are out of range
            UnknownZone: If any zone is not recognised
            InvalidWindow: If the resolved end is not after the start
        """
        window = resolve_window(base_zone, candidate)

        segments = [
            self._segment(window, base_zone, window.start, use_24h, base_label if show_labels else None)
        ]
        for participant in participants:
            local = TimeWindow(
                start=to_zone(window.start, participant.zone),
                end=to_zone(window.end, participant.zone),
            )
            segment = self._segment(
                local,
                participant.zone,
                window.start,
                use_24h,
                participant.label if show_labels else None,
            )
            segments.append(segment + format_day_shift(day_shift(window.start, base_zone, participant.zone)))

        line = format_head_date(window.start) + HEAD_SEPARATOR + SEGMENT_SEPARATOR.join(segments)
        logger.debug("Formatted %s in %s: %s", candidate, base_zone, line)
        return line

    def _segment(
        self,
        local: TimeWindow,
        zone: str,
        instant: DateTime,
        use_24h: bool,
        label: Optional[str],
    ) -> str:
        time_range = f"{format_time(local.start, use_24h)}{RANGE_SEPARATOR}{format_time(local.end, use_24h)}"
        segment = f"{time_range} {self.abbreviations.abbreviate(instant, zone)}"
        if label:
            return f"{label} {segment}"
        return segment


class TableFormatter:
    """
    Renders one candidate as a column-aligned table, one row per participant.

    Every row is padded to the full table width, so the columns line up
    when pasted into a monospaced context.
    """

    HEADERS = ("City", "Local time", "UTC offset")
    PADDING = 2
    DATETIME_FORMAT = "YYYY-MM-DD HH:mm"

    def format_table(
        self,
        base_zone: str,
        candidate: Candidate,
        participants: Sequence[Participant],
    ) -> str:
        """
        Format the meeting start for every participant.

        Raises:
            MalformedInput: If the candidate values are out of range
            UnknownZone: If any zone is not recognised
            InvalidWindow: If the resolved end is not after the start
        """
        window = resolve_window(base_zone, candidate)

        rows: List[List[str]] = [list(self.HEADERS)]
        for participant in participants:
            local = to_zone(window.start, participant.zone)
            projection = project(window.start, participant.zone)
            rows.append([
                participant.label,
                local.format(self.DATETIME_FORMAT, locale=LOCALE),
                format_utc_offset(projection.utc_offset_minutes),
            ])

        widths = [
            max(len(row[column]) for row in rows) + self.PADDING
            for column in range(len(self.HEADERS))
        ]
        separator = ["-" * (width - self.PADDING) for width in widths]
        rows.insert(1, separator)

        return "\n".join(
            "".join(cell.ljust(width) for cell, width in zip(row, widths))
            for row in rows
        )


_default_line_formatter = LineFormatter()
_default_table_formatter = TableFormatter()


def format_line(
    base_zone: str,
    base_label: str,
    candidate: Candidate,
    participants: Sequence[Participant],
    use_24h: bool,
    show_labels: bool = False,
) -> str:
    """Format a candidate line with the default abbreviation table."""
    return _default_line_formatter.format_line(
        base_zone, base_label, candidate, participants, use_24h, show_labels=show_labels
    )


def format_table(base_zone: str, candidate: Candidate, participants: Sequence[Participant]) -> str:
    """Format a candidate table."""
    return _default_table_formatter.format_table(base_zone, candidate, participants)
