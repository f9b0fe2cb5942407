"""
Conversion between civil (wall-clock) time and absolute instants.

Every other part of the engine asks this module what time it is where.
Instants are timezone-aware ``pendulum.DateTime`` values; two instants
compare by the absolute moment they denote, whatever zone they carry.

Local times that a DST transition makes ambiguous or nonexistent are read
with the offset in force *before* the transition (PEP 495 ``fold=0``):

- inside a spring-forward gap the time moves forward by the gap width
  (2026-03-08 02:30 in America/New_York resolves to 03:30 EDT)
- inside a fall-back fold the first occurrence is chosen
  (2026-11-01 01:30 in America/New_York resolves to 01:30 EDT)

Python compares datetimes in different zones with ``==`` as unequal when
either one falls in a repeated (fall-back) hour (PEP 495). Compare such
instants through ``timestamp()`` or after converting both to UTC.

UTC offsets are reported in whole minutes, truncated toward zero, so a
local mean time offset of -4:56:02 reads as -296.
"""

import logging
from datetime import datetime

import pendulum
from pendulum import DateTime
from pendulum.tz.exceptions import InvalidTimezone
from pendulum.tz.timezone import Timezone

from .exceptions import MalformedInput, UnknownZone
from .models import CivilProjection
from .validation import split_date, split_time

logger = logging.getLogger(__name__)


def load_zone(zone: str) -> Timezone:
    """
    Look up an IANA zone in the tz database.

    Raises:
        UnknownZone: If the identifier is empty or not recognised
    """
    if not zone or not zone.strip():
        raise UnknownZone(zone)
    try:
        return pendulum.timezone(zone)
    except (InvalidTimezone, ValueError, KeyError) as exc:
        raise UnknownZone(zone) from exc


def resolve(date: str, time: str, zone: str) -> DateTime:
    """
    Interpret ``date`` + ``time`` as wall-clock time in ``zone``.

    Args:
        date: Calendar date as ``yyyy-MM-dd``
        time: Time of day as ``HH:mm``
        zone: IANA timezone identifier

    Returns:
        The instant, expressed in ``zone``

    Raises:
        MalformedInput: If the strings are badly shaped or out of range
        UnknownZone: If ``zone`` is not recognised
    """
    year, month, day = split_date(date)
    hour, minute = split_time(time)
    tz = load_zone(zone)

    try:
        wall = datetime(year, month, day, hour, minute)
    except ValueError as exc:
        raise MalformedInput(f"Invalid date/time '{date} {time}': {exc}") from exc

    # fold=0: offset before the transition, see module docstring
    utc_wall = wall - tz.utcoffset(wall)
    # seconds survive; historical offsets are not always whole minutes
    instant = pendulum.instance(utc_wall.replace(tzinfo=pendulum.UTC)).in_timezone(tz)

    if instant.naive() != wall:
        logger.debug("%s %s does not exist in %s, moved to %s", date, time, zone, instant)

    return instant


def to_zone(instant: DateTime, zone: str) -> DateTime:
    """Express ``instant`` in another zone without changing the moment."""
    return instant.in_timezone(load_zone(zone))


def project(instant: DateTime, zone: str) -> CivilProjection:
    """
    Read ``instant`` off the wall clock of ``zone``.

    Returns:
        CivilProjection with the local date, local time and the signed
        UTC offset in minutes (truncated toward zero) that ``zone`` applies
    """
    local = to_zone(instant, zone)
    offset_seconds = int(local.utcoffset().total_seconds())

    return CivilProjection(
        date=local.date(),
        time=local.time(),
        utc_offset_minutes=int(offset_seconds / 60),
    )
