"""
Short timezone labels ("EST", "JST", ...) for a given instant.

Labels are looked up through an ordered chain of strategies, the first
non-empty answer wins:

1. the curated table, with a daylight check for zones that shift
2. the abbreviation the tz database itself reports (may be numeric, "+04")
3. the zone identifier
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from pendulum import DateTime

from .civil_time import to_zone
from .models import AbbreviationEntry

logger = logging.getLogger(__name__)


DEFAULT_ABBREVIATIONS: Mapping[str, AbbreviationEntry] = MappingProxyType({
    "Asia/Tokyo": AbbreviationEntry("JST"),
    "Europe/London": AbbreviationEntry("GMT", "BST"),
    "Europe/Paris": AbbreviationEntry("CET", "CEST"),
    "Europe/Berlin": AbbreviationEntry("CET", "CEST"),
    "America/New_York": AbbreviationEntry("EST", "EDT"),
    "America/Toronto": AbbreviationEntry("EST", "EDT"),
    "America/Chicago": AbbreviationEntry("CST", "CDT"),
    "America/Los_Angeles": AbbreviationEntry("PST", "PDT"),
    "America/Vancouver": AbbreviationEntry("PST", "PDT"),
    "Asia/Singapore": AbbreviationEntry("SGT"),
    "Asia/Seoul": AbbreviationEntry("KST"),
    "Asia/Shanghai": AbbreviationEntry("CST"),
    "Asia/Hong_Kong": AbbreviationEntry("HKT"),
    "Asia/Kolkata": AbbreviationEntry("IST"),
    "Asia/Dubai": AbbreviationEntry("GST"),
    "Australia/Sydney": AbbreviationEntry("AEST", "AEDT"),
})


class DstPolicy(str, Enum):
    """How to decide whether a curated zone is on daylight time."""

    # Trust the tz database's own daylight flag (works in both hemispheres)
    DATABASE = "database"
    # Compare against the offset on January 1st; treats January as winter,
    # which labels southern-hemisphere zones backwards
    JANUARY_REFERENCE = "january_reference"


AbbreviationStrategy = Callable[[DateTime, str], Optional[str]]


class AbbreviationResolver:
    """
    Resolves the short label of a zone at a given instant.

    The curated table is copied into a read-only mapping, so a resolver
    can be shared freely between callers.
    """

    def __init__(
        self,
        table: Mapping[str, AbbreviationEntry] = DEFAULT_ABBREVIATIONS,
        dst_policy: DstPolicy = DstPolicy.DATABASE,
    ):
        self.table: Mapping[str, AbbreviationEntry] = MappingProxyType(dict(table))
        self.dst_policy = DstPolicy(dst_policy)
        self.strategies: Tuple[AbbreviationStrategy, ...] = (
            self._from_table,
            self._from_database,
            self._from_zone_id,
        )

    def abbreviate(self, instant: DateTime, zone: str) -> str:
        """
        Return the label in effect for ``zone`` at ``instant``.

        Raises:
            UnknownZone: If ``zone`` is not recognised
        """
        local = to_zone(instant, zone)

        for strategy in self.strategies:
            label = strategy(local, zone)
            if label:
                return label

        return zone

    def is_daylight(self, local: DateTime) -> bool:
        """Decide whether ``local`` falls in its zone's daylight period."""
        if self.dst_policy is DstPolicy.JANUARY_REFERENCE:
            reference = local.set(month=1, day=1)
            return local.utcoffset() != reference.utcoffset()
        return local.is_dst()

    def _from_table(self, local: DateTime, zone: str) -> Optional[str]:
        entry = self.table.get(zone)
        if entry is None:
            return None
        if not entry.daylight:
            return entry.standard
        return entry.daylight if self.is_daylight(local) else entry.standard

    def _from_database(self, local: DateTime, zone: str) -> Optional[str]:
        name = local.tzname()
        if name:
            logger.debug("No curated label for %s, using database name %s", zone, name)
        return name

    @staticmethod
    def _from_zone_id(local: DateTime, zone: str) -> Optional[str]:
        return zone


_default_resolver = AbbreviationResolver()


def abbreviate(instant: DateTime, zone: str) -> str:
    """Label ``zone`` at ``instant`` using the default curated table."""
    return _default_resolver.abbreviate(instant, zone)
