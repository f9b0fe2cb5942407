"""
Tests for timezone abbreviation lookup.
"""

import pytest

from meetzone.domain.abbreviations import (
    DEFAULT_ABBREVIATIONS,
    AbbreviationResolver,
    DstPolicy,
    abbreviate,
)
from meetzone.domain.civil_time import resolve
from meetzone.domain.exceptions import UnknownZone
from meetzone.domain.models import AbbreviationEntry


class TestCuratedTable:
    """Tests for zones present in the curated table."""

    def test_new_york_summer_is_daylight(self):
        instant = resolve("2026-07-01", "12:00", "America/New_York")

        assert abbreviate(instant, "America/New_York") == "EDT"

    def test_new_york_winter_is_standard(self):
        instant = resolve("2026-01-15", "12:00", "America/New_York")

        assert abbreviate(instant, "America/New_York") == "EST"

    @pytest.mark.parametrize("month", range(1, 13))
    def test_zone_without_daylight_label_never_changes(self, month):
        instant = resolve(f"2026-{month:02d}-15", "12:00", "Asia/Tokyo")

        assert abbreviate(instant, "Asia/Tokyo") == "JST"

    def test_label_follows_target_zone_not_instant_zone(self):
        """A Tokyo instant is labelled with London's rules when asked for London."""
        instant = resolve("2026-07-01", "20:00", "Asia/Tokyo")

        assert abbreviate(instant, "Europe/London") == "BST"

    def test_daylight_switch_at_transition(self):
        """London moves to BST at 01:00 UTC on 2026-03-29."""
        before = resolve("2026-03-29", "00:30", "Europe/London")
        after = resolve("2026-03-29", "02:30", "Europe/London")

        assert abbreviate(before, "Europe/London") == "GMT"
        assert abbreviate(after, "Europe/London") == "BST"

    def test_curated_zone_without_daylight_label_ignores_real_dst(self):
        """A standard-only entry is returned even when the zone does shift."""
        resolver = AbbreviationResolver(table={"America/New_York": AbbreviationEntry("ET")})

        summer = resolve("2026-07-01", "12:00", "America/New_York")
        winter = resolve("2026-01-15", "12:00", "America/New_York")

        assert resolver.abbreviate(summer, "America/New_York") == "ET"
        assert resolver.abbreviate(winter, "America/New_York") == "ET"

    def test_table_is_read_only(self):
        resolver = AbbreviationResolver(table={"Asia/Taipei": AbbreviationEntry("TST")})

        with pytest.raises(TypeError):
            resolver.table["Asia/Seoul"] = AbbreviationEntry("KST")

    def test_default_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_ABBREVIATIONS["Asia/Taipei"] = AbbreviationEntry("TST")


class TestDstPolicy:
    """Tests for the two daylight detection policies."""

    def test_database_policy_southern_hemisphere(self):
        """Sydney is on daylight time in January and standard time in July."""
        resolver = AbbreviationResolver(dst_policy=DstPolicy.DATABASE)

        january = resolve("2026-01-15", "12:00", "Australia/Sydney")
        july = resolve("2026-07-15", "12:00", "Australia/Sydney")

        assert resolver.abbreviate(january, "Australia/Sydney") == "AEDT"
        assert resolver.abbreviate(july, "Australia/Sydney") == "AEST"

    def test_january_reference_policy_northern_hemisphere(self):
        resolver = AbbreviationResolver(dst_policy=DstPolicy.JANUARY_REFERENCE)

        july = resolve("2026-07-01", "12:00", "America/New_York")
        january = resolve("2026-01-15", "12:00", "America/New_York")

        assert resolver.abbreviate(july, "America/New_York") == "EDT"
        assert resolver.abbreviate(january, "America/New_York") == "EST"

    def test_january_reference_policy_inverts_southern_hemisphere(self):
        """January is summer in Sydney, so the reference comparison labels it backwards."""
        resolver = AbbreviationResolver(dst_policy=DstPolicy.JANUARY_REFERENCE)

        january = resolve("2026-01-15", "12:00", "Australia/Sydney")
        july = resolve("2026-07-15", "12:00", "Australia/Sydney")

        assert resolver.abbreviate(january, "Australia/Sydney") == "AEST"
        assert resolver.abbreviate(july, "Australia/Sydney") == "AEDT"

    def test_policy_accepts_string_value(self):
        resolver = AbbreviationResolver(dst_policy="january_reference")

        assert resolver.dst_policy is DstPolicy.JANUARY_REFERENCE


class TestFallbackChain:
    """Tests for zones missing from the curated table."""

    def test_falls_back_to_database_name(self):
        instant = resolve("2026-07-01", "12:00", "America/Denver")

        assert abbreviate(instant, "America/Denver") == "MDT"

    def test_database_name_may_be_numeric(self):
        instant = resolve("2026-07-01", "12:00", "Asia/Kathmandu")

        assert abbreviate(instant, "Asia/Kathmandu") == instant.in_timezone("Asia/Kathmandu").tzname()

    def test_falls_back_to_zone_id(self):
        """When no strategy before it answers, the zone id is used."""
        resolver = AbbreviationResolver(table={})
        resolver.strategies = (resolver.strategies[0], lambda local, zone: None, resolver.strategies[2])
        instant = resolve("2026-07-01", "12:00", "America/Denver")

        assert resolver.abbreviate(instant, "America/Denver") == "America/Denver"

    def test_result_is_never_empty(self):
        resolver = AbbreviationResolver(table={"Asia/Tokyo": AbbreviationEntry("")})
        instant = resolve("2026-07-01", "12:00", "Asia/Tokyo")

        assert resolver.abbreviate(instant, "Asia/Tokyo") == "JST"

    def test_unknown_zone_raises(self):
        instant = resolve("2026-07-01", "12:00", "Asia/Tokyo")

        with pytest.raises(UnknownZone):
            abbreviate(instant, "Atlantis/Capital")
