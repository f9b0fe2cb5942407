"""
Tests for CLI logging setup.
"""

import logging

import pytest

from meetzone.cli import base
from meetzone.cli.base import configure_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    """Run with logging unconfigured and restore the root level afterwards."""
    root = logging.getLogger()
    original_level = root.level
    monkeypatch.setattr(base, "_LOGGING_CONFIGURED", False)
    root.setLevel(logging.WARNING)
    yield root
    root.setLevel(original_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_first_call_sets_level(self, fresh_logging):
        configure_logging(logging.INFO)

        assert fresh_logging.level == logging.INFO
        assert base._LOGGING_CONFIGURED

    def test_later_verbose_call_lowers_level(self, fresh_logging):
        """A second command asking for debug output gets it."""
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)

        assert fresh_logging.level == logging.DEBUG

    def test_later_quieter_call_keeps_level(self, fresh_logging):
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)

        assert fresh_logging.level == logging.DEBUG
