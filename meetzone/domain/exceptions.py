"""
Domain-specific exception hierarchy for the meetzone engine.
"""

from typing import List


class MeetzoneError(Exception):
    """Base class for all application-level errors."""


class MalformedInput(MeetzoneError):
    """Raised when a date or time string does not have the required shape."""


class UnknownZone(MeetzoneError):
    """Raised when a timezone identifier is not known to the tz database."""

    def __init__(self, zone: str):
        super().__init__(f"Unknown timezone: '{zone}'")
        self.zone = zone


class InvalidWindow(MeetzoneError):
    """Raised when a meeting does not end strictly after it starts."""


class ProposalError(MeetzoneError):
    """Raised when a set of candidates cannot be rendered."""

    def __init__(self, errors: List[str]):
        super().__init__("\n".join(errors))
        self.errors = list(errors)
