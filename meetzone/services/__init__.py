"""
Service layer helpers that orchestrate validation and formatting.
"""

from .proposal import MeetingProposalService, RawCandidate

__all__ = ["MeetingProposalService", "RawCandidate"]
