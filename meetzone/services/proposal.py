"""
Application service for turning a list of candidate slots into email text.

The service validates raw user input for every candidate and participant,
collects all problems at once, and only then delegates to the domain-level
formatters. Nothing is rendered unless every candidate is valid, so the
caller never copies partial output.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..domain.civil_time import load_zone
from ..domain.exceptions import MeetzoneError, ProposalError
from ..domain.formatters import LineFormatter, TableFormatter, format_head_date, resolve_window
from ..domain.models import Candidate, Participant
from ..domain.validation import compare_time_of_day, is_valid_date_shape, is_valid_time_shape

logger = logging.getLogger(__name__)

RawCandidate = Tuple[str, str, str]  # (yyyy-MM-dd, HH:mm, HH:mm)


class MeetingProposalService:
    """
    Orchestrates validation and formatting for many candidates.

    The formatters are injected so tests and callers can swap the
    abbreviation table or DST policy.
    """

    def __init__(
        self,
        line_formatter: Optional[LineFormatter] = None,
        table_formatter: Optional[TableFormatter] = None,
    ) -> None:
        self._line_formatter = line_formatter or LineFormatter()
        self._table_formatter = table_formatter or TableFormatter()

    def validate(
        self,
        *,
        base_zone: str,
        candidates: Sequence[RawCandidate],
        participants: Sequence[Participant],
    ) -> List[str]:
        """
        Check every input and return one message per problem found.

        An empty list means everything can be rendered.
        """
        errors: List[str] = []

        base_ok = self._check_zone("Base city", base_zone, errors)

        for idx, (date, start, end) in enumerate(candidates, 1):
            prefix = f"Candidate {idx}"
            if not date:
                errors.append(f"{prefix}: date is empty.")
            elif not is_valid_date_shape(date):
                errors.append(f"{prefix}: date must be in yyyy-MM-dd format.")
            if not is_valid_time_shape(start):
                errors.append(f"{prefix}: start time must be in HH:mm format.")
            if not is_valid_time_shape(end):
                errors.append(f"{prefix}: end time must be in HH:mm format.")
            if is_valid_time_shape(start) and is_valid_time_shape(end) and compare_time_of_day(end, start) <= 0:
                errors.append(f"{prefix}: end time must be after start time.")
                continue

            # Shape is fine, check the values actually exist in the base zone
            if base_ok and is_valid_date_shape(date) and is_valid_time_shape(start) and is_valid_time_shape(end):
                try:
                    resolve_window(base_zone, Candidate(date=date, start=start, end=end))
                except MeetzoneError as exc:
                    errors.append(f"{prefix}: {exc}")

        for idx, participant in enumerate(participants, 1):
            self._check_zone(f"Participant {idx} ({participant.label})", participant.zone, errors)

        if errors:
            logger.debug("Validation found %d problem(s)", len(errors))
        return errors

    def render_lines(
        self,
        *,
        base_zone: str,
        base_label: str,
        candidates: Sequence[RawCandidate],
        participants: Sequence[Participant],
        use_24h: bool,
        show_labels: bool = False,
    ) -> str:
        """
        Render one line per candidate, joined with newlines.

        Raises:
            ProposalError: If any input is invalid; carries every message
        """
        validated = self._validated(base_zone, candidates, participants)

        lines = [
            self._line_formatter.format_line(
                base_zone,
                base_label,
                candidate,
                participants,
                use_24h,
                show_labels=show_labels,
            )
            for candidate in validated
        ]
        return "\n".join(lines)

    def render_tables(
        self,
        *,
        base_zone: str,
        candidates: Sequence[RawCandidate],
        participants: Sequence[Participant],
    ) -> str:
        """
        Render one table per candidate, each under its head date.

        Raises:
            ProposalError: If any input is invalid; carries every message
        """
        validated = self._validated(base_zone, candidates, participants)

        blocks = []
        for candidate in validated:
            heading = format_head_date(resolve_window(base_zone, candidate).start)
            table = self._table_formatter.format_table(base_zone, candidate, participants)
            blocks.append(f"{heading}\n{table}")
        return "\n\n".join(blocks)

    def _validated(
        self,
        base_zone: str,
        candidates: Sequence[RawCandidate],
        participants: Sequence[Participant],
    ) -> List[Candidate]:
        errors = self.validate(base_zone=base_zone, candidates=candidates, participants=participants)
        if errors:
            raise ProposalError(errors)
        return [Candidate(date=date, start=start, end=end) for date, start, end in candidates]

    @staticmethod
    def _check_zone(prefix: str, zone: str, errors: List[str]) -> bool:
        if not zone:
            errors.append(f"{prefix}: timezone is empty.")
            return False
        try:
            load_zone(zone)
        except MeetzoneError as exc:
            errors.append(f"{prefix}: {exc}.")
            return False
        return True
