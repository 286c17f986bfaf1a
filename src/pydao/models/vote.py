"""Vote outcome reported by the voting service."""

from __future__ import annotations

from enum import StrEnum


class VoteOutcome(StrEnum):
    """Result of a ``vote`` call.

    Only ``ACCEPTED`` changes the ledger. The other members are the
    reasons a vote was silently ignored; none of them is an error.
    """

    ACCEPTED = "accepted"
    UNKNOWN_VOTER = "unknown_voter"
    INELIGIBLE = "ineligible"
    ALREADY_VOTED = "already_voted"

    @property
    def accepted(self) -> bool:
        return self is VoteOutcome.ACCEPTED
