"""Tests for ledger record models and identity types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pydao.models import Proposal, VoteOutcome, Voter, normalize_actor_id
from pydao.models._base import ACTOR_ID_ADAPTER, PROPOSAL_ID_ADAPTER, U64_MAX


class TestActorId:
    def test_string_is_stripped(self) -> None:
        assert normalize_actor_id("  v1 ") == "v1"

    def test_bytes_become_hex(self) -> None:
        assert normalize_actor_id(b"\x01\xab") == "0x01ab"

    def test_int_becomes_decimal(self) -> None:
        assert normalize_actor_id(42) == "42"

    @pytest.mark.parametrize("value", ["", "   ", b"", -1, True, 1.5, None])
    def test_rejected_values(self, value: object) -> None:
        with pytest.raises(ValidationError):
            ACTOR_ID_ADAPTER.validate_python(value)


class TestProposalId:
    def test_bounds(self) -> None:
        assert PROPOSAL_ID_ADAPTER.validate_python(0) == 0
        assert PROPOSAL_ID_ADAPTER.validate_python(U64_MAX) == U64_MAX

    @pytest.mark.parametrize("value", [-1, U64_MAX + 1])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            PROPOSAL_ID_ADAPTER.validate_python(value)


class TestRecords:
    def test_voter_defaults_to_eligible(self) -> None:
        assert Voter(name="N").eligible is True

    def test_records_are_frozen(self) -> None:
        voter = Voter(name="N")
        with pytest.raises(ValidationError):
            voter.name = "M"  # type: ignore[misc]

    def test_proposal_rejects_negative_id(self) -> None:
        with pytest.raises(ValidationError):
            Proposal(id=-3, description="x")

    def test_proposal_dump_by_alias(self) -> None:
        assert Proposal(id=7, description="x").model_dump(by_alias=True) == {"id": 7, "description": "x"}


def test_vote_outcome_accepted_flag() -> None:
    assert VoteOutcome.ACCEPTED.accepted
    assert not any(
        outcome.accepted
        for outcome in (VoteOutcome.UNKNOWN_VOTER, VoteOutcome.INELIGIBLE, VoteOutcome.ALREADY_VOTED)
    )
