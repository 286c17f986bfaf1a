"""Tests for flattening ledger state into an external snapshot."""

from __future__ import annotations

from pydao.models.proposal import Proposal
from pydao.models.voter import Voter
from pydao.state.snapshot import IoState
from pydao.state.store import State


def _populated_state() -> State:
    state = State.new()
    state.admins.append("root")
    state.voters["v1"] = Voter(name="Ann")
    state.voters["v2"] = Voter(name="Bob", eligible=False)
    state.proposals[1] = Proposal(id=1, description="Budget")
    state.proposals[2] = Proposal(id=2, description="Policy")
    state.vote_counts[1] = 1
    state.vote_counts[2] = 0
    state.votes_cast["v1"] = [1]
    return state


def test_from_state_contains_every_pair() -> None:
    snapshot = IoState.from_state(_populated_state())

    assert snapshot.admins == ["root"]
    assert sorted(actor for actor, _ in snapshot.voters) == ["v1", "v2"]
    assert dict(snapshot.proposals)[2].description == "Policy"
    assert dict(snapshot.vote_counts) == {1: 1, 2: 0}
    assert snapshot.votes_cast == [("v1", [1])]


def test_to_state_restores_original() -> None:
    state = _populated_state()
    assert IoState.from_state(state).to_state().model_dump() == state.model_dump()


def test_snapshot_is_detached_from_state() -> None:
    state = _populated_state()
    snapshot = IoState.from_state(state)

    state.votes_cast["v1"].append(2)
    state.vote_counts[2] = 5

    assert dict(snapshot.votes_cast)["v1"] == [1]
    assert dict(snapshot.vote_counts)[2] == 0


def test_json_uses_camel_case_and_validates_back() -> None:
    state = _populated_state()
    payload = IoState.from_state(state).model_dump_json(by_alias=True)

    assert '"voteCounts"' in payload
    assert '"votesCast"' in payload
    assert IoState.model_validate_json(payload).to_state().model_dump() == state.model_dump()


def test_empty_snapshot() -> None:
    snapshot = IoState.from_state(State.new())
    assert snapshot.model_dump() == IoState().model_dump()
    assert snapshot.to_state().model_dump() == State.new().model_dump()
