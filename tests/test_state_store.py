from __future__ import annotations

import logging

import pytest

from pydao.exceptions import LedgerInvariantError, LedgerNotInitializedError
from pydao.models.proposal import Proposal
from pydao.models.voter import Voter
from pydao.state.store import State, StateStore


def test_new_state_is_empty() -> None:
    state = State.new()
    assert state.admins == []
    assert state.voters == {}
    assert state.proposals == {}
    assert state.vote_counts == {}
    assert state.votes_cast == {}


def test_access_before_initialize_is_fatal() -> None:
    store = StateStore()
    assert not store.is_initialized

    with pytest.raises(LedgerNotInitializedError):
        store.state_mut()
    with pytest.raises(LedgerNotInitializedError):
        store.state_ref()
    with pytest.raises(LedgerNotInitializedError), store.transaction():
        pass


def test_not_initialized_is_an_invariant_fault() -> None:
    assert issubclass(LedgerNotInitializedError, LedgerInvariantError)
    assert issubclass(LedgerNotInitializedError, RuntimeError)


def test_mutable_and_read_access_share_one_instance() -> None:
    store = StateStore()
    state = store.initialize()

    assert store.is_initialized
    assert store.state_mut() is state
    assert store.state_ref() is state

    store.state_mut().voters["v1"] = Voter(name="N")
    assert store.state_ref().voters["v1"].name == "N"


def test_second_initialize_replaces_state_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    store = StateStore()
    first = store.initialize()
    first.proposals[1] = Proposal(id=1, description="Budget")
    first.vote_counts[1] = 0

    with caplog.at_level(logging.WARNING, logger="pydao.state.store"):
        second = store.initialize()

    assert second is not first
    assert store.state_ref().proposals == {}
    assert any("re-initialized" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize("lock", [True, False])
def test_transaction_yields_live_state(lock: bool) -> None:
    store = StateStore()
    store.initialize()

    with store.transaction(lock=lock) as state:
        state.admins.append("admin")

    assert store.state_ref().admins == ["admin"]


def test_transaction_lock_is_reentrant() -> None:
    store = StateStore()
    store.initialize()

    with store.transaction() as outer, store.transaction() as inner:
        assert outer is inner
