"""Voting service: the public operation surface of the ledger."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import Any

from pydao.config import DaoConfig, TieBreak
from pydao.exceptions import LedgerInvariantError
from pydao.models._base import ACTOR_ID_ADAPTER, PROPOSAL_ID_ADAPTER
from pydao.models.proposal import Proposal
from pydao.models.vote import VoteOutcome
from pydao.models.voter import Voter
from pydao.state.snapshot import IoState
from pydao.state.store import State, StateStore

_logger = logging.getLogger(__name__)


class VotingService:
    """Registration, voting and query operations over one :class:`StateStore`.

    Usage::

        store = StateStore()
        store.initialize()
        service = VotingService(store)
        service.register_proposal(1, "Budget")
        service.register_voter("alice", "Alice")
        service.vote("alice", 1)

    Each method runs as one transaction on the store. Rejected votes are
    reported through :class:`VoteOutcome` and never raise.
    """

    def __init__(
        self,
        store: StateStore,
        *,
        config: DaoConfig | None = None,
    ) -> None:
        self._store = store
        self._config = config or DaoConfig()

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def config(self) -> DaoConfig:
        return self._config

    @contextlib.contextmanager
    def _transaction(self) -> Iterator[State]:
        with self._store.transaction(lock=self._config.lock_operations) as state:
            yield state

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def register_voter(self, actor: Any, name: str) -> None:
        """Register *actor* as an eligible voter, overwriting any previous entry."""
        actor_id = ACTOR_ID_ADAPTER.validate_python(actor)
        voter = Voter(name=name, eligible=True)
        with self._transaction() as state:
            state.voters[actor_id] = voter
        _logger.debug("Voter registered actor=%s", actor_id)

    def register_proposal(self, proposal_id: int, description: str) -> None:
        """Register a proposal and (re)set its tally to zero.

        Re-registering an id discards its tally but leaves voters'
        histories alone, so those voters still cannot vote on it again.
        """
        proposal = Proposal(id=proposal_id, description=description)
        with self._transaction() as state:
            if proposal.id in state.proposals:
                _logger.debug(
                    "Proposal re-registered id=%d; tally %d reset to 0",
                    proposal.id,
                    state.vote_counts.get(proposal.id, 0),
                )
            state.proposals[proposal.id] = proposal
            state.vote_counts[proposal.id] = 0
        _logger.debug("Proposal registered id=%d", proposal.id)

    def vote(self, voter: Any, proposal_id: int) -> VoteOutcome:
        """Cast *voter*'s vote for *proposal_id*.

        The vote counts only when the voter is registered, eligible and
        has not voted on this proposal yet. Otherwise nothing changes and
        the returned outcome names the reason.

        Raises
        ------
        LedgerInvariantError
            The vote is valid but the proposal has no tally entry.
        """
        voter_id = ACTOR_ID_ADAPTER.validate_python(voter)
        pid = PROPOSAL_ID_ADAPTER.validate_python(proposal_id)

        with self._transaction() as state:
            history = state.votes_cast.get(voter_id, [])
            voter_info = state.voters.get(voter_id)

            if voter_info is None:
                outcome = VoteOutcome.UNKNOWN_VOTER
            elif not voter_info.eligible:
                outcome = VoteOutcome.INELIGIBLE
            elif pid in history:
                outcome = VoteOutcome.ALREADY_VOTED
            else:
                if pid not in state.vote_counts:
                    raise LedgerInvariantError(f"Proposal not found: {pid}", proposal_id=pid)
                state.vote_counts[pid] += 1
                state.votes_cast[voter_id] = [*history, pid]
                _logger.debug(
                    "Vote accepted voter=%s proposal=%d tally=%d",
                    voter_id,
                    pid,
                    state.vote_counts[pid],
                )
                return VoteOutcome.ACCEPTED

        if self._config.log_rejected_votes:
            _logger.debug("Vote rejected voter=%s proposal=%d reason=%s", voter_id, pid, outcome)
        return outcome

    def remove_voter(self, voter: Any) -> None:
        """Forget a voter and their history. Tallies are left as they are."""
        voter_id = ACTOR_ID_ADAPTER.validate_python(voter)
        with self._transaction() as state:
            removed = state.voters.pop(voter_id, None)
            state.votes_cast.pop(voter_id, None)
        if removed is not None:
            _logger.debug("Voter removed actor=%s", voter_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_proposals(self) -> list[Proposal]:
        with self._transaction() as state:
            return list(state.proposals.values())

    def get_vote_counts(self) -> dict[int, int]:
        with self._transaction() as state:
            return dict(state.vote_counts)

    def get_voter_info(self, voter: Any) -> Voter | None:
        voter_id = ACTOR_ID_ADAPTER.validate_python(voter)
        with self._transaction() as state:
            return state.voters.get(voter_id)

    def get_votes_cast(self, voter: Any) -> list[int]:
        """Proposal ids *voter* has voted on (empty for unknown voters)."""
        voter_id = ACTOR_ID_ADAPTER.validate_python(voter)
        with self._transaction() as state:
            return list(state.votes_cast.get(voter_id, []))

    def get_state(self) -> IoState:
        """Flattened snapshot of the whole ledger."""
        with self._transaction() as state:
            return IoState.from_state(state)

    def conclude_voting(self) -> tuple[int, int] | None:
        """Return ``(proposal_id, tally)`` with the highest tally.

        Ties go to the lowest or highest id according to
        :attr:`DaoConfig.tie_break`. ``None`` when no proposal exists.
        """
        with self._transaction() as state:
            if not state.vote_counts:
                return None
            if self._config.tie_break is TieBreak.HIGHEST_ID:
                winner = max(state.vote_counts.items(), key=lambda item: (item[1], item[0]))
            else:
                winner = max(state.vote_counts.items(), key=lambda item: (item[1], -item[0]))
        _logger.debug("Voting concluded winner=%d tally=%d", winner[0], winner[1])
        return winner
