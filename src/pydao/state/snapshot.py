"""External snapshot of the ledger state.

Each keyed collection is flattened into a list of ``(key, value)`` pairs so
the snapshot can be handed to any transport. The conversion is lossless in
both directions; pair order is not significant.
"""

from __future__ import annotations

import logging

from pydantic import Field

from pydao.models._base import ActorId, DaoBaseModel, ProposalId
from pydao.models.proposal import Proposal
from pydao.models.voter import Voter
from pydao.state.store import State

_logger = logging.getLogger(__name__)


class IoState(DaoBaseModel):
    """Flattened, immutable view of a :class:`State`."""

    admins: list[ActorId] = Field(default_factory=list)
    voters: list[tuple[ActorId, Voter]] = Field(default_factory=list)
    proposals: list[tuple[ProposalId, Proposal]] = Field(default_factory=list)
    vote_counts: list[tuple[ProposalId, int]] = Field(default_factory=list)
    votes_cast: list[tuple[ActorId, list[ProposalId]]] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: State) -> IoState:
        """Flatten *state*. Nested containers are copied."""
        snapshot = cls(
            admins=list(state.admins),
            voters=list(state.voters.items()),
            proposals=list(state.proposals.items()),
            vote_counts=list(state.vote_counts.items()),
            votes_cast=[(actor, list(history)) for actor, history in state.votes_cast.items()],
        )
        _logger.debug(
            "Snapshot built voters=%d proposals=%d histories=%d",
            len(snapshot.voters),
            len(snapshot.proposals),
            len(snapshot.votes_cast),
        )
        return snapshot

    def to_state(self) -> State:
        """Rebuild a mutable :class:`State` holding every pair of this snapshot."""
        return State(
            admins=list(self.admins),
            voters=dict(self.voters),
            proposals=dict(self.proposals),
            vote_counts=dict(self.vote_counts),
            votes_cast={actor: list(history) for actor, history in self.votes_cast},
        )
