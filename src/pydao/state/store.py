"""In-memory ledger state store.

The host creates one :class:`StateStore`, calls :meth:`StateStore.initialize`
once, and hands the store to the voting service. Every operation then runs
inside :meth:`StateStore.transaction` so a transition is either fully
applied or not visible at all.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from pydao.exceptions import LedgerNotInitializedError
from pydao.models._base import ActorId, ProposalId
from pydao.models.proposal import Proposal
from pydao.models.voter import Voter

_logger = logging.getLogger(__name__)


class State(BaseModel):
    """All ledger collections.

    Invariants:
    - ``vote_counts`` has exactly the keys of ``proposals``.
    - every id in a ``votes_cast`` entry is a registered proposal and
      appears at most once per voter.

    ``admins`` is carried as data only; no operation reads it.
    """

    model_config = ConfigDict(extra="forbid")

    admins: list[ActorId] = Field(default_factory=list)
    voters: dict[ActorId, Voter] = Field(default_factory=dict)
    proposals: dict[ProposalId, Proposal] = Field(default_factory=dict)
    vote_counts: dict[ProposalId, int] = Field(default_factory=dict)
    votes_cast: dict[ActorId, list[ProposalId]] = Field(default_factory=dict)

    @classmethod
    def new(cls) -> State:
        return cls()


class StateStore:
    """Owner of the single ledger :class:`State` instance."""

    def __init__(self) -> None:
        self._state: State | None = None
        self._lock = threading.RLock()

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    def initialize(self) -> State:
        """Create an empty state.

        Calling this again replaces the existing state without any
        protection; the overwrite is logged at WARNING level.
        """
        with self._lock:
            if self._state is not None:
                _logger.warning(
                    "State store re-initialized; discarding %d voters and %d proposals",
                    len(self._state.voters),
                    len(self._state.proposals),
                )
            self._state = State.new()
            _logger.debug("State store initialized")
            return self._state

    def state_mut(self) -> State:
        """Return the mutable state instance."""
        if self._state is None:
            raise LedgerNotInitializedError("The state is not initialized")
        return self._state

    def state_ref(self) -> State:
        """Return the state instance for read-only use.

        This is the same object as :meth:`state_mut`; callers must not
        mutate it.
        """
        if self._state is None:
            raise LedgerNotInitializedError("The state is not initialized")
        return self._state

    @contextlib.contextmanager
    def transaction(self, *, lock: bool = True) -> Iterator[State]:
        """Yield the state for the duration of one whole operation.

        With ``lock=True`` the store's re-entrant lock is held until the
        block exits, so concurrent callers never observe a partially
        applied transition.
        """
        if not lock:
            yield self.state_mut()
            return
        with self._lock:
            yield self.state_mut()
