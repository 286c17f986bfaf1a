"""pydao - In-memory voting ledger for proposals, voters and tallies."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydao")
except PackageNotFoundError:
    __version__ = "0+local"
from pydao.config import DaoConfig, TieBreak
from pydao.exceptions import (
    DaoConfigError,
    DaoError,
    LedgerInvariantError,
    LedgerNotInitializedError,
)
from pydao.models import ActorId, Proposal, ProposalId, VoteOutcome, Voter
from pydao.service import VotingService
from pydao.state.snapshot import IoState
from pydao.state.store import State, StateStore

__all__ = [
    "__version__",
    "ActorId",
    "DaoConfig",
    "DaoConfigError",
    "DaoError",
    "IoState",
    "LedgerInvariantError",
    "LedgerNotInitializedError",
    "Proposal",
    "ProposalId",
    "State",
    "StateStore",
    "TieBreak",
    "VoteOutcome",
    "Voter",
    "VotingService",
]
