"""Pydantic models for ledger records."""

from pydao.models._base import ActorId, DaoBaseModel, ProposalId, normalize_actor_id
from pydao.models.proposal import Proposal
from pydao.models.vote import VoteOutcome
from pydao.models.voter import Voter

__all__ = [
    "ActorId",
    "DaoBaseModel",
    "Proposal",
    "ProposalId",
    "VoteOutcome",
    "Voter",
    "normalize_actor_id",
]
