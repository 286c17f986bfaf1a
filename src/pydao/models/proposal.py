"""Proposal record."""

from __future__ import annotations

from pydao.models._base import DaoBaseModel, ProposalId


class Proposal(DaoBaseModel):
    """A registered proposal, keyed by its caller-supplied ``id``."""

    id: ProposalId
    description: str
