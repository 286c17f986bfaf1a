"""Voter record."""

from __future__ import annotations

from pydao.models._base import DaoBaseModel


class Voter(DaoBaseModel):
    """A registered voter.

    Eligibility is always ``True`` at registration; nothing in the
    ledger currently revokes it.
    """

    name: str
    eligible: bool = True
