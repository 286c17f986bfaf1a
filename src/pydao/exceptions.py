"""Custom exception hierarchy for pydao."""

from __future__ import annotations


class DaoError(Exception):
    """Base exception for all pydao errors."""


class DaoConfigError(DaoError):
    """Invalid or missing configuration."""


class LedgerInvariantError(DaoError, RuntimeError):
    """An internal ledger invariant is broken.

    This is a fatal fault, not an expected outcome: it means state was
    corrupted or accessed out of order elsewhere in the host. The failing
    operation is aborted without touching the ledger.
    """

    def __init__(
        self,
        message: str,
        *,
        proposal_id: int | None = None,
    ) -> None:
        self.proposal_id = proposal_id
        super().__init__(message)


class LedgerNotInitializedError(LedgerInvariantError):
    """The state store was accessed before ``initialize()`` was called."""
