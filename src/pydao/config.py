"""Ledger configuration for pydao."""

from __future__ import annotations

import dataclasses
import os
from enum import StrEnum
from typing import Any

from pydao.exceptions import DaoConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class TieBreak(StrEnum):
    """Which proposal wins when several share the maximum tally."""

    LOWEST_ID = "lowest_id"
    HIGHEST_ID = "highest_id"


def _parse_tie_break(value: str | TieBreak) -> TieBreak:
    if isinstance(value, TieBreak):
        return value
    try:
        return TieBreak(value.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in TieBreak)
        raise DaoConfigError(f"Unknown tie-break policy {value!r} (expected one of: {choices})") from None


@dataclasses.dataclass(frozen=True)
class DaoConfig:
    """Voting service configuration.

    Parameters
    ----------
    tie_break : TieBreak
        Policy used by ``conclude_voting`` when several proposals share
        the highest tally. Defaults to the lowest proposal id.
    lock_operations : bool
        Serialize every service operation behind the store's lock.
        Only worth disabling for strictly single-threaded hosts.
    log_rejected_votes : bool
        Emit a DEBUG record for every rejected vote together with the
        rejection reason.
    """

    tie_break: TieBreak = TieBreak.LOWEST_ID
    lock_operations: bool = True
    log_rejected_votes: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "tie_break", _parse_tie_break(self.tie_break))

    @classmethod
    def from_env(cls, **overrides: Any) -> DaoConfig:
        """Create configuration from environment variables.

        Reads ``DAO_TIE_BREAK``, ``DAO_LOCK_OPERATIONS`` and
        ``DAO_LOG_REJECTED_VOTES``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        tie_break_env = env.get("DAO_TIE_BREAK")
        if tie_break_env is not None and "tie_break" not in overrides:
            config_kwargs["tie_break"] = _parse_tie_break(tie_break_env)

        if "lock_operations" not in overrides:
            config_kwargs["lock_operations"] = _env_bool(env.get("DAO_LOCK_OPERATIONS"), True)

        if "log_rejected_votes" not in overrides:
            config_kwargs["log_rejected_votes"] = _env_bool(env.get("DAO_LOG_REJECTED_VOTES"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
