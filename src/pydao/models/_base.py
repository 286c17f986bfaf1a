"""Base model and shared identity types for ledger records.

Every ledger record inherits from :class:`DaoBaseModel` which provides:

* ``alias_generator=to_camel`` so external payloads use camelCase keys
  while Python code keeps snake_case fields.
* ``frozen=True`` so records handed out by queries are safe to share:
  callers cannot mutate the ledger through them.

:data:`ActorId` and :data:`ProposalId` are the two key types used across
the ledger.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

U64_MAX = 2**64 - 1


def normalize_actor_id(value: Any) -> str:
    """Normalize an opaque actor identity to its canonical string form.

    ``bytes`` become ``0x``-prefixed lowercase hex, ``int`` its decimal
    string and ``str`` is stripped. Empty identities are rejected.
    """
    if isinstance(value, (bytes, bytearray)):
        if not value:
            raise ValueError("actor id must be non-empty")
        return "0x" + bytes(value).hex()
    if isinstance(value, bool):
        raise ValueError("actor id must not be a boolean")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("actor id must be non-negative")
        return str(value)
    if isinstance(value, str):
        actor = value.strip()
        if not actor:
            raise ValueError("actor id must be non-empty")
        return actor
    raise ValueError(f"unsupported actor id type: {type(value).__name__}")


ActorId = Annotated[str, BeforeValidator(normalize_actor_id)]
"""Opaque voter/admin identity, normalized to a non-empty string."""

ProposalId = Annotated[int, Field(ge=0, le=U64_MAX)]
"""Caller-supplied proposal identifier (unsigned 64-bit)."""

ACTOR_ID_ADAPTER: TypeAdapter[str] = TypeAdapter(ActorId)
PROPOSAL_ID_ADAPTER: TypeAdapter[int] = TypeAdapter(ProposalId)


class DaoBaseModel(BaseModel):
    """Base for ledger records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
