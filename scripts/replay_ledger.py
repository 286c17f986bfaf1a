#!/usr/bin/env python3
"""Replay a JSON list of ledger operations and print the final state.

The input file holds a JSON array of operations, for example::

    [
      {"op": "register_proposal", "id": 1, "description": "Budget"},
      {"op": "register_voter", "actor": "v1", "name": "N"},
      {"op": "vote", "voter": "v1", "proposal_id": 1},
      {"op": "remove_voter", "actor": "v1"}
    ]

Usage
-----
::

    python scripts/replay_ledger.py ops.json
    python scripts/replay_ledger.py ops.json --conclude --output state.json

Options::

    --conclude          Also report the winning proposal
    --output FILE       Write output to FILE instead of stdout
    --verbose, -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydao import DaoConfig, StateStore, VotingService  # noqa: E402


def _apply(service: VotingService, op: dict[str, Any]) -> str | None:
    """Apply one operation; return the vote outcome for ``vote`` ops."""
    kind = op.get("op")
    if kind == "register_voter":
        service.register_voter(op["actor"], op["name"])
    elif kind == "register_proposal":
        service.register_proposal(op["id"], op["description"])
    elif kind == "vote":
        return str(service.vote(op["voter"], op["proposal_id"]))
    elif kind == "remove_voter":
        service.remove_voter(op["actor"])
    else:
        raise SystemExit(f"unknown operation: {kind!r}")
    return None


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay ledger operations and dump the resulting state.")
    parser.add_argument("ops", help="JSON file with a list of operations")
    parser.add_argument("--conclude", action="store_true", help="Also report the winning proposal")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    ops = json.loads(Path(args.ops).read_text(encoding="utf-8"))
    if not isinstance(ops, list):
        raise SystemExit("operations file must contain a JSON array")

    store = StateStore()
    store.initialize()
    service = VotingService(store, config=DaoConfig.from_env())

    outcomes: list[dict[str, Any]] = []
    for index, op in enumerate(ops):
        outcome = _apply(service, op)
        if outcome is not None:
            outcomes.append({"index": index, "outcome": outcome})

    result: dict[str, Any] = {
        "state": service.get_state().model_dump(mode="json", by_alias=True),
        "votes": outcomes,
    }
    if args.conclude:
        winner = service.conclude_voting()
        result["winner"] = None if winner is None else {"proposalId": winner[0], "tally": winner[1]}

    payload = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"JSON written to {args.output}", file=sys.stderr)
    else:
        print(payload)


if __name__ == "__main__":
    main()
