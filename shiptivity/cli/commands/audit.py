"""Ranking audit command for the shiptivity CLI."""

import json
from typing import TYPE_CHECKING

from shiptivity.audit import audit_lanes

if TYPE_CHECKING:
    from shiptivity.storage import SQLiteClientStore


def cmd_audit(args, store: "SQLiteClientStore") -> int:
    """Check every lane for duplicate or missing priorities.

    Returns 1 when violations are found so the CLI can exit non-zero.
    """
    report = audit_lanes(store)
    if getattr(args, "json", False):
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.summary())
    return 0 if report.ok else 1
