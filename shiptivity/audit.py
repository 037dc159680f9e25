"""Board invariant audit.

Checks that every lane is densely ranked: priorities are exactly 1..N for
N members, with no duplicates.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .types import LANE_ORDER, Lane


@dataclass
class LaneViolation:
    """A single ranking problem found in a lane."""

    lane: Lane
    kind: str  # "duplicate", "gap" or "out_of_range"
    priority: int
    client_ids: List[int] = field(default_factory=list)

    def describe(self) -> str:
        if self.kind == "duplicate":
            return (
                f"{self.lane.value}: priority {self.priority} held by "
                f"{len(self.client_ids)} clients {self.client_ids}"
            )
        if self.kind == "gap":
            return f"{self.lane.value}: no client at priority {self.priority}"
        return f"{self.lane.value}: client(s) {self.client_ids} at out-of-range priority {self.priority}"


@dataclass
class AuditReport:
    """Result of auditing every lane."""

    lane_sizes: Dict[Lane, int] = field(default_factory=dict)
    violations: List[LaneViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def summary(self) -> str:
        lines = [
            f"{lane.value}: {self.lane_sizes.get(lane, 0)} client(s)" for lane in LANE_ORDER
        ]
        if self.ok:
            lines.append("All lanes densely ranked.")
        else:
            lines.append(f"{len(self.violations)} violation(s):")
            lines.extend(f"  - {v.describe()}" for v in self.violations)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "lane_sizes": {lane.value: size for lane, size in self.lane_sizes.items()},
            "violations": [
                {
                    "lane": v.lane.value,
                    "kind": v.kind,
                    "priority": v.priority,
                    "client_ids": v.client_ids,
                }
                for v in self.violations
            ],
        }


def audit_lane(lane: Lane, members: List[tuple]) -> List[LaneViolation]:
    """Check one lane given its ``(id, priority)`` pairs."""
    size = len(members)
    by_priority: Dict[int, List[int]] = {}
    for client_id, priority in members:
        by_priority.setdefault(priority, []).append(client_id)

    violations = []
    for priority in sorted(by_priority):
        ids = sorted(by_priority[priority])
        if priority < 1 or priority > size:
            violations.append(LaneViolation(lane, "out_of_range", priority, ids))
        elif len(ids) > 1:
            violations.append(LaneViolation(lane, "duplicate", priority, ids))
    for priority in range(1, size + 1):
        if priority not in by_priority:
            violations.append(LaneViolation(lane, "gap", priority))
    return violations


def audit_lanes(store) -> AuditReport:
    """Audit every lane of ``store``."""
    report = AuditReport()
    for lane in LANE_ORDER:
        members = store.lane_priorities(lane)
        report.lane_sizes[lane] = len(members)
        report.violations.extend(audit_lane(lane, members))
    return report
