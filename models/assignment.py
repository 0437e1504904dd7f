from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.course import CourseCounts, CourseType


@dataclass(frozen=True)
class SeatAssignment:
    seat_id: str
    group_id: str
    course: CourseType


@dataclass(frozen=True)
class OverflowContribution:
    group_id: str
    count: int


@dataclass
class OverflowAllocation:
    """Use of the overflow ("floor") seats in one run."""
    owner_group_id: str                 # first group seen on an overflow seat
    total: int
    contributors: List[OverflowContribution] = field(default_factory=list)
    seat_ids: List[str] = field(default_factory=list)


@dataclass
class GroupError:
    group_id: str
    group_label: str
    unassigned_counts: CourseCounts
    reason: str


@dataclass
class AllocationResult:
    assignments: List[SeatAssignment] = field(default_factory=list)
    overflow: Optional[OverflowAllocation] = None
    errors: List[GroupError] = field(default_factory=list)
    explanations: Dict[str, List[str]] = field(default_factory=dict)

    def seat_map(self) -> Dict[str, SeatAssignment]:
        return {a.seat_id: a for a in self.assignments}

    def for_group(self, group_id: str) -> List[SeatAssignment]:
        return [a for a in self.assignments if a.group_id == group_id]

    def to_dict(self) -> dict:
        """Plain structure for display or export."""
        overflow = None
        if self.overflow:
            overflow = {
                "owner_group_id": self.overflow.owner_group_id,
                "total": self.overflow.total,
                "contributors": [
                    {"group_id": c.group_id, "count": c.count}
                    for c in self.overflow.contributors
                ],
                "seat_ids": list(self.overflow.seat_ids),
            }
        return {
            "assignments": [
                {"seat_id": a.seat_id, "group_id": a.group_id, "course": a.course.value}
                for a in self.assignments
            ],
            "overflow": overflow,
            "errors": [
                {
                    "group_id": e.group_id,
                    "group_label": e.group_label,
                    "unassigned_counts": e.unassigned_counts.as_dict(),
                    "reason": e.reason,
                }
                for e in self.errors
            ],
        }
