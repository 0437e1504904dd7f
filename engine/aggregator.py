"""Builds the final allocation result and summary views of it."""

from typing import Dict, List, Optional

from models.course import CourseCounts, CourseType
from models.group import Group
from models.assignment import (
    AllocationResult, GroupError, OverflowAllocation, OverflowContribution, SeatAssignment,
)
from engine.topology import SeatTopology


def build_overflow(
    assignments: List[SeatAssignment],
    topology: SeatTopology,
    floor_counts: Optional[Dict[str, int]] = None,
) -> Optional[OverflowAllocation]:
    """Summarize overflow use; None when nobody overflowed.

    Each group contributes the overflow seats it holds plus its floor
    headcount, the overflow students left without a seat once the overflow
    seats ran out. Groups are listed in the order they first overflowed.
    """
    contributions: Dict[str, int] = {}
    seat_ids: List[str] = []

    for a in assignments:
        if not topology.is_overflow(a.seat_id):
            continue
        contributions[a.group_id] = contributions.get(a.group_id, 0) + 1
        seat_ids.append(a.seat_id)

    for group_id, count in (floor_counts or {}).items():
        if count > 0:
            contributions[group_id] = contributions.get(group_id, 0) + count

    if not contributions:
        return None

    return OverflowAllocation(
        owner_group_id=next(iter(contributions)),
        total=sum(contributions.values()),
        contributors=[OverflowContribution(gid, count) for gid, count in contributions.items()],
        seat_ids=seat_ids,
    )


def floor_counts_of(result: AllocationResult, topology: SeatTopology) -> Dict[str, int]:
    """Overflow headcount per group that holds no overflow seat."""
    if result.overflow is None:
        return {}
    counts = {}
    for c in result.overflow.contributors:
        held = sum(
            1 for a in result.assignments
            if a.group_id == c.group_id and topology.is_overflow(a.seat_id)
        )
        if c.count > held:
            counts[c.group_id] = c.count - held
    return counts


def build_result(
    assignments: List[SeatAssignment],
    errors: List[GroupError],
    topology: SeatTopology,
    explanations: Optional[Dict[str, List[str]]] = None,
    floor_counts: Optional[Dict[str, int]] = None,
) -> AllocationResult:
    return AllocationResult(
        assignments=list(assignments),
        overflow=build_overflow(assignments, topology, floor_counts),
        errors=list(errors),
        explanations=dict(explanations or {}),
    )


def headcount_totals(groups: List[Group]) -> dict:
    """Per-course totals across all groups, plus the grand total."""
    totals = {course.value: sum(g.counts.get(course) for g in groups) for course in CourseType}
    totals["total"] = sum(totals.values())
    return totals


def _counts_from(assignments: List[SeatAssignment]) -> CourseCounts:
    values = {course.value: 0 for course in CourseType}
    for a in assignments:
        values[a.course.value] += 1
    return CourseCounts(**values)


def accounting_summary(
    groups: List[Group],
    result: AllocationResult,
    topology: SeatTopology,
) -> List[dict]:
    """Per group: requested, seated on regular seats, overflow and unmet counts.

    Overflow covers both overflow seats held and floor headcount without a
    seat. For every group and course, seated + overflow + unmet equals
    requested.
    """
    errors = {e.group_id: e for e in result.errors}
    floor = floor_counts_of(result, topology)
    rows = []
    for group in groups:
        held = result.for_group(group.group_id)
        seated = _counts_from([a for a in held if not topology.is_overflow(a.seat_id)])
        overflow = sum(1 for a in held if topology.is_overflow(a.seat_id)) + floor.get(group.group_id, 0)
        error = errors.get(group.group_id)
        rows.append({
            "group_id": group.group_id,
            "label": group.label,
            "requested": group.counts,
            "seated": seated,
            "overflow": overflow,
            "unmet": error.unassigned_counts if error else CourseCounts(),
            "status": "error" if error else ("overflow" if overflow else "seated"),
        })
    return rows
