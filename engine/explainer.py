"""Generates human-readable explanations for seat placements."""

from typing import List

from models.group import Group
from models.assignment import SeatAssignment


def _describe_counts(group: Group) -> str:
    c = group.counts
    return f"Robot {c.robot}, Game {c.game}, Fab {c.fab}, Prime {c.prime} (total {c.total})"


def explain_placement(
    group: Group,
    stage_name: str,
    placement: List[SeatAssignment],
    overflow_seat_ids: List[str] = None,
    floor_count: int = 0,
) -> List[str]:
    """Produce step-by-step explanation for a successful placement."""
    overflow_seat_ids = overflow_seat_ids or []
    steps = [f"Step 1 - Request: {_describe_counts(group)}"]

    if not placement and not overflow_seat_ids:
        steps.append("Step 2 - Nothing to place: group has no students.")
        return steps

    seats = ", ".join(f"{a.seat_id}({a.course.value})" for a in placement)
    steps.append(f"Step 2 - Contiguous run found at stage '{stage_name}': {seats or '-'}")

    if overflow_seat_ids or floor_count:
        moved = len(overflow_seat_ids) + floor_count
        seats = ", ".join(overflow_seat_ids) or "none free"
        steps.append(
            f"Step 3 - Overflow: {moved} robot student(s) moved to the floor "
            f"(floor seats: {seats}; without a seat: {floor_count})"
        )

    return steps


def explain_failure(group: Group, stages_tried: List[str], reason: str) -> List[str]:
    """Produce explanation for a group that received no seats."""
    return [
        f"Step 1 - Request: {_describe_counts(group)}",
        f"Step 2 - No contiguous run at stages: {', '.join(stages_tried)}",
        "Step 3 - Overflow could not absorb the remainder "
        "(only robot students may use the floor seats)",
        f"Result: {reason}",
    ]
