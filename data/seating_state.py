"""In-memory seating state and its transitions.

Every function returns a new SeatingState; the input is never mutated.
Any edit to the groups discards the last computed result.
"""

import re
from dataclasses import dataclass, field, replace
from typing import List, Optional

from models.course import CourseCounts, CourseType
from models.group import Group
from models.assignment import AllocationResult, SeatAssignment
from models.errors import UnknownSeatError
from engine.topology import DEFAULT_TOPOLOGY, SeatTopology
from engine.aggregator import build_overflow, floor_counts_of

GROUP_ID_PATTERN = re.compile(r"mentor-(\d+)")


@dataclass(frozen=True)
class SeatingState:
    groups: List[Group] = field(default_factory=list)
    result: Optional[AllocationResult] = None
    memo: str = ""


def make_group(number: int) -> Group:
    return Group(group_id=f"mentor-{number}", label=f"Mentor {number}", counts=CourseCounts())


def group_number(group_id: str) -> Optional[int]:
    match = GROUP_ID_PATTERN.fullmatch(group_id)
    return int(match.group(1)) if match else None


def next_group_number(groups: List[Group]) -> int:
    """Smallest positive number not used by an existing mentor-N id."""
    used = {group_number(g.group_id) for g in groups}
    number = 1
    while number in used:
        number += 1
    return number


def initial_state() -> SeatingState:
    return SeatingState(groups=[make_group(1)])


def add_group(state: SeatingState) -> SeatingState:
    groups = state.groups + [make_group(next_group_number(state.groups))]
    return replace(state, groups=groups, result=None)


def remove_group(state: SeatingState, group_id: str) -> SeatingState:
    """Remove a group; the last remaining group is never removed."""
    if len(state.groups) <= 1:
        return state
    groups = [g for g in state.groups if g.group_id != group_id]
    return replace(state, groups=groups, result=None)


def update_count(state: SeatingState, group_id: str, course: CourseType, value: int) -> SeatingState:
    groups = [
        replace(g, counts=g.counts.with_count(course, value)) if g.group_id == group_id else g
        for g in state.groups
    ]
    return replace(state, groups=groups, result=None)


def rename_group(state: SeatingState, group_id: str, label: str) -> SeatingState:
    groups = [replace(g, label=label) if g.group_id == group_id else g for g in state.groups]
    return replace(state, groups=groups, result=None)


def set_groups(state: SeatingState, groups: List[Group]) -> SeatingState:
    return replace(state, groups=list(groups), result=None)


def set_result(state: SeatingState, result: AllocationResult) -> SeatingState:
    return replace(state, result=result)


def reset_result(state: SeatingState) -> SeatingState:
    return replace(state, result=None)


def manual_assign_seat(
    state: SeatingState,
    seat_id: str,
    group_id: Optional[str],
    course: CourseType,
    topology: SeatTopology = DEFAULT_TOPOLOGY,
) -> SeatingState:
    """Hand-edit one seat: replace its assignment, or clear it when group_id is None.

    Overflow is rebuilt from the edited seats, keeping floor headcount from
    the last run. A group that holds seats after the edit no longer counts
    as errored, so its GroupError is dropped.
    """
    if seat_id not in topology:
        raise UnknownSeatError(seat_id)
    if group_id is not None and not topology.accepts(seat_id, course):
        raise ValueError(f"Seat {seat_id} does not accept {CourseType(course).value} students.")

    current = state.result or AllocationResult()
    assignments = [a for a in current.assignments if a.seat_id != seat_id]
    if group_id is not None:
        assignments.append(SeatAssignment(seat_id, group_id, CourseType(course)))

    seated = {a.group_id for a in assignments}
    result = replace(
        current,
        assignments=assignments,
        overflow=build_overflow(assignments, topology, floor_counts_of(current, topology)),
        errors=[e for e in current.errors if e.group_id not in seated],
    )
    return replace(state, result=result)


def update_memo(state: SeatingState, memo: str) -> SeatingState:
    return replace(state, memo=memo)


def reset_all() -> SeatingState:
    return initial_state()
