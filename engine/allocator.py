"""Seat allocation across all mentor groups."""

import logging
from typing import Dict, List, Optional, Set, Tuple

from models.group import Group
from models.stage import SearchStage
from models.assignment import AllocationResult, GroupError, SeatAssignment
from models.course import CourseType
from engine.topology import DEFAULT_TOPOLOGY, SeatTopology
from engine.placement import STAGES, find_run, skip_allowed
from engine.aggregator import build_result
from engine.explainer import explain_failure, explain_placement
from config.defaults import MIN_SEATED_WITH_OVERFLOW, SHARED_BLOCK_SIZE, UNPLACEABLE_REASON

logger = logging.getLogger(__name__)


def group_sort_key(group: Group) -> Tuple[int, int]:
    """Shared-only groups needing a full shared block go first, then larger groups."""
    counts = group.counts
    needs_shared_block = counts.shared >= SHARED_BLOCK_SIZE and counts.focused == 0
    return (0 if needs_shared_block else 1, -counts.total)


def sort_groups(groups: List[Group]) -> List[Group]:
    # sorted() is stable: ties keep input order
    return sorted(groups, key=group_sort_key)


def place_group(
    group: Group,
    topology: SeatTopology,
    occupied: Set[str],
    stages: List[SearchStage] = STAGES,
) -> Tuple[Optional[SearchStage], Optional[List[SeatAssignment]]]:
    """Try each relaxation stage in order; return the first stage that fits."""
    for stage in stages:
        placement = find_run(topology, group.counts, stage, occupied, group_id=group.group_id)
        if placement is not None:
            return stage, placement
        logger.debug("%s: no run at stage '%s'", group.label, stage.name)
    return None, None


def place_with_overflow(
    group: Group,
    topology: SeatTopology,
    occupied: Set[str],
    stages: List[SearchStage] = STAGES,
) -> Tuple[Optional[SearchStage], Optional[List[SeatAssignment]], List[str], int]:
    """Seat the group with the fewest robot students moved to the floor.

    The rest of the group still needs a contiguous run of at least
    MIN_SEATED_WITH_OVERFLOW students, searched at the stages that leave
    overflow seats alone. Moved students take the free overflow seats first;
    the remainder is floor headcount without a seat. Shared courses never
    overflow.

    Returns (stage, placement, overflow seat ids, floor headcount).
    """
    free_overflow = [sid for sid in topology.overflow_seat_ids if sid not in occupied]
    focused = group.counts.focused
    ordinary_stages = [s for s in stages if not s.allow_overflow]

    for moved in range(1, focused + 1):
        reduced = group.counts.with_count(CourseType.ROBOT, focused - moved)
        if reduced.total < MIN_SEATED_WITH_OVERFLOW:
            break
        for stage in ordinary_stages:
            placement = find_run(
                topology, reduced, stage, occupied,
                group_id=group.group_id,
                allow_skip=skip_allowed(reduced),
            )
            if placement is not None:
                seats = free_overflow[:moved]
                return stage, placement, seats, moved - len(seats)

    return None, None, [], 0


def assign_seats(
    groups: List[Group],
    topology: SeatTopology = DEFAULT_TOPOLOGY,
    stages: List[SearchStage] = STAGES,
) -> AllocationResult:
    """Seat every group, greedily and in priority order, without backtracking."""
    occupied: Set[str] = set()
    assignments: List[SeatAssignment] = []
    errors: List[GroupError] = []
    explanations: Dict[str, List[str]] = {}
    floor_counts: Dict[str, int] = {}

    ordered = sort_groups(groups)
    logger.debug("Placement order: %s", [f"{g.label}({g.counts.as_dict()})" for g in ordered])

    for group in ordered:
        if group.counts.is_empty():
            explanations[group.group_id] = explain_placement(group, "-", [])
            continue

        stage, placement = place_group(group, topology, occupied, stages)
        overflow_seats: List[str] = []
        floor_count = 0

        if placement is None:
            stage, placement, overflow_seats, floor_count = place_with_overflow(
                group, topology, occupied, stages,
            )

        if placement is None:
            logger.warning("%s: could not be seated (%s)", group.label, group.counts.as_dict())
            errors.append(GroupError(
                group_id=group.group_id,
                group_label=group.label,
                unassigned_counts=group.counts,
                reason=UNPLACEABLE_REASON,
            ))
            explanations[group.group_id] = explain_failure(
                group, [s.name for s in stages], UNPLACEABLE_REASON,
            )
            continue

        committed = list(placement) + [
            SeatAssignment(seat_id, group.group_id, CourseType.ROBOT) for seat_id in overflow_seats
        ]
        for a in committed:
            occupied.add(a.seat_id)
        assignments.extend(committed)

        if floor_count:
            floor_counts[group.group_id] = floor_count
        if overflow_seats or floor_count:
            logger.info(
                "%s: %d robot student(s) to the floor, seats %s",
                group.label, len(overflow_seats) + floor_count, overflow_seats,
            )
        logger.debug(
            "%s: seated at stage '%s': %s", group.label, stage.name,
            [f"{a.seat_id}({a.course.value})" for a in committed],
        )
        explanations[group.group_id] = explain_placement(
            group, stage.name, placement, overflow_seats, floor_count,
        )

    return build_result(assignments, errors, topology, explanations, floor_counts)
