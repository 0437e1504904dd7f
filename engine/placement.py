"""Contiguous-run placement search for a single group."""

import logging
from typing import AbstractSet, List, Optional

from models.course import CourseCounts, CourseType
from models.seat import SeatFamily
from models.stage import SearchStage
from models.assignment import SeatAssignment
from engine.topology import SeatTopology
from config.defaults import SHARED_COURSE_ORDER, SKIP_JUMP_MAX_FOCUSED

logger = logging.getLogger(__name__)


# Relaxation stages, each strictly more permissive than the previous one
HIGH_PRIORITY_STAGE = SearchStage("high-priority", allow_low_priority=False, allow_overflow=False)
LOW_PRIORITY_STAGE = SearchStage("low-priority", allow_low_priority=True, allow_overflow=False)
OVERFLOW_STAGE = SearchStage("overflow", allow_low_priority=True, allow_overflow=True)

STAGES = [HIGH_PRIORITY_STAGE, LOW_PRIORITY_STAGE, OVERFLOW_STAGE]


def skip_allowed(required: CourseCounts) -> bool:
    """Jumping over the low-priority seats only pays off while robot demand has slack."""
    return required.focused <= SKIP_JUMP_MAX_FOCUSED


def _usable(topology: SeatTopology, seat_id: str, stage: SearchStage, occupied: AbstractSet[str]) -> bool:
    if seat_id in occupied:
        return False
    if topology.is_overflow(seat_id) and not stage.allow_overflow:
        return False
    if topology.is_low_priority(seat_id) and not stage.allow_low_priority:
        return False
    return True


def _jump_target(
    topology: SeatTopology,
    candidates: List[str],
    stage: SearchStage,
    occupied: AbstractSet[str],
    allow_skip: bool,
) -> Optional[str]:
    """Seat to substitute for a forbidden low-priority seat, if the run can jump over it."""
    if not candidates or not allow_skip:
        return None
    prev = candidates[-1]
    target = topology.skip_target(prev)
    if target is None or target in candidates:
        return None
    if not topology.is_adjacent(prev, target, allow_skip=True):
        return None
    if not _usable(topology, target, stage, occupied):
        return None
    return target


def try_from_offset(
    topology: SeatTopology,
    start: int,
    total_needed: int,
    stage: SearchStage,
    occupied: AbstractSet[str],
    allow_skip: bool = True,
) -> Optional[List[str]]:
    """Walk clockwise from `start` collecting a contiguous run of free seats.

    Returns the seat ids of the first run that reaches `total_needed`, or None.
    A contiguity break restarts the run at the current seat rather than
    aborting the walk. The walk covers at most one lap.
    """
    n = len(topology)
    candidates: List[str] = []
    idx = start
    steps = 0

    while steps < n and len(candidates) < total_needed:
        seat_id = topology.seat_at(idx)
        steps += 1

        if seat_id in occupied or (topology.is_overflow(seat_id) and not stage.allow_overflow):
            candidates = []
            idx += 1
            continue

        if topology.is_low_priority(seat_id) and not stage.allow_low_priority:
            target = _jump_target(topology, candidates, stage, occupied, allow_skip)
            if target is None:
                candidates = []
                idx += 1
                continue
            # continue the walk just past the jump target
            distance = (topology.clockwise_index(target) - topology.clockwise_index(seat_id)) % n
            candidates.append(target)
            idx += distance + 1
            steps += distance
            continue

        if not candidates or topology.is_adjacent(candidates[-1], seat_id, allow_skip):
            candidates.append(seat_id)
        else:
            candidates = [seat_id]
        idx += 1

    if len(candidates) < total_needed:
        return None
    return candidates


def arrange_seats(
    topology: SeatTopology,
    seats: List[str],
    required: CourseCounts,
    group_id: str = "",
) -> Optional[List[SeatAssignment]]:
    """Fill a run in clockwise order: robot on focused seats, shared courses in fixed order.

    Seats left over in either family stay free. Returns None when the run has
    the wrong family mix for the group.
    """
    focused_seats = sum(1 for s in seats if topology.course_family(s) is SeatFamily.FOCUSED)
    shared_seats = sum(1 for s in seats if topology.course_family(s) is SeatFamily.SHARED)
    if focused_seats < required.focused or shared_seats < required.shared:
        return None

    remaining = {course: required.get(course) for course in CourseType}
    shared_order = [CourseType(c) for c in SHARED_COURSE_ORDER]
    placement: List[SeatAssignment] = []

    for seat_id in seats:
        family = topology.course_family(seat_id)
        if family is SeatFamily.FOCUSED:
            if remaining[CourseType.ROBOT] > 0:
                placement.append(SeatAssignment(seat_id, group_id, CourseType.ROBOT))
                remaining[CourseType.ROBOT] -= 1
        elif family is SeatFamily.SHARED:
            for course in shared_order:
                if remaining[course] > 0:
                    placement.append(SeatAssignment(seat_id, group_id, course))
                    remaining[course] -= 1
                    break

    if any(remaining.values()):
        return None
    return placement


def _uses_low_priority_pair(topology: SeatTopology, placement: List[SeatAssignment]) -> bool:
    low = topology.low_priority_seat_ids
    if len(low) < 2:
        return False
    placed = {a.seat_id for a in placement}
    return all(seat_id in placed for seat_id in low)


def find_run(
    topology: SeatTopology,
    required: CourseCounts,
    stage: SearchStage,
    occupied: AbstractSet[str],
    group_id: str = "",
    allow_skip: Optional[bool] = None,
) -> Optional[List[SeatAssignment]]:
    """Find a contiguous placement for one group under one relaxation stage.

    Start offsets are scanned in ascending clockwise order. A placement that
    covers both low-priority seats is only returned when no other offset in
    this stage yields one that avoids them.
    """
    total_needed = required.total
    if total_needed == 0:
        return []
    if allow_skip is None:
        allow_skip = skip_allowed(required)

    fallback: Optional[List[SeatAssignment]] = None
    for offset in range(len(topology)):
        run = try_from_offset(topology, offset, total_needed, stage, occupied, allow_skip)
        if run is None:
            continue
        placement = arrange_seats(topology, run, required, group_id)
        if placement is None:
            logger.debug("stage=%s offset=%d run=%s: wrong seat mix", stage.name, offset, run)
            continue
        if not _uses_low_priority_pair(topology, placement):
            return placement
        if fallback is None:
            fallback = placement

    return fallback
