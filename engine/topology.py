"""Static classroom seat topology and the clockwise adjacency oracle."""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from models.course import CourseType
from models.errors import TopologyError, UnknownSeatError
from models.seat import PriorityTier, Seat, SeatFamily
from config.defaults import (
    SEAT_TABLE, CLOCKWISE_ORDER, ADJACENT_PAIRS, SKIP_PAIRS, OVERFLOW_SEAT_ORDER,
)


class SeatTopology:
    """Seats, their clockwise order, and which consecutive pairs are contiguous.

    Adjacency is an explicit edge list rather than index arithmetic: the
    classroom has gaps where the clockwise numbering jumps between desks.
    Skip edges are extra pairs that are only honoured when the caller asks.
    """

    def __init__(
        self,
        seats: Iterable[Seat],
        clockwise_order: List[str],
        adjacent_pairs: Iterable[Tuple[str, str]],
        skip_pairs: Iterable[Tuple[str, str]] = (),
        overflow_order: Optional[List[str]] = None,
    ):
        self._seats: Dict[str, Seat] = {}
        for seat in seats:
            if seat.seat_id in self._seats:
                raise TopologyError(f"Duplicate seat id: {seat.seat_id}")
            self._seats[seat.seat_id] = seat

        if sorted(clockwise_order) != sorted(self._seats):
            raise TopologyError("Clockwise order must list every seat exactly once.")
        self._order: List[str] = list(clockwise_order)
        self._index: Dict[str, int] = {sid: i for i, sid in enumerate(self._order)}

        self._edges: Set[Tuple[str, str]] = self._check_pairs(adjacent_pairs, "adjacent")
        self._skip_edges: Set[Tuple[str, str]] = self._check_pairs(skip_pairs, "skip")
        self._skip_targets: Dict[str, str] = {a: b for a, b in self._skip_edges}

        overflow = [s.seat_id for s in self._seats.values() if s.is_overflow]
        if overflow_order is None:
            overflow_order = sorted(overflow, key=self._index.get)
        if sorted(overflow_order) != sorted(overflow):
            raise TopologyError("Overflow order must list every overflow seat exactly once.")
        self._overflow_order: List[str] = list(overflow_order)

        for seat in self._seats.values():
            if seat.family is SeatFamily.SHARED and seat.tier is not None:
                raise TopologyError(f"Seat {seat.seat_id}: tiers apply to focused seats only.")

    def _check_pairs(self, pairs, kind: str) -> Set[Tuple[str, str]]:
        checked = set()
        for a, b in pairs:
            if a not in self._seats or b not in self._seats:
                raise TopologyError(f"{kind} pair {a}->{b} names an unknown seat.")
            checked.add((a, b))
        return checked

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, seat_id: str) -> bool:
        return seat_id in self._seats

    @property
    def seat_ids(self) -> List[str]:
        return list(self._order)

    @property
    def seats(self) -> List[Seat]:
        return [self._seats[sid] for sid in self._order]

    @property
    def overflow_seat_ids(self) -> List[str]:
        return list(self._overflow_order)

    @property
    def low_priority_seat_ids(self) -> List[str]:
        return [sid for sid in self._order if self._seats[sid].is_low_priority]

    def seat(self, seat_id: str) -> Seat:
        try:
            return self._seats[seat_id]
        except KeyError:
            raise UnknownSeatError(seat_id) from None

    def seat_at(self, index: int) -> str:
        """Seat id at a clockwise position (wraps around)."""
        return self._order[index % len(self._order)]

    def course_family(self, seat_id: str) -> Optional[SeatFamily]:
        seat = self._seats.get(seat_id)
        return seat.family if seat else None

    def priority_tier(self, seat_id: str) -> Optional[PriorityTier]:
        seat = self._seats.get(seat_id)
        return seat.tier if seat else None

    def clockwise_index(self, seat_id: str) -> int:
        try:
            return self._index[seat_id]
        except KeyError:
            raise UnknownSeatError(seat_id) from None

    def is_adjacent(self, seat_a: str, seat_b: str, allow_skip: bool = False) -> bool:
        """True if seat_b directly follows seat_a in a contiguous clockwise run."""
        if (seat_a, seat_b) in self._edges:
            return True
        return allow_skip and (seat_a, seat_b) in self._skip_edges

    def skip_target(self, seat_id: str) -> Optional[str]:
        return self._skip_targets.get(seat_id)

    def is_overflow(self, seat_id: str) -> bool:
        return self.priority_tier(seat_id) is PriorityTier.OVERFLOW

    def is_low_priority(self, seat_id: str) -> bool:
        return self.priority_tier(seat_id) is PriorityTier.LOW

    def seats_in_family(self, family: SeatFamily) -> List[str]:
        return [sid for sid in self._order if self._seats[sid].family is family]

    def accepts(self, seat_id: str, course: CourseType) -> bool:
        """Whether a student of this course may sit on the seat."""
        family = self.course_family(seat_id)
        if family is None:
            return False
        if CourseType(course).is_focused:
            return family is SeatFamily.FOCUSED
        return family is SeatFamily.SHARED


def build_default_topology() -> SeatTopology:
    """Build the classroom topology from config.defaults."""
    seats = [
        Seat(
            seat_id=seat_id,
            family=SeatFamily(family),
            tier=PriorityTier(tier) if tier else None,
            position=position,
        )
        for seat_id, family, tier, position in SEAT_TABLE
    ]
    return SeatTopology(
        seats,
        clockwise_order=CLOCKWISE_ORDER,
        adjacent_pairs=ADJACENT_PAIRS,
        skip_pairs=SKIP_PAIRS,
        overflow_order=OVERFLOW_SEAT_ORDER,
    )


DEFAULT_TOPOLOGY = build_default_topology()
