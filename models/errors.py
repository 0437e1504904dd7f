"""Exception types raised by the seating planner."""


class SeatingError(Exception):
    """Base class for seating planner errors."""


class TopologyError(SeatingError):
    """The seat topology configuration is inconsistent."""


class UnknownSeatError(SeatingError, KeyError):
    """A seat id is not part of the topology."""

    def __init__(self, seat_id: str):
        super().__init__(seat_id)
        self.seat_id = seat_id

    def __str__(self) -> str:
        return f"Unknown seat id: {self.seat_id!r}"


class InvalidHeadcountError(SeatingError, ValueError):
    """A headcount is negative or not an integer."""
