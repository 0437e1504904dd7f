from dataclasses import dataclass


@dataclass(frozen=True)
class SearchStage:
    """Seat permissions for one pass of the placement search."""
    name: str
    allow_low_priority: bool
    allow_overflow: bool
