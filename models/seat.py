from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SeatFamily(str, Enum):
    FOCUSED = "robot"      # square desks
    SHARED = "game-fab"    # long desks


class PriorityTier(str, Enum):
    HIGH = "high"
    LOW = "low"
    OVERFLOW = "overflow"  # floor, last resort


@dataclass(frozen=True)
class Seat:
    seat_id: str
    family: SeatFamily
    tier: Optional[PriorityTier] = None  # focused family only
    position: Tuple[float, float] = (0.0, 0.0)

    @property
    def is_overflow(self) -> bool:
        return self.tier is PriorityTier.OVERFLOW

    @property
    def is_low_priority(self) -> bool:
        return self.tier is PriorityTier.LOW
