from models.course import CourseType, CourseCounts, SHARED_COURSES
from models.seat import Seat, SeatFamily, PriorityTier
from models.group import Group
from models.stage import SearchStage
from models.assignment import (
    SeatAssignment, OverflowContribution, OverflowAllocation, GroupError, AllocationResult,
)
from models.errors import SeatingError, TopologyError, UnknownSeatError, InvalidHeadcountError
