from dataclasses import dataclass
from enum import Enum

from models.errors import InvalidHeadcountError


class CourseType(str, Enum):
    ROBOT = "robot"    # focused course, square desks only
    GAME = "game"
    FAB = "fab"
    PRIME = "prime"

    @property
    def is_focused(self) -> bool:
        return self is CourseType.ROBOT


SHARED_COURSES = (CourseType.GAME, CourseType.FAB, CourseType.PRIME)


@dataclass(frozen=True)
class CourseCounts:
    robot: int = 0
    game: int = 0
    fab: int = 0
    prime: int = 0

    def __post_init__(self):
        for course in CourseType:
            value = getattr(self, course.value)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidHeadcountError(
                    f"{course.value} headcount must be an integer, got {value!r}"
                )
            if value < 0:
                raise InvalidHeadcountError(
                    f"{course.value} headcount cannot be negative, got {value}"
                )

    @property
    def focused(self) -> int:
        return self.robot

    @property
    def shared(self) -> int:
        return self.game + self.fab + self.prime

    @property
    def total(self) -> int:
        return self.focused + self.shared

    def get(self, course: CourseType) -> int:
        return getattr(self, CourseType(course).value)

    def with_count(self, course: CourseType, value: int) -> "CourseCounts":
        """Return a copy with one course's headcount replaced."""
        values = self.as_dict()
        values[CourseType(course).value] = value
        return CourseCounts(**values)

    def is_empty(self) -> bool:
        return self.total == 0

    def as_dict(self) -> dict:
        return {course.value: self.get(course) for course in CourseType}
