from dataclasses import dataclass, field

from models.course import CourseCounts


@dataclass(frozen=True)
class Group:
    """One mentor's cohort."""
    group_id: str
    label: str
    counts: CourseCounts = field(default_factory=CourseCounts)

    @property
    def total(self) -> int:
        return self.counts.total
