from dataclasses import dataclass, field
from typing import List

UNASSIGNED = -1


@dataclass(eq=False)
class Course:
    name: str
    slot: int = UNASSIGNED  # -1 until the colourer assigns it

    @property
    def assigned(self) -> bool:
        return self.slot != UNASSIGNED


@dataclass(eq=False)
class Student:
    name: str
    courses: List[Course] = field(default_factory=list)

    def add_course(self, course: Course) -> None:
        # same Course object can only appear once per student
        if any(c is course for c in self.courses):
            return
        self.courses.append(course)

    def __lt__(self, other: "Student") -> bool:
        return self.name < other.name


@dataclass
class SlotCounter:
    # upper bound on slot indices in use during one scheduling run
    max: int = 1

    def grow(self) -> int:
        """Hand out the next slot index and widen the budget by one."""
        slot = self.max
        self.max += 1
        return slot
