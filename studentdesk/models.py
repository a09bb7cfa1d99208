"""Student record shared by the store, the file reader and the screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Student:
    """One student: names, unique roll id, GPA and exactly five course ids."""

    COURSE_COUNT: ClassVar[int] = 5

    first_name: str
    last_name: str
    roll_id: int
    gpa: float
    courses: tuple[int, ...]

    def __post_init__(self) -> None:
        courses = tuple(int(course) for course in self.courses)
        if len(courses) != self.COURSE_COUNT:
            raise ValueError(
                f"a student has exactly {self.COURSE_COUNT} course ids, got {len(courses)}"
            )
        object.__setattr__(self, "courses", courses)

    def enrolled_in(self, course_id: int) -> bool:
        """Return True if the student is registered in ``course_id``."""
        return course_id in self.courses