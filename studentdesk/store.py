"""In-memory student database kept in insertion order."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Iterator, Sequence

from .models import Student


class StoreError(Exception):
    """Base class for student store failures."""


class DuplicateRollIdError(StoreError):
    """A student with the same roll id is already stored."""

    def __init__(self, roll_id: int) -> None:
        super().__init__(f"roll id {roll_id} is already registered")
        self.roll_id = roll_id


class StudentNotFoundError(StoreError, LookupError):
    """No stored student matches the query."""

    def __init__(self, key: object) -> None:
        super().__init__(f"no student matches {key!r}")
        self.key = key


StudentCallback = Callable[[Student], None]


class StudentStore:
    """Ordered collection of students with unique roll ids."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def _index_of(self, roll_id: int) -> int:
        for index, student in enumerate(self._students):
            if student.roll_id == roll_id:
                return index
        raise StudentNotFoundError(roll_id)

    def add(self, student: Student) -> None:
        """Append a student; raise DuplicateRollIdError if the roll id is taken."""
        if any(s.roll_id == student.roll_id for s in self._students):
            raise DuplicateRollIdError(student.roll_id)
        self._students.append(student)

    def find_by_id(self, roll_id: int) -> Student:
        """Return the student with ``roll_id``."""
        return self._students[self._index_of(roll_id)]

    def find_by_first_name(self, name: str) -> Student:
        """Return the first student whose first name matches, ignoring case."""
        wanted = name.lower()
        for student in self._students:
            if student.first_name.lower() == wanted:
                return student
        raise StudentNotFoundError(name)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def all(self) -> list[Student]:
        """Return every student in insertion order."""
        return list(self._students)

    def students_in_course(self, course_id: int) -> list[Student]:
        """Return the students registered in ``course_id``, in insertion order."""
        return [s for s in self._students if s.enrolled_in(course_id)]

    def delete_by_id(self, roll_id: int) -> Student:
        """Remove and return the student with ``roll_id``."""
        return self._students.pop(self._index_of(roll_id))

    def update(
        self,
        old_roll_id: int,
        first_name: str | None = None,
        last_name: str | None = None,
        roll_id: int | None = None,
        gpa: float | None = None,
        courses: Sequence[int | None] | None = None,
    ) -> Student:
        """Change fields of a stored student and return the new record.

        ``None`` leaves a field as it is; so does a negative roll id, GPA or
        course entry.
        """
        index = self._index_of(old_roll_id)
        current = self._students[index]
        changes: dict[str, object] = {}
        if first_name is not None:
            changes["first_name"] = first_name
        if last_name is not None:
            changes["last_name"] = last_name
        if roll_id is not None and roll_id >= 0:
            if roll_id != current.roll_id and any(
                s.roll_id == roll_id for s in self._students
            ):
                raise DuplicateRollIdError(roll_id)
            changes["roll_id"] = roll_id
        if gpa is not None and gpa >= 0:
            changes["gpa"] = gpa
        if courses is not None:
            if len(courses) != Student.COURSE_COUNT:
                raise ValueError(
                    f"expected {Student.COURSE_COUNT} course entries, got {len(courses)}"
                )
            changes["courses"] = tuple(
                new if new is not None and new >= 0 else old
                for old, new in zip(current.courses, courses)
            )
        updated = dataclasses.replace(current, **changes)
        self._students[index] = updated
        return updated

    def import_students(
        self,
        students: Iterable[Student],
        on_success: StudentCallback | None = None,
        on_failure: StudentCallback | None = None,
    ) -> int:
        """Add each student, reporting it to a callback; return how many were added."""
        added = 0
        for student in students:
            try:
                self.add(student)
            except StoreError:
                if on_failure is not None:
                    on_failure(student)
            else:
                added += 1
                if on_success is not None:
                    on_success(student)
        return added

    def debug_lines(self) -> list[str]:
        """Describe every stored student, one line each, for debug output."""
        if not self._students:
            return ["[LINKED DEBUG] empty list"]
        return [
            f"[LINKED DEBUG] [{s.first_name} {s.last_name}] \t[{s.roll_id}] "
            f"\t[{s.gpa:f}] \t[{' '.join(str(c) for c in s.courses)}]"
            for s in self._students
        ]