"""Reading students from a whitespace-separated text file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .models import Student

DEFAULT_DATA_FILE = "../students.txt"

_FIELDS_PER_RECORD = 4 + Student.COURSE_COUNT


def parse_students(text: str) -> Iterator[Student]:
    """Yield students from ``text``.

    Each record is: roll id, first name, last name, GPA and five course ids,
    separated by any whitespace. Reading stops at the first record that is
    incomplete or malformed.
    """
    tokens = text.split()
    for start in range(0, len(tokens), _FIELDS_PER_RECORD):
        record = tokens[start:start + _FIELDS_PER_RECORD]
        if len(record) < _FIELDS_PER_RECORD:
            return
        roll_id, first_name, last_name, gpa, *courses = record
        try:
            student = Student(
                first_name=first_name,
                last_name=last_name,
                roll_id=int(roll_id),
                gpa=float(gpa),
                courses=tuple(int(course) for course in courses),
            )
        except ValueError:
            return
        yield student


def read_students(path: str | Path = DEFAULT_DATA_FILE) -> list[Student]:
    """Read every well-formed student record from the file at ``path``."""
    return list(parse_students(Path(path).read_text()))