import pytest

from studentdesk.fileio import parse_students, read_students
from studentdesk.models import Student

TEXT = "1 Joe Samy 3.5 1 2 3 4 5\n2 ahmed omar 4 1 2 3 4 5\n"


def test_parse_two_records():
    students = list(parse_students(TEXT))
    assert students == [
        Student("Joe", "Samy", 1, 3.5, (1, 2, 3, 4, 5)),
        Student("ahmed", "omar", 2, 4.0, (1, 2, 3, 4, 5)),
    ]


def test_parse_empty_text():
    assert list(parse_students("")) == []


def test_incomplete_trailing_record_ignored():
    students = list(parse_students(TEXT + "3 ali nour 2 1 2"))
    assert [s.roll_id for s in students] == [1, 2]


def test_malformed_record_stops_reading():
    text = "1 Joe Samy 3.5 1 2 3 4 5\nx ali nour 2 1 2 3 4 5\n4 Abdo abdo 12 6 7 8 9 10"
    students = list(parse_students(text))
    assert [s.first_name for s in students] == ["Joe"]


def test_layout_does_not_matter():
    one_line = " ".join(TEXT.split())
    assert list(parse_students(one_line)) == list(parse_students(TEXT))


def test_read_students_from_file(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text(TEXT)
    assert read_students(path) == list(parse_students(TEXT))


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_students(tmp_path / "absent.txt")