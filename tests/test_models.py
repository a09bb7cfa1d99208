import pytest

from studentdesk.models import Student


def make_joe():
    return Student("Joe", "Samy", 1, 3.5, [1, 2, 3, 4, 5])


def test_courses_become_tuple():
    joe = make_joe()
    assert joe.courses == (1, 2, 3, 4, 5)


def test_enrolled_in_true_and_false():
    joe = make_joe()
    assert joe.enrolled_in(3)
    assert not joe.enrolled_in(6)


@pytest.mark.parametrize("courses", [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], []])
def test_wrong_course_count_rejected(courses):
    with pytest.raises(ValueError):
        Student("ali", "nour", 3, 2.0, courses)


def test_student_is_immutable():
    joe = make_joe()
    with pytest.raises(AttributeError):
        joe.roll_id = 2  # type: ignore[misc]
    assert joe.roll_id == 1


def test_equality_by_value():
    first = make_joe()
    second = make_joe()
    other = Student("ahmed", "omar", 2, 4.0, [1, 2, 3, 4, 5])
    assert first == second
    assert (first == other) is False
    assert len({first, second}) == 1