import pytest

from studentdesk.models import Student
from studentdesk.store import (
    DuplicateRollIdError,
    StoreError,
    StudentNotFoundError,
    StudentStore,
)

JOE = Student("Joe", "Samy", 1, 3.5, (1, 2, 3, 4, 5))
AHMED = Student("ahmed", "omar", 2, 4, (1, 2, 3, 4, 5))
ALI = Student("ali", "nour", 3, 2, (1, 2, 3, 4, 5))
ABDO = Student("Abdo", "abdo", 4, 12, (6, 7, 8, 9, 10))


@pytest.fixture
def store():
    s = StudentStore()
    for student in (JOE, AHMED, ALI, ABDO):
        s.add(student)
    return s


def test_empty_store():
    s = StudentStore()
    assert len(s) == 0
    assert s.all() == []


def test_add_keeps_order(store):
    assert store.all() == [JOE, AHMED, ALI, ABDO]
    assert list(store) == [JOE, AHMED, ALI, ABDO]
    assert len(store) == 4


def test_duplicate_roll_id_rejected(store):
    clone = Student("Other", "Person", 1, 1.0, (1, 1, 1, 1, 1))
    with pytest.raises(DuplicateRollIdError) as info:
        store.add(clone)
    assert info.value.roll_id == 1
    assert len(store) == 4


def test_find_by_id(store):
    assert store.find_by_id(3) == ALI


def test_find_by_id_missing(store):
    with pytest.raises(StudentNotFoundError):
        store.find_by_id(99)


def test_find_by_first_name_ignores_case(store):
    assert store.find_by_first_name("JOE") == JOE
    assert store.find_by_first_name("abdo") == ABDO
    # Stored names are left untouched by the lookup.
    assert store.find_by_id(1).first_name == "Joe"


def test_find_by_first_name_missing(store):
    with pytest.raises(StudentNotFoundError):
        store.find_by_first_name("nobody")


def test_students_in_course(store):
    assert store.students_in_course(1) == [JOE, AHMED, ALI]
    assert store.students_in_course(6) == [ABDO]
    assert store.students_in_course(11) == []


def test_delete_head_middle_and_tail(store):
    assert store.delete_by_id(1) == JOE
    assert store.delete_by_id(3) == ALI
    assert store.delete_by_id(4) == ABDO
    assert store.all() == [AHMED]


def test_delete_missing(store):
    with pytest.raises(StudentNotFoundError):
        store.delete_by_id(42)
    with pytest.raises(StudentNotFoundError):
        StudentStore().delete_by_id(1)


def test_update_changes_given_fields(store):
    updated = store.update(2, first_name="Omar", gpa=3.0, courses=[6, None, -1, 7, 8])
    assert updated.first_name == "Omar"
    assert updated.last_name == AHMED.last_name
    assert updated.gpa == 3.0
    assert updated.courses == (6, 2, 3, 7, 8)
    assert store.find_by_id(2) == updated


def test_update_negative_values_keep_fields(store):
    updated = store.update(1, roll_id=-1, gpa=-1.0)
    assert updated == JOE


def test_update_roll_id(store):
    updated = store.update(4, roll_id=40)
    assert store.find_by_id(40) == updated
    with pytest.raises(StudentNotFoundError):
        store.find_by_id(4)


def test_update_to_taken_roll_id_rejected(store):
    with pytest.raises(DuplicateRollIdError):
        store.update(4, roll_id=1)
    assert store.find_by_id(4) == ABDO


def test_update_missing(store):
    with pytest.raises(StudentNotFoundError):
        store.update(99, first_name="x")


def test_import_students_reports_each(store):
    fresh = Student("new", "one", 5, 1.5, (1, 2, 3, 4, 5))
    ok, failed = [], []
    added = store.import_students([fresh, JOE], ok.append, failed.append)
    assert added == 1
    assert ok == [fresh]
    assert failed == [JOE]
    assert store.find_by_id(5) == fresh


def test_errors_share_base_class():
    assert issubclass(DuplicateRollIdError, StoreError)
    with pytest.raises(StoreError):
        StudentStore().find_by_id(1)


def test_debug_lines():
    s = StudentStore()
    assert s.debug_lines() == ["[LINKED DEBUG] empty list"]
    s.add(JOE)
    assert s.debug_lines() == [
        "[LINKED DEBUG] [Joe Samy] \t[1] \t[3.500000] \t[1 2 3 4 5]"
    ]