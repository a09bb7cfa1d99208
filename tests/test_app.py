import io
import re
import sys

from studentdesk.app import build_navigator, demo_students, main
from studentdesk.console import Console
from studentdesk.navigator import Screen
from studentdesk.store import StudentStore

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def test_demo_students_have_unique_ids():
    students = demo_students()
    assert len(students) == 4
    assert len({s.roll_id for s in students}) == len(students)
    store = StudentStore()
    assert store.import_students(students) == len(students)


def test_demo_students_course_groups():
    store = StudentStore()
    store.import_students(demo_students())
    assert [s.first_name for s in store.students_in_course(6)] == ["Abdo"]
    assert len(store.students_in_course(1)) == 3


def test_build_navigator_runs_screens():
    store = StudentStore()
    store.import_students(demo_students())
    out = io.StringIO()
    console = Console(io.StringIO("0\n"), out, char_delay_ms=0, pauses=False)
    navigator = build_navigator(console, store)
    assert navigator.run(Screen.SHOW_ALL) is False
    text = _ANSI.sub("", out.getvalue())
    assert "first Name: Joe" in text
    assert "first Name: Abdo" in text
    assert navigator.path() == ()


def test_main_exits_from_home(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main(["--fast"]) == 0
    assert "--> Program finished <--" in capsys.readouterr().out


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--fast"]) == 0
    assert "--> Program finished <--" in capsys.readouterr().out


def test_main_demo_shows_sample_students(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n0\n0\n"))
    assert main(["--fast", "--demo"]) == 0
    text = _ANSI.sub("", capsys.readouterr().out)
    assert "first Name: ahmed" in text
    assert "last Name: nour" in text


def test_main_without_demo_is_empty(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n0\n0\n"))
    assert main(["--fast"]) == 0
    text = _ANSI.sub("", capsys.readouterr().out)
    assert "The total number of students is: 0" in text