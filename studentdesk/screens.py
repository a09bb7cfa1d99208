"""Interactive screens of the student management application."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .console import Console, TextStyle
from .fileio import DEFAULT_DATA_FILE, read_students
from .models import Student
from .navigator import Navigator, Screen
from .store import DuplicateRollIdError, StudentNotFoundError, StudentStore

_log = logging.getLogger(__name__)


@dataclass
class ScreenContext:
    """What every screen works with: terminal, database, data file and navigator."""

    console: Console
    store: StudentStore
    data_file: str | Path = DEFAULT_DATA_FILE
    navigator: Navigator | None = None


def _nav(ctx: ScreenContext) -> Navigator:
    if ctx.navigator is None:
        raise RuntimeError("the screen context has no navigator")
    return ctx.navigator


def _read_choice(console: Console) -> int | None:
    """Read an integer choice; None when the input is not a number."""
    try:
        return console.read_int()
    except ValueError:
        return None


def _menu(console: Console, title: str, options: list[tuple[int, str]]) -> None:
    console.write_line(title, TextStyle.LABEL)
    for number, text in options:
        console.write_int(number, TextStyle.NUMBER)
        console.write_line(text, TextStyle.BODY)


def _print_student(console: Console, student: Student) -> None:
    console.write("first Name: ", TextStyle.LABEL)
    console.write(student.first_name, TextStyle.BODY)
    console.write("\n", TextStyle.BODY)

    console.write("last Name: ", TextStyle.LABEL)
    console.write(student.last_name, TextStyle.BODY)
    console.write("\n", TextStyle.BODY)

    console.write("Roll ID: ", TextStyle.LABEL)
    console.write_int(student.roll_id, TextStyle.NUMBER)
    console.write("\n", TextStyle.BODY)

    console.write("GPA: ", TextStyle.LABEL)
    console.write_float(student.gpa, TextStyle.NUMBER)
    console.write("\n", TextStyle.BODY)

    console.write("Courses ID: ", TextStyle.LABEL)
    for course in student.courses:
        console.write_int(course, TextStyle.NUMBER)
        console.write(" ", TextStyle.LABEL)
    console.write("\n\n", TextStyle.BODY)


def _whats_next(ctx: ScreenContext, screen: Screen, title: str = "\nWhats next:") -> None:
    console = ctx.console
    _menu(
        console,
        title,
        [(1, " -> Reload the current screen"), (0, " -> Return to menu screen")],
    )
    console.write("\n---> Enter your choice: ", TextStyle.QUESTION)
    if _read_choice(console) == 0:
        _nav(ctx).pop()
    else:
        _nav(ctx).push_replacement(screen)


def _report_import(console: Console, student: Student, succeeded: bool) -> None:
    console.write("Add Student: ", TextStyle.LABEL)
    console.write(student.first_name, TextStyle.BODY)
    console.write(" ", TextStyle.BODY)
    console.write_line(student.last_name, TextStyle.BODY)

    console.write("Roll ID: ", TextStyle.LABEL)
    console.write_int_line(student.roll_id, TextStyle.NUMBER)

    console.write("Status: ", TextStyle.LABEL)
    if succeeded:
        console.write_line("Success \n", TextStyle.QUESTION)
    else:
        console.write_line("Fail \n", TextStyle.ERROR)


def splash(ctx: ScreenContext) -> None:
    """Show the project banner and a short loading animation, then go home."""
    console = ctx.console
    console.write_line("Proj:\t\tStudent management system", TextStyle.LABEL)
    console.write_line("Data:\t\tStudents, courses and GPAs", TextStyle.LABEL)

    console.write("\nLoad: ", TextStyle.BODY)
    for _ in range(5):
        console.write(".", TextStyle.BODY)
        console.pause(700)

    _nav(ctx).push(Screen.HOME)


_HOME_TARGETS = {
    1: Screen.ADD_STUDENT,
    2: Screen.FIND_STUDENT,
    3: Screen.SEARCH_COURSE_ID,
    4: Screen.COUNT_STUDENTS,
    5: Screen.DELETE_STUDENT,
    6: Screen.SHOW_ALL,
}


def home(ctx: ScreenContext) -> None:
    """Main menu: pick an action or exit."""
    console = ctx.console
    _menu(
        console,
        "Please Choose what you want to perform:",
        [
            (1, " -> To Add Student"),
            (2, " -> To Search about student"),
            (3, " -> To find students registered in course"),
            (4, " -> To calculate total number of students"),
            (5, " -> To delete student"),
            (6, " -> To show all students"),
            (0, " -> To exit"),
        ],
    )
    console.write("\n---> Enter your choice: ", TextStyle.QUESTION)
    choice = _read_choice(console)

    if choice == 0:
        _nav(ctx).exit()
    elif choice in _HOME_TARGETS:
        _nav(ctx).push(_HOME_TARGETS[choice])
    else:
        console.write_line("Unknown Choice", TextStyle.ERROR)
        console.pause(1500)
        _nav(ctx).push_replacement(Screen.HOME)


def _read_new_student(console: Console) -> Student:
    console.write("\n---> Enter first name: ", TextStyle.QUESTION)
    first_name = console.read_string()
    console.write("\n---> Enter last name: ", TextStyle.QUESTION)
    last_name = console.read_string()
    console.write("\n---> Enter roll id: ", TextStyle.QUESTION)
    roll_id = console.read_int()
    if roll_id < 0:
        raise ValueError("roll id must not be negative")
    console.write("\n---> Enter GPA: ", TextStyle.QUESTION)
    gpa = console.read_float()
    courses = []
    for position in range(1, Student.COURSE_COUNT + 1):
        console.write("\n---> Enter Course ID [ ", TextStyle.QUESTION)
        console.write_int(position, TextStyle.NUMBER)
        console.write(" ] :", TextStyle.QUESTION)
        courses.append(console.read_int())
    return Student(first_name, last_name, roll_id, gpa, tuple(courses))


def add_student(ctx: ScreenContext) -> None:
    """Add a student typed in by hand, or import every student from the data file."""
    console = ctx.console
    _menu(
        console,
        "Please Choose how to add student:",
        [
            (1, " -> To Add Student Manually"),
            (2, " -> To Read from file"),
            (0, " -> To return to previous screen"),
        ],
    )
    console.write("\n---> Enter your choice: ", TextStyle.QUESTION)
    choice = _read_choice(console)

    if choice == 0:
        _nav(ctx).pop()
        return

    if choice == 1:
        console.write_line("Manually", TextStyle.LABEL)
        try:
            student = _read_new_student(console)
        except ValueError:
            console.write("\n", TextStyle.BODY)
            console.write_line("Invalid input", TextStyle.ERROR)
        else:
            console.write("\n", TextStyle.BODY)
            try:
                ctx.store.add(student)
            except DuplicateRollIdError:
                console.write_line("Failed, The roll id is repeated", TextStyle.ERROR)
            else:
                console.write_line("Student Added Successfully", TextStyle.BODY)
        console.pause(2000)
        _nav(ctx).push_replacement(Screen.ADD_STUDENT)
        return

    if choice == 2:
        console.write_line("From file", TextStyle.LABEL)
        try:
            students = read_students(ctx.data_file)
        except OSError as error:
            _log.debug("Failed to open file: %s", error)
            students = []
        ctx.store.import_students(
            students,
            on_success=lambda s: _report_import(console, s, True),
            on_failure=lambda s: _report_import(console, s, False),
        )
        _whats_next(ctx, Screen.ADD_STUDENT)
        return

    console.write_line("Unknown Choice", TextStyle.ERROR)
    console.pause(2000)
    _nav(ctx).push_replacement(Screen.ADD_STUDENT)


def find_student(ctx: ScreenContext) -> None:
    """Look a student up by first name or by roll id."""
    console = ctx.console
    store = ctx.store
    _menu(
        console,
        "Please Choose what field you want to search with:",
        [(1, " -> By first name"), (2, " -> By roll ID"), (0, " -> to return screen")],
    )
    console.write("\n---> Enter your choice: ", TextStyle.QUESTION)
    choice = _read_choice(console)

    try:
        if choice == 1:
            console.write("\n---> Enter First name: ", TextStyle.QUESTION)
            student = store.find_by_first_name(console.read_string())
        elif choice == 2:
            console.write("\n---> Enter roll ID: ", TextStyle.QUESTION)
            student = store.find_by_id(console.read_int())
        elif choice == 0:
            _nav(ctx).pop()
            return
        else:
            _nav(ctx).push_replacement(Screen.FIND_STUDENT)
            return
    except (StudentNotFoundError, ValueError):
        console.write_line("Failed to get the desired student", TextStyle.ERROR)
        console.pause(2000)
        _nav(ctx).push_replacement(Screen.FIND_STUDENT)
        return

    console.write_line("\nThe student is found in DATABASE", TextStyle.BODY)
    _print_student(console, student)
    _whats_next(ctx, Screen.FIND_STUDENT, "Whats next:")


def search_course(ctx: ScreenContext) -> None:
    """List the students registered in a course."""
    console = ctx.console
    console.write(
        "\n---> Enter course ID to get students registered in: ", TextStyle.QUESTION
    )
    course_id = _read_choice(console)
    registered = [] if course_id is None else ctx.store.students_in_course(course_id)

    if not registered:
        console.write_line("Not found\n\n", TextStyle.ERROR)
    for student in registered:
        _print_student(console, student)

    _whats_next(ctx, Screen.SEARCH_COURSE_ID)


def count_students(ctx: ScreenContext) -> None:
    """Show how many students are stored."""
    console = ctx.console
    console.write("The total number of students is: ", TextStyle.LABEL)
    console.write_int(len(ctx.store), TextStyle.NUMBER)

    _menu(
        console,
        "\n\nPlease Choose what you want to perform:",
        [(1, " -> To refresh screen"), (0, " -> To return screen")],
    )
    console.write("Choice: ", TextStyle.QUESTION)
    if _read_choice(console) == 0:
        _nav(ctx).pop()
    else:
        _nav(ctx).push_replacement(Screen.COUNT_STUDENTS)


def show_all(ctx: ScreenContext) -> None:
    """List every stored student."""
    console = ctx.console
    console.write_line("Show all students:\n", TextStyle.LABEL)

    students = ctx.store.all()
    if not students:
        console.write_line("The database is empty\n\n", TextStyle.ERROR)
    for student in students:
        _print_student(console, student)

    console.write("\n---> Enter 0 to return to previous screen: ", TextStyle.QUESTION)
    if _read_choice(console) == 0:
        _nav(ctx).pop()
    else:
        _nav(ctx).push_replacement(Screen.SHOW_ALL)


def _name_or_keep(console: Console, prompt: str) -> str | None:
    console.write(prompt, TextStyle.QUESTION)
    value = console.read_string()
    return None if value == "-" else value


def update_student(ctx: ScreenContext) -> None:
    """Change the fields of a stored student; '-' or -1 keeps a field."""
    console = ctx.console
    console.write_line("Enter roll ID of the student to update, ", TextStyle.LABEL)
    console.write("Enter or -1 to return screen:  ", TextStyle.LABEL)
    roll_id = _read_choice(console)

    if roll_id == -1:
        _nav(ctx).pop()
        return
    if roll_id is None:
        _nav(ctx).push_replacement(Screen.UPDATE_STUDENT)
        return

    try:
        student = ctx.store.find_by_id(roll_id)
    except StudentNotFoundError:
        console.write_line("Failed, The ID is not found", TextStyle.ERROR)
        console.pause(2000)
        _nav(ctx).push_replacement(Screen.UPDATE_STUDENT)
        return

    _print_student(console, student)
    console.write_line(
        "Enter new values, - to keep a name and -1 to keep a number", TextStyle.LABEL
    )
    try:
        first_name = _name_or_keep(console, "\n---> Enter first name: ")
        last_name = _name_or_keep(console, "\n---> Enter last name: ")
        console.write("\n---> Enter roll id: ", TextStyle.QUESTION)
        new_roll_id = console.read_int()
        console.write("\n---> Enter GPA: ", TextStyle.QUESTION)
        gpa = console.read_float()
        courses = []
        for position in range(1, Student.COURSE_COUNT + 1):
            console.write("\n---> Enter Course ID [ ", TextStyle.QUESTION)
            console.write_int(position, TextStyle.NUMBER)
            console.write(" ] :", TextStyle.QUESTION)
            courses.append(console.read_int())
        console.write("\n", TextStyle.BODY)
        ctx.store.update(roll_id, first_name, last_name, new_roll_id, gpa, courses)
    except DuplicateRollIdError:
        console.write_line("Failed, The roll id is repeated", TextStyle.ERROR)
    except ValueError:
        console.write_line("Invalid input", TextStyle.ERROR)
    else:
        console.write_line("Student Updated Successfully", TextStyle.BODY)

    console.pause(2000)
    _nav(ctx).push_replacement(Screen.UPDATE_STUDENT)


def delete_student(ctx: ScreenContext) -> None:
    """Remove a student by roll id after confirmation."""
    console = ctx.console
    console.write_line("Enter roll ID to delete student, ", TextStyle.LABEL)
    console.write("Enter or -1 to return screen:  ", TextStyle.LABEL)
    roll_id = _read_choice(console)

    if roll_id == -1:
        _nav(ctx).pop()
        return
    if roll_id is None:
        _nav(ctx).push_replacement(Screen.DELETE_STUDENT)
        return

    try:
        student = ctx.store.find_by_id(roll_id)
    except StudentNotFoundError:
        console.write_line("Failed, The ID is not found", TextStyle.ERROR)
        console.pause(2000)
        _nav(ctx).push_replacement(Screen.DELETE_STUDENT)
        return

    console.write('Do you want to delete "', TextStyle.QUESTION)
    console.write(student.first_name, TextStyle.QUESTION)
    console.write(" ", TextStyle.BODY)
    console.write(student.last_name, TextStyle.QUESTION)
    console.write_line('", Are you sure?', TextStyle.QUESTION)
    console.write("Enter 1 to delete:  ", TextStyle.QUESTION)

    if _read_choice(console) == 1:
        try:
            ctx.store.delete_by_id(roll_id)
        except StudentNotFoundError:
            console.write_line("Failed to remove Student", TextStyle.ERROR)
        else:
            console.write_line("Student Removed Successfully", TextStyle.BODY)
        console.pause(2000)
    _nav(ctx).push_replacement(Screen.DELETE_STUDENT)


_SCREENS: dict[Screen, Callable[[ScreenContext], None]] = {
    Screen.SPLASH: splash,
    Screen.HOME: home,
    Screen.ADD_STUDENT: add_student,
    Screen.FIND_STUDENT: find_student,
    Screen.SEARCH_COURSE_ID: search_course,
    Screen.COUNT_STUDENTS: count_students,
    Screen.UPDATE_STUDENT: update_student,
    Screen.SHOW_ALL: show_all,
    Screen.DELETE_STUDENT: delete_student,
}


def screen_handlers(ctx: ScreenContext) -> dict[Screen, Callable[[], None]]:
    """Bind every screen function to ``ctx`` for use by a Navigator."""
    return {screen: functools.partial(func, ctx) for screen, func in _SCREENS.items()}