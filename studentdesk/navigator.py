"""Stack of screens with a header showing the current path."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum

from .console import Console, TextStyle

_log = logging.getLogger(__name__)

_RULE = "---------------------------------"


class Screen(Enum):
    """Screens of the student management application."""

    SPLASH = 0
    HOME = 1
    ADD_STUDENT = 2
    FIND_STUDENT = 3
    SEARCH_COURSE_ID = 4
    COUNT_STUDENTS = 5
    UPDATE_STUDENT = 6
    SHOW_ALL = 7
    DELETE_STUDENT = 8

    @property
    def title(self) -> str:
        """Name shown in the navigation header."""
        return _TITLES[self]


_TITLES = {
    Screen.SPLASH: "Splash",
    Screen.HOME: "Home",
    Screen.ADD_STUDENT: "Add Student",
    Screen.FIND_STUDENT: "Find Student",
    Screen.SEARCH_COURSE_ID: "Search Course ID",
    Screen.COUNT_STUDENTS: "Count Students",
    Screen.UPDATE_STUDENT: "Update Student",
    Screen.SHOW_ALL: "Show all",
    Screen.DELETE_STUDENT: "Delete Students",
}


class ExitRequested(Exception):
    """Raised by a screen to end the application."""


class Navigator:
    """Keeps the screen stack and runs the screen on top of it.

    ``push``, ``push_replacement`` and ``pop`` change the stack, redraw the
    header and schedule the top screen; ``run`` keeps calling the scheduled
    screen until a screen returns without navigating or asks to exit.
    """

    def __init__(
        self,
        console: Console,
        handlers: Mapping[Screen, Callable[[], None]],
        capacity: int = 5,
    ) -> None:
        self._console = console
        self._handlers = dict(handlers)
        self._capacity = capacity
        self._stack: list[Screen] = []
        self._pending = False

    def _check_handler(self, screen: Screen) -> None:
        if screen not in self._handlers:
            raise KeyError(f"no handler registered for {screen}")

    def _print_header(self) -> None:
        if not self._stack:
            return
        self._console.write_line(_RULE, TextStyle.LABEL)
        self._console.write(" PATH: ", TextStyle.LABEL)
        for screen in self._stack:
            self._console.write(" >", TextStyle.LABEL)
            self._console.write(screen.title, TextStyle.QUESTION)
        self._console.write_line(f"\n{_RULE}\n", TextStyle.LABEL)

    def _show_top(self) -> None:
        self._console.clear()
        self._print_header()
        if self._stack:
            _log.debug("call screen: %s", self._stack[-1].name)
            self._pending = True
        else:
            self._pending = False

    def push(self, screen: Screen) -> None:
        """Put ``screen`` on top of the stack; ignored when the stack is full."""
        self._check_handler(screen)
        if len(self._stack) >= self._capacity:
            _log.debug("Screen Stack is full")
            return
        self._stack.append(screen)
        self._show_top()

    def push_replacement(self, screen: Screen) -> None:
        """Replace the top screen with ``screen``; ignored when the stack is empty."""
        self._check_handler(screen)
        if not self._stack:
            _log.debug("Screen Stack is empty")
            return
        self._stack[-1] = screen
        self._show_top()

    def pop(self) -> None:
        """Return to the previous screen; ignored when the stack is empty."""
        if not self._stack:
            _log.debug("Screen Stack is empty")
            return
        self._stack.pop()
        _log.debug("pop from previous screen")
        self._show_top()

    def exit(self) -> None:
        """End the application."""
        raise ExitRequested()

    def run(self, screen: Screen | None = None) -> bool:
        """Push ``screen`` if given, then run screens until none is scheduled.

        Return True if a screen asked to exit.
        """
        if screen is not None:
            self.push(screen)
        try:
            while self._pending:
                self._pending = False
                self._handlers[self._stack[-1]]()
        except ExitRequested:
            self._pending = False
            return True
        return False

    def path(self) -> tuple[Screen, ...]:
        """Screens on the stack, bottom first."""
        return tuple(self._stack)