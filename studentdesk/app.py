"""Entry point of the student management application."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .console import Console
from .fileio import DEFAULT_DATA_FILE
from .models import Student
from .navigator import Navigator, Screen
from .screens import ScreenContext, screen_handlers
from .store import StudentStore


def demo_students() -> list[Student]:
    """Sample students used to pre-fill the database."""
    return [
        Student("Joe", "Samy", 1, 3.5, (1, 2, 3, 4, 5)),
        Student("ahmed", "omar", 2, 4.0, (1, 2, 3, 4, 5)),
        Student("ali", "nour", 3, 2.0, (1, 2, 3, 4, 5)),
        Student("Abdo", "abdo", 4, 12.0, (6, 7, 8, 9, 10)),
    ]


def build_navigator(
    console: Console,
    store: StudentStore,
    data_file: str | Path = DEFAULT_DATA_FILE,
) -> Navigator:
    """Wire the screens to ``console`` and ``store`` and return the navigator."""
    ctx = ScreenContext(console, store, data_file)
    navigator = Navigator(console, screen_handlers(ctx))
    ctx.navigator = navigator
    return navigator


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="studentdesk", description="Interactive student management system."
    )
    parser.add_argument(
        "--data-file",
        default=DEFAULT_DATA_FILE,
        help="file to import students from (default: %(default)s)",
    )
    parser.add_argument(
        "--demo", action="store_true", help="start with sample students"
    )
    parser.add_argument(
        "--fast", action="store_true", help="disable text animation and pauses"
    )
    parser.add_argument("--debug", action="store_true", help="print debug messages")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the application until the user exits or input ends."""
    args = _parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    store = StudentStore()
    if args.demo:
        store.import_students(demo_students())
    if args.debug:
        for line in store.debug_lines():
            logging.getLogger(__name__).debug(line)

    if args.fast:
        console = Console(char_delay_ms=0, pauses=False)
    else:
        console = Console()

    navigator = build_navigator(console, store, args.data_file)
    try:
        navigator.run(Screen.SPLASH)
    except (EOFError, KeyboardInterrupt):
        pass

    sys.stdout.write("\n\n--> Program finished <--\n\n")
    sys.stdout.flush()
    return 0