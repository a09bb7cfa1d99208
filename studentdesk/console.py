"""Styled terminal output, token-based input and millisecond delays."""

from __future__ import annotations

import sys
import time
from collections import deque
from enum import Enum
from typing import TextIO


class TextStyle(Enum):
    """Colour used for a piece of output, as an ANSI escape sequence."""

    LABEL = "\033[1;35m"
    BODY = "\033[0m"
    NUMBER = "\033[1;33m"
    QUESTION = "\033[1;36m"
    ERROR = "\033[1;31m"


CLEAR_SCREEN = "\033[2J\033[H"


def delay_ms(ms: float) -> None:
    """Block for ``ms`` milliseconds."""
    if ms > 0:
        time.sleep(ms / 1000.0)


class Console:
    """Terminal wrapper that colours output and reads whitespace-separated tokens.

    Text written with :meth:`write` appears one character at a time, waiting
    ``char_delay_ms`` between characters. :meth:`pause` sleeps only when
    ``pauses`` is true.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        char_delay_ms: float = 5,
        pauses: bool = True,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.char_delay_ms = char_delay_ms
        self.pauses = pauses
        self._tokens: deque[str] = deque()

    def _emit(self, text: str) -> None:
        self._stdout.write(text)

    def _style(self, style: TextStyle) -> None:
        self._emit(style.value)

    def _animate(self, text: str) -> None:
        if self.char_delay_ms <= 0:
            self._emit(text)
            return
        for char in text:
            self._emit(char)
            self._stdout.flush()
            delay_ms(self.char_delay_ms)

    def write(self, text: str, style: TextStyle = TextStyle.BODY) -> None:
        """Write ``text`` in ``style``, then return to the body style."""
        self._style(style)
        self._animate(text)
        self._style(TextStyle.BODY)
        self._stdout.flush()

    def write_line(self, text: str, style: TextStyle = TextStyle.BODY) -> None:
        """Write ``text`` in ``style`` followed by a newline."""
        self.write(text, style)
        self._emit("\n")
        self._style(TextStyle.BODY)
        self._stdout.flush()

    def write_int(self, number: int, style: TextStyle = TextStyle.NUMBER) -> None:
        """Write an integer in ``style``."""
        self._style(style)
        self._emit(f"{int(number):d}")
        self._style(TextStyle.BODY)
        self._stdout.flush()

    def write_int_line(self, number: int, style: TextStyle = TextStyle.NUMBER) -> None:
        """Write an integer in ``style`` followed by a newline."""
        self.write_int(number, style)
        self._emit("\n")
        self._style(TextStyle.BODY)
        self._stdout.flush()

    def write_float(self, number: float, style: TextStyle = TextStyle.NUMBER) -> None:
        """Write a number with six decimals in ``style``."""
        self._style(style)
        self._emit(f"{float(number):f}")
        self._style(TextStyle.BODY)
        self._stdout.flush()

    def write_float_line(self, number: float, style: TextStyle = TextStyle.NUMBER) -> None:
        """Write a number with six decimals in ``style`` followed by a newline."""
        self.write_float(number, style)
        self._style(TextStyle.BODY)
        self._emit("\n")
        self._stdout.flush()

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._stdin.readline()
            if line == "":
                raise EOFError("no more input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def read_int(self) -> int:
        """Read the next token as an integer; raise ValueError if it is not one."""
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def read_string(self) -> str:
        """Read the next whitespace-separated word."""
        return self._next_token()

    def read_float(self) -> float:
        """Read the next token as a number; raise ValueError if it is not one."""
        token = self._next_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def clear(self) -> None:
        """Clear the terminal and move the cursor home."""
        self._emit(CLEAR_SCREEN)
        self._stdout.flush()

    def pause(self, ms: float) -> None:
        """Wait ``ms`` milliseconds, unless pauses are disabled."""
        if self.pauses:
            delay_ms(ms)