"""Line editing on a character terminal driven by decoded key events."""

from __future__ import annotations

import enum
from typing import Protocol

from termcli.color import after_input, before_input
from termcli.inputdevice import KeyType


class Symbol(enum.Enum):
    """What a key press means to the session that owns the terminal."""

    NOTHING = enum.auto()
    COMMAND = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    TAB = enum.auto()
    EOF = enum.auto()


class _Writable(Protocol):
    def write(self, text: str) -> object: ...

    def flush(self) -> object: ...


_NOTHING = (Symbol.NOTHING, "")


class Terminal:
    """Keeps the line being typed and echoes edits to ``out``."""

    def __init__(self, out: _Writable) -> None:
        self.out = out
        self._line = ""
        self._position = 0

    @property
    def line(self) -> str:
        """The line currently being edited."""
        return self._line

    @property
    def position(self) -> int:
        """Index in the line where the next character is written."""
        return self._position

    def _emit(self, *parts: str) -> None:
        self.out.write("".join(parts))
        self.out.flush()

    def reset_cursor(self) -> None:
        """Forget the cursor position, as after a fresh prompt."""
        self._position = 0

    def set_line(self, line: str) -> None:
        """Replace the edited line, redrawing it on the terminal."""
        self._emit(before_input(), "\b" * self._position, line, after_input())
        shrink = len(self._line) - len(line)
        if shrink > 0:
            self._emit(" " * shrink, "\b" * shrink)
        self._line = line
        self._position = len(line)

    def keypressed(self, key_type: KeyType, char: str = " ") -> tuple[Symbol, str]:
        """Apply one key press; return the resulting symbol and its text."""
        if key_type is KeyType.EOF:
            return Symbol.EOF, ""
        if key_type is KeyType.UP:
            return Symbol.UP, ""
        if key_type is KeyType.DOWN:
            return Symbol.DOWN, ""
        if key_type is KeyType.RET:
            self.out.write("\r\n")
            command = self._line
            self._line = ""
            self._position = 0
            return Symbol.COMMAND, command
        if key_type is KeyType.ASCII:
            if char == "\t":
                return Symbol.TAB, ""
            self._insert(char)
        elif key_type is KeyType.BACKSPACE:
            self._backspace()
        elif key_type is KeyType.LEFT:
            if self._position > 0:
                self._emit("\b")
                self._position -= 1
        elif key_type is KeyType.RIGHT:
            if self._position < len(self._line):
                self._emit(before_input(), self._line[self._position], after_input())
                self._position += 1
        elif key_type is KeyType.CANC:
            self._delete()
        elif key_type is KeyType.END:
            self._emit(before_input(), self._line[self._position:], after_input())
            self._position = len(self._line)
        elif key_type is KeyType.HOME:
            self._emit("\b" * self._position)
            self._position = 0
        return _NOTHING

    def _insert(self, char: str) -> None:
        pos = self._position
        rest = self._line[pos:]
        self.out.write(before_input() + char)
        self.out.write(rest + after_input())
        self._emit("\b" * len(rest))
        self._line = self._line[:pos] + char + rest
        self._position += 1

    def _backspace(self) -> None:
        if self._position == 0:
            return
        self._position -= 1
        pos = self._position
        self._line = self._line[:pos] + self._line[pos + 1:]
        rest = self._line[pos:]
        self._emit("\b", rest, " ", "\b" * (len(rest) + 1))

    def _delete(self) -> None:
        pos = self._position
        if pos == len(self._line):
            return
        rest = self._line[pos + 1:]
        self._emit(rest, " ", "\b" * (len(rest) + 1))
        self._line = self._line[:pos] + rest