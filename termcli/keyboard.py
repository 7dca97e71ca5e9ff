"""Reading key presses from a POSIX terminal in raw (non-canonical) mode."""

from __future__ import annotations

import os
import select
import sys
import threading
from typing import Callable, Iterable, Iterator, Optional

from termcli.inputdevice import InputDevice, KeyType, Scheduler

Key = tuple[KeyType, str]

_CSI_KEYS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class _Stopped(Exception):
    pass


def _read_key(next_byte: Callable[[], Optional[int]]) -> Optional[Key]:
    """Decode one key from ``next_byte``; None when input is exhausted."""
    ch = next_byte()
    if ch is None:
        return None
    # 0xFF is EOF when read as a signed char.
    if ch in (4, 0xFF):
        return KeyType.EOF, " "
    if ch in (127, 8):
        return KeyType.BACKSPACE, " "
    if ch == 10:
        return KeyType.RET, " "
    if ch == 27:
        if next_byte() != 91:
            return KeyType.IGNORED, " "
        code = next_byte()
        if code == 51:
            if next_byte() == 126:
                return KeyType.CANC, " "
            return KeyType.IGNORED, " "
        return _CSI_KEYS.get(code, KeyType.IGNORED), " "
    return KeyType.ASCII, chr(ch)


def decode_keys(data: Iterable[int]) -> Iterator[Key]:
    """Yield the ``(key_type, char)`` events encoded in the bytes ``data``."""
    it = iter(data)

    def next_byte() -> Optional[int]:
        return next(it, None)

    while (key := _read_key(next_byte)) is not None:
        yield key


class TerminalKeyboard(InputDevice):
    """Reads keys from ``fd`` on a background thread and posts them."""

    def __init__(self, scheduler: Scheduler, fd: Optional[int] = None) -> None:
        super().__init__(scheduler)
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._thread: Optional[threading.Thread] = None
        self._stop_r = -1
        self._stop_w = -1
        self._saved_attrs: Optional[list] = None

    def __enter__(self) -> "TerminalKeyboard":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> None:
        """Switch the terminal to raw mode and begin reading keys."""
        if self._thread is not None:
            raise RuntimeError("keyboard already started")
        self._to_manual_mode()
        self._stop_r, self._stop_w = os.pipe()
        self._thread = threading.Thread(target=self._read, daemon=True)
        self._thread.start()

    def close(self) -> None:
        """Stop reading and restore the terminal mode."""
        if self._thread is None:
            return
        self._to_standard_mode()
        os.write(self._stop_w, b" ")
        self._thread.join()
        os.close(self._stop_w)
        os.close(self._stop_r)
        self._thread = None

    def _next_byte(self) -> Optional[int]:
        ready, _, _ = select.select([self.fd, self._stop_r], [], [])
        if self._stop_r in ready:
            raise _Stopped
        data = os.read(self.fd, 1)
        return data[0] if data else None

    def _read(self) -> None:
        try:
            while True:
                key = _read_key(self._next_byte)
                if key is None:
                    self.notify(KeyType.EOF, " ")
                    return
                self.notify(*key)
        except (_Stopped, OSError):
            return

    def _to_manual_mode(self) -> None:
        if not os.isatty(self.fd):
            return
        import termios

        self._saved_attrs = termios.tcgetattr(self.fd)
        attrs = list(self._saved_attrs)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self.fd, termios.TCSANOW, attrs)

    def _to_standard_mode(self) -> None:
        if self._saved_attrs is None:
            return
        import termios

        termios.tcsetattr(self.fd, termios.TCSANOW, self._saved_attrs)
        self._saved_attrs = None