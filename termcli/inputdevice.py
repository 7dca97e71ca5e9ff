"""Key events and the base for devices that deliver them through a scheduler."""

from __future__ import annotations

import enum
from typing import Callable, Optional, Protocol


class KeyType(enum.Enum):
    ASCII = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BACKSPACE = enum.auto()
    CANC = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    RET = enum.auto()
    EOF = enum.auto()
    IGNORED = enum.auto()


class Scheduler(Protocol):
    def post(self, task: Callable[[], object]) -> None: ...


KeyHandler = Callable[[KeyType, str], object]


class InputDevice:
    """Posts every key event to a scheduler, which hands it to the handler."""

    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler
        self._handler: Optional[KeyHandler] = None

    def register(self, handler: Optional[KeyHandler]) -> None:
        """Set the callable that receives ``(key_type, char)``."""
        self._handler = handler

    def notify(self, key_type: KeyType, char: str = " ") -> None:
        """Schedule delivery of one key event."""

        def deliver() -> None:
            if self._handler is not None:
                self._handler(key_type, char)

        self.scheduler.post(deliver)