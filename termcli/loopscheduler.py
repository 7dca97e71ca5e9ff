"""A simple thread-safe task queue that runs tasks on the caller's thread."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Optional

Task = Callable[[], object]


class LoopScheduler:
    """FIFO scheduler: ``post`` from any thread, run tasks with ``run``."""

    def __init__(self) -> None:
        self._tasks: deque[Optional[Task]] = deque()
        self._running = True
        self._cond = threading.Condition()

    def __enter__(self) -> "LoopScheduler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def stop(self) -> None:
        """Stop the scheduler and wake any waiting ``exec_one``."""
        with self._cond:
            self._running = False
            self._cond.notify_all()

    def run(self) -> None:
        """Execute tasks until the scheduler is stopped."""
        while self.exec_one():
            pass

    def stopped(self) -> bool:
        with self._cond:
            return not self._running

    def post(self, task: Optional[Task]) -> None:
        """Queue ``task`` for execution."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify_all()

    def exec_one(self) -> bool:
        """Wait for one task and run it; return False once stopped."""
        with self._cond:
            self._cond.wait_for(lambda: not self._running or bool(self._tasks))
            if not self._running:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True

    def poll_one(self) -> bool:
        """Run one queued task without waiting; return whether one ran."""
        with self._cond:
            if not self._running or not self._tasks:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True