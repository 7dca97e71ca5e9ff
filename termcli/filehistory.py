"""Command history kept in a plain text file, one command per line."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


class FileHistoryStorage:
    """Stores at most ``max_size`` commands in ``file_name``, oldest first."""

    def __init__(self, file_name: str | os.PathLike[str], max_size: int = 1000) -> None:
        self.path = Path(file_name)
        self.max_size = max_size

    def store(self, commands: Iterable[str]) -> None:
        """Append ``commands``, dropping the oldest beyond the size limit."""
        history = self.commands()
        history.extend(commands)
        if len(history) > self.max_size:
            del history[: len(history) - self.max_size]
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.writelines(f"{line}\n" for line in history)

    def commands(self) -> list[str]:
        """Return the stored commands; an absent file holds none."""
        try:
            content = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def clear(self) -> None:
        """Empty the history file."""
        with self.path.open("w", encoding="utf-8"):
            pass