"""ANSI colour codes and the prompt/input colour profile."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

_COLOR_TERMS: tuple[str, ...] = (
    "ansi", "color", "console", "cygwin", "gnome", "konsole", "kterm",
    "linux", "msys", "putty", "rxvt", "screen", "vt100", "xterm",
)


class Style(enum.IntEnum):
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(enum.IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(enum.IntEnum):
    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgBright(enum.IntEnum):
    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgBright(enum.IntEnum):
    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


def sgr(value: int) -> str:
    """Return the ANSI select-graphic-rendition sequence for ``value``."""
    return f"\033[{int(value)}m"


def _sequence(values: Iterable[int]) -> str:
    return "".join(sgr(v) for v in values)


def supports_color(term: str | None) -> bool:
    """Tell whether a terminal named ``term`` (as in $TERM) understands colours."""
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


@dataclass
class _ColorProfile:
    enabled: bool = False


_profile = _ColorProfile()


def set_color() -> None:
    """Turn colours on for prompts and input."""
    _profile.enabled = True


def set_no_color() -> None:
    """Turn colours off for prompts and input."""
    _profile.enabled = False


def color_enabled() -> bool:
    """Tell whether colours are currently on."""
    return _profile.enabled


def before_prompt() -> str:
    """Sequence written before the prompt text."""
    return _sequence((Fg.GREEN, Style.BOLD)) if _profile.enabled else ""


def after_prompt() -> str:
    """Sequence written after the prompt text."""
    return sgr(Style.RESET) if _profile.enabled else ""


def before_input() -> str:
    """Sequence written before echoed user input."""
    return sgr(FgBright.GRAY) if _profile.enabled else ""


def after_input() -> str:
    """Sequence written after echoed user input."""
    return sgr(Style.RESET) if _profile.enabled else ""