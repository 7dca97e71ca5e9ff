"""Strict conversion of command-line words into typed values."""

from __future__ import annotations

import enum
from typing import Any, Callable

_DIGITS = frozenset("0123456789")


class BadConversion(ValueError):
    """Raised when a string cannot be read as the requested type."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


class IntType(enum.Enum):
    """Fixed-width integer types with their bit width and signedness."""

    SIGNED_CHAR = (8, True)
    SHORT = (16, True)
    INT = (32, True)
    LONG = (64, True)
    LONG_LONG = (64, True, "long long")
    UNSIGNED_CHAR = (8, False)
    UNSIGNED_SHORT = (16, False)
    UNSIGNED_INT = (32, False)
    UNSIGNED_LONG = (64, False)
    UNSIGNED_LONG_LONG = (64, False, "unsigned long long")

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def _digits(text: str) -> int:
    if not text or not all(c in _DIGITS for c in text):
        raise BadConversion()
    return int(text)


def parse_integer(text: str, int_type: IntType = IntType.INT) -> int:
    """Parse an optionally signed decimal integer that must fit ``int_type``."""
    if not text:
        raise BadConversion()
    negative = False
    if text[0] == "-" and int_type.signed:
        negative = True
        text = text[1:]
    elif text[0] == "+":
        text = text[1:]
    value = _digits(text)
    if negative:
        value = -value
    if not int_type.min <= value <= int_type.max:
        raise BadConversion()
    return value


def parse_bool(text: str) -> bool:
    """Accept ``true``/``false`` or an integer equal to 1 or 0."""
    if text == "true":
        return True
    if text == "false":
        return False
    value = parse_integer(text, IntType.LONG_LONG)
    if value == 1:
        return True
    if value == 0:
        return False
    raise BadConversion()


def parse_char(text: str) -> str:
    """Accept exactly one character."""
    if len(text) != 1:
        raise BadConversion()
    return text


def parse_float(text: str) -> float:
    """Parse a floating point number; the whole string must be consumed."""
    if not text or any(c.isspace() for c in text) or "_" in text:
        raise BadConversion()
    try:
        result = float(text)
    except ValueError:
        try:
            result = float.fromhex(text)
        except (ValueError, OverflowError):
            raise BadConversion() from None
    if result in (float("inf"), float("-inf")) and "inf" not in text.lower():
        raise BadConversion()
    return result


def from_string(text: str, target: Any) -> Any:
    """Convert ``text`` into ``target``.

    ``target`` may be ``str``, ``bool``, ``int``, ``float``, ``type(None)``,
    an :class:`IntType`, or any callable taking a string.
    """
    if isinstance(target, IntType):
        return parse_integer(text, target)
    if target is str:
        return text
    if target is type(None):
        return None
    if target is bool:
        return parse_bool(text)
    if target is int:
        return parse_integer(text, IntType.LONG_LONG)
    if target is float:
        return parse_float(text)
    parser: Callable[[str], Any] = target
    try:
        return parser(text.rstrip())
    except (ValueError, TypeError, ArithmeticError):
        raise BadConversion() from None