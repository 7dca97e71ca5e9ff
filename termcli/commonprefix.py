"""Longest common prefix of a group of strings."""

from __future__ import annotations

from typing import Sequence


def common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strings``."""
    if not strings:
        raise ValueError("common_prefix requires at least one string")
    shortest = min(strings, key=len)
    for index, char in enumerate(shortest):
        if any(s[index] != char for s in strings):
            return shortest[:index]
    return shortest