"""Shared constants and small helpers used by the maze tools."""

from __future__ import annotations

import random
import re

WALL = "X"
FREE_CELL = "*"
PATH_CELL = "o"

EXIT_OK = 1
EXIT_ERROR = 84

_NUMBER_RE = re.compile(r"([^0-9]*)([0-9]*)")


def parse_number(text: str | None) -> int:
    """Read a leniently formatted integer.

    Every character before the first digit is skipped, each ``-`` among them
    flipping the sign; the digits that follow are read until the first
    non-digit. Text with no digits, or ``None``, gives 0.
    """
    if text is None:
        return 0
    match = _NUMBER_RE.match(text)
    prefix, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    sign = -1 if prefix.count("-") % 2 else 1
    return sign * int(digits)


def random_between(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer in the closed range ``[low, high]``."""
    return rng.randint(low, high)


def is_even(n: int) -> bool:
    """Tell whether ``n`` is divisible by two."""
    return n % 2 == 0