"""Integer parsing and formatting with 32-bit signed semantics, and word splitting."""

from __future__ import annotations

from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is honoured; parsing
    stops at the first non-digit. Values outside the 32-bit signed range wrap
    around, as a machine ``int`` would.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    value = int(digits) if digits else 0
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Format ``n``, taken as a 32-bit signed integer, in decimal."""
    return str(_wrap32(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]