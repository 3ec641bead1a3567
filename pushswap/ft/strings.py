"""String searching, comparison, copying and building helpers.

Positions are returned as indices rather than pointers; ``None`` stands for
"not found". Searching for the NUL character finds the end of the string.
The bounded copy functions work on mutable sequences (a ``list`` of
characters or a ``bytearray``) that hold the string's contents.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

Char = Union[int, str]

_NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _require_count(n: int, what: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference of the first unequal pair, a shorter
    string counting as ending in NUL, or 0 when the prefixes match.
    """
    _require_count(n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _require_count(n)
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return "".join(s)


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    return a + b


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives the empty string.
    """
    _require_count(start, "start")
    _require_count(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: Optional[str]) -> str:
    """``s`` with characters of ``charset`` removed from both ends.

    With no charset (``None``) the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, char)`` on each element of ``chars`` in place.

    A result other than ``None`` replaces the element at that index.
    """
    for index, ch in enumerate(list(chars)):
        result = f(index, ch)
        if result is not None:
            chars[index] = result


def strlcpy(dst: MutableSequence, src, size: int) -> int:
    """Copy ``src`` into ``dst`` keeping at most ``size - 1`` characters.

    With ``size`` 0 ``dst`` is left untouched. Returns ``len(src)``.
    """
    _require_count(size, "size")
    if size > 0:
        dst[:] = src[:size - 1]
    return len(src)


def strlcat(dst: MutableSequence, src, size: int) -> int:
    """Append ``src`` to ``dst`` so the total stays below ``size``.

    Returns ``min(len(dst), size) + len(src)``, taken before appending: the
    length the result would have had without truncation.
    """
    _require_count(size, "size")
    dst_len = len(dst)
    if size > 0 and dst_len < size - 1:
        dst[dst_len:] = src[:size - 1 - dst_len]
    return min(dst_len, size) + len(src)