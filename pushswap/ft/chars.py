"""ASCII character classification and case conversion.

Every function accepts either a code point (``int``) or a one-character
string. The case converters hand back the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space (32) up to tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)