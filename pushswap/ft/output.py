"""Writing characters, strings and numbers to text streams, and a small printf.

The formatter understands the conversions ``%c %s %d %i %u %x %X %p %%``.
An unknown conversion character is written as it is, without the ``%``.
A lone ``%`` at the end of the format writes nothing.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO, Union

from pushswap.ft.convert import itoa

Char = Union[int, str]

_UINT_MODULUS = 2**32
_POINTER_MODULUS = 2**64


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) % 256)


def putchar_fd(c: Char, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write ``n``, taken as a 32-bit signed integer, in decimal."""
    stream.write(itoa(operator.index(n)))


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _signed(arg: Any) -> str:
    return itoa(operator.index(arg))


def _unsigned(arg: Any) -> str:
    return str(operator.index(arg) % _UINT_MODULUS)


def _hex_lower(arg: Any) -> str:
    return format(operator.index(arg) % _UINT_MODULUS, "x")


def _hex_upper(arg: Any) -> str:
    return format(operator.index(arg) % _UINT_MODULUS, "X")


def _pointer(arg: Any) -> str:
    address = 0 if arg is None else operator.index(arg)
    return "0x" + format(address % _POINTER_MODULUS, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _next_arg(pending: Iterator[Any]) -> Any:
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pending = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            out.append(convert(_next_arg(pending)))
        else:
            out.append(spec)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Render ``fmt`` with ``args`` to standard output; returns the length written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)