"""Turning command-line arguments into the list of numbers to sort."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.ft.chars import isdigit
from pushswap.ft.convert import atoi, itoa, split
from pushswap.ft.strings import strncmp


class ArgumentError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def split_args(argv: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split the result into words.

    Only the space character separates words; an empty result means there
    is nothing to sort.
    """
    return split(" ".join(argv), " ")


def _looks_numeric(word: str) -> bool:
    body = word
    if len(word) > 1 and word[0] in "+-" and word[1] != "0":
        body = word[1:]
    return all(isdigit(ch) for ch in body)


def _is_canonical_int(word: str) -> bool:
    return strncmp(itoa(atoi(word)), word, len(word)) == 0


def validate(words: Sequence[str]) -> list[int]:
    """Check every word and return the numbers they hold.

    Each word must be a plain decimal integer in canonical form that fits a
    32-bit signed integer, and no number may appear twice. Raises
    ArgumentError otherwise.
    """
    for word in words:
        if not _looks_numeric(word):
            raise ArgumentError(f"not a number: {word!r}")
    for word in words:
        if not _is_canonical_int(word):
            raise ArgumentError(f"not a valid integer: {word!r}")
    values = [atoi(word) for word in words]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ArgumentError(f"duplicate number: {value}")
        seen.add(value)
    return values


def parse_numbers(argv: Iterable[str]) -> list[int]:
    """Split and validate the arguments; an empty list when there are no words."""
    return validate(split_args(argv))