"""The two stacks of the push-swap game and the operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Iterable, Union


class Operation(str, Enum):
    """The moves allowed on the two stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


_SWAPS = {Operation.SA: "a", Operation.SB: "b", Operation.SS: "ab"}
_ROTATES = {Operation.RA: "a", Operation.RB: "b", Operation.RR: "ab"}
_REVERSE_ROTATES = {Operation.RRA: "a", Operation.RRB: "b", Operation.RRR: "ab"}
# destination, source
_PUSHES = {Operation.PA: ("a", "b"), Operation.PB: ("b", "a")}


class Stacks:
    """Stack ``a`` filled with the given values, an empty stack ``b``.

    The top of each stack is the left end of its deque. Every operation
    applied is recorded, in order, in ``operations``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _stack(self, name: str) -> deque[int]:
        return self.a if name == "a" else self.b

    def apply(self, op: Union[Operation, str]) -> None:
        """Perform ``op`` and record it.

        Raises ValueError for an unknown operation and IndexError when a
        stack holds too few elements for it; the stacks are then unchanged.
        """
        op = Operation(op)
        if op in _SWAPS:
            targets = [self._stack(name) for name in _SWAPS[op]]
            if any(len(stack) < 2 for stack in targets):
                raise IndexError(f"{op}: a stack holds fewer than two elements")
            for stack in targets:
                stack[0], stack[1] = stack[1], stack[0]
        elif op in _PUSHES:
            dest_name, src_name = _PUSHES[op]
            source = self._stack(src_name)
            if not source:
                raise IndexError(f"{op}: stack {src_name} is empty")
            self._stack(dest_name).appendleft(source.popleft())
        else:
            names = _ROTATES.get(op) or _REVERSE_ROTATES[op]
            targets = [self._stack(name) for name in names]
            if any(not stack for stack in targets):
                raise IndexError(f"{op}: a stack is empty")
            step = -1 if op in _ROTATES else 1
            for stack in targets:
                stack.rotate(step)
        self.operations.append(op)


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` is non-empty and in ascending order."""
    items = list(values)
    return bool(items) and all(x <= y for x, y in pairwise(items))


def is_reverse_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` is non-empty and in descending order."""
    items = list(values)
    return bool(items) and all(x >= y for x, y in pairwise(items))