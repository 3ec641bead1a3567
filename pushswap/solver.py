"""Choosing the sequence of stack operations that sorts a list of numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from pushswap.stacks import Operation, Stacks, is_sorted


@dataclass(frozen=True)
class RotationCost:
    """Rotation counts needed to bring two positions to the tops of the stacks.

    ``rr`` and ``rrr`` are the total moves when both stacks turn the same way
    using the combined operations.
    """

    ra: int
    rb: int
    rr: int
    rra: int
    rrb: int
    rrr: int

    @property
    def cost(self) -> int:
        """The cheapest of the four ways of combining the rotations."""
        return min(self.ra + self.rrb, self.rra + self.rb, self.rr, self.rrr)


def calc_cost(a_index: int, b_index: int, count_a: int, count_b: int) -> RotationCost:
    """Rotation counts for the 1-based positions ``a_index`` and ``b_index``."""
    ra = a_index - 1
    rb = b_index - 1
    rra = count_a - a_index + 1
    rrb = count_b - b_index + 1
    return RotationCost(ra, rb, max(ra, rb), rra, rrb, max(rra, rrb))


def target_in_b(value: int, stack_b: Sequence[int]) -> int:
    """1-based position in ``stack_b`` under which ``value`` belongs.

    That is the largest element smaller than ``value``, or the largest
    element of all when none is smaller.
    """
    items = list(stack_b)
    if not items:
        raise ValueError("stack b is empty")
    smaller = [x for x in items if x < value]
    target = max(smaller) if smaller else max(items)
    return items.index(target) + 1


def target_in_a(value: int, stack_a: Sequence[int]) -> int:
    """1-based position in ``stack_a`` above which ``value`` belongs.

    That is the smallest element larger than ``value``, or the smallest
    element of all when none is larger.
    """
    items = list(stack_a)
    if not items:
        raise ValueError("stack a is empty")
    larger = [x for x in items if x > value]
    target = min(larger) if larger else min(items)
    return items.index(target) + 1


def _repeat(stacks: Stacks, op: Operation, times: int) -> None:
    for _ in range(max(times, 0)):
        stacks.apply(op)


def _bring_to_top(
    stacks: Stacks, count: int, index: int, forward: Operation, backward: Operation
) -> None:
    if count // 2 + 1 >= index:
        _repeat(stacks, forward, index - 1)
    else:
        _repeat(stacks, backward, count - index + 1)


def _cheapest_move(stacks: Stacks) -> RotationCost:
    best: Optional[RotationCost] = None
    count_a, count_b = len(stacks.a), len(stacks.b)
    for a_index, value in enumerate(stacks.a, start=1):
        candidate = calc_cost(a_index, target_in_b(value, stacks.b), count_a, count_b)
        if best is None or candidate.cost < best.cost:
            best = candidate
    assert best is not None
    return best


def _push_to_b(stacks: Stacks, c: RotationCost) -> None:
    if min(c.ra + c.rrb, c.rra + c.rb) < min(c.rr, c.rrr):
        if c.ra + c.rrb < c.rra + c.rb:
            _repeat(stacks, Operation.RA, c.ra)
            _repeat(stacks, Operation.RRB, c.rrb)
        else:
            _repeat(stacks, Operation.RB, c.rb)
            _repeat(stacks, Operation.RRA, c.rra)
    elif c.rr < c.rrr:
        _repeat(stacks, Operation.RR, min(c.ra, c.rb))
        _repeat(stacks, Operation.RB, c.rr - c.ra)
        _repeat(stacks, Operation.RA, c.rr - c.rb)
    else:
        _repeat(stacks, Operation.RRR, min(c.rra, c.rrb))
        _repeat(stacks, Operation.RRB, c.rrr - c.rra)
        _repeat(stacks, Operation.RRA, c.rrr - c.rrb)
    stacks.apply(Operation.PB)


def _sort_three(stacks: Stacks) -> None:
    a = stacks.a
    if a[0] == max(a):
        stacks.apply(Operation.RA)
    elif a[-1] == min(a):
        stacks.apply(Operation.RRA)
    if not is_sorted(stacks.a):
        stacks.apply(Operation.SA)
    if not is_sorted(stacks.a):
        stacks.apply(Operation.RA)


def _sort_b(stacks: Stacks) -> None:
    b = list(stacks.b)
    _bring_to_top(stacks, len(b), b.index(max(b)) + 1, Operation.RB, Operation.RRB)


def _push_to_a(stacks: Stacks) -> None:
    while stacks.b:
        index = target_in_a(stacks.b[0], stacks.a)
        _bring_to_top(stacks, len(stacks.a), index, Operation.RA, Operation.RRA)
        stacks.apply(Operation.PA)


def _sort_a(stacks: Stacks) -> None:
    if is_sorted(stacks.a):
        return
    a = list(stacks.a)
    _bring_to_top(stacks, len(a), a.index(min(a)) + 1, Operation.RA, Operation.RRA)


def _advanced_sort(stacks: Stacks) -> None:
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    while len(stacks.a) > 3:
        _push_to_b(stacks, _cheapest_move(stacks))
    if len(stacks.a) == 3:
        _sort_three(stacks)
    _sort_b(stacks)
    _push_to_a(stacks)
    _sort_a(stacks)


def sort_stacks(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values`` in stack a, smallest on top.

    An empty or already sorted input needs no operations.
    """
    stacks = Stacks(values)
    if not stacks.a or is_sorted(stacks.a):
        return []
    count = len(stacks.a)
    if count == 2:
        stacks.apply(Operation.SA)
    elif count == 3:
        _sort_three(stacks)
    else:
        _advanced_sort(stacks)
    return list(stacks.operations)