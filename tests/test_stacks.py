import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Operation, Stacks, is_reverse_sorted, is_sorted


def test_operation_from_name():
    assert Operation("rrr") is Operation.RRR
    assert str(Operation.PB) == "pb"


def test_unknown_operation_raises():
    stacks = Stacks([3, 1])
    with pytest.raises(ValueError):
        stacks.apply("xx")
    assert stacks.operations == []


def test_new_stacks_hold_values_in_a():
    stacks = Stacks([5, -2, 9])
    assert list(stacks.a) == [5, -2, 9]
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_swap_exchanges_top_two():
    values = [4, 7, 1]
    stacks = Stacks(values)
    stacks.apply(Operation.SA)
    assert list(stacks.a) == [values[1], values[0], values[2]]
    stacks.apply("sa")
    assert list(stacks.a) == values


def test_rotate_moves_top_to_bottom():
    values = [4, 7, 1, 8]
    stacks = Stacks(values)
    stacks.apply("ra")
    assert list(stacks.a) == values[1:] + values[:1]
    stacks.apply("rra")
    assert list(stacks.a) == values


def test_push_moves_between_stacks():
    values = [4, 7, 1]
    stacks = Stacks(values)
    stacks.apply("pb")
    stacks.apply("pb")
    assert list(stacks.b) == [values[1], values[0]]
    assert list(stacks.a) == values[2:]
    stacks.apply("pa")
    stacks.apply("pa")
    assert list(stacks.a) == values
    assert not stacks.b


def test_double_operations_act_on_both():
    stacks = Stacks([1, 2, 3, 4])
    for _ in range(2):
        stacks.apply("pb")
    a_before, b_before = list(stacks.a), list(stacks.b)
    stacks.apply("ss")
    assert list(stacks.a) == a_before[::-1]
    assert list(stacks.b) == b_before[::-1]
    stacks.apply("rr")
    stacks.apply("rrr")
    assert list(stacks.a) == a_before[::-1]
    assert list(stacks.b) == b_before[::-1]


def test_operations_are_recorded_in_order():
    stacks = Stacks([3, 2, 1])
    for name in ("pb", "ra", "pa", "rra"):
        stacks.apply(name)
    assert stacks.operations == [Operation.PB, Operation.RA, Operation.PA, Operation.RRA]


@pytest.mark.parametrize("name", ["sb", "pa", "rb", "rrb", "ss", "rr", "rrr"])
def test_operations_on_empty_b_raise(name):
    stacks = Stacks([2, 1, 3])
    with pytest.raises(IndexError):
        stacks.apply(name)
    assert list(stacks.a) == [2, 1, 3]
    assert stacks.operations == []


def test_swap_needs_two_elements():
    stacks = Stacks([1])
    with pytest.raises(IndexError):
        stacks.apply("sa")


@given(
    st.lists(st.integers(), unique=True, max_size=8),
    st.lists(st.sampled_from(list(Operation)), max_size=30),
)
def test_operations_preserve_elements(values, ops):
    stacks = Stacks(values)
    applied = []
    for op in ops:
        before = (list(stacks.a), list(stacks.b))
        try:
            stacks.apply(op)
        except IndexError:
            assert (list(stacks.a), list(stacks.b)) == before
        else:
            applied.append(op)
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(values)
    assert stacks.operations == applied


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert is_sorted([7])
    assert not is_sorted([])
    assert not is_sorted([2, 1, 3])


def test_is_reverse_sorted():
    assert is_reverse_sorted([3, 2, 1])
    assert is_reverse_sorted([7])
    assert not is_reverse_sorted([])
    assert not is_reverse_sorted([1, 3, 2])


@given(st.lists(st.integers(), min_size=1))
def test_sorted_and_reversed_agree(values):
    assert is_sorted(sorted(values))
    assert is_reverse_sorted(sorted(values, reverse=True))
    assert is_sorted(values) == is_reverse_sorted(values[::-1])