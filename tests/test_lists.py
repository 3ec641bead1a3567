import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.ft.lists import (
    Node,
    lstadd_back,
    lstadd_front,
    lstclear,
    lstdelone,
    lstiter,
    lstlast,
    lstmap,
    lstnew,
    lstsize,
)


def _build(values):
    head = None
    for value in values:
        head = lstadd_back(head, lstnew(value))
    return head


def _contents(head):
    seen = []
    lstiter(head, seen.append)
    return seen


def test_lstnew_holds_content_and_no_next():
    node = lstnew("abc")
    assert node.content == "abc"
    assert node.next is None


def test_add_front_to_empty_returns_node():
    node = lstnew(1)
    assert lstadd_front(None, node) is node


def test_add_front_places_node_first():
    head = _build([1, 2])
    new = lstnew(0)
    head = lstadd_front(head, new)
    assert head is new
    assert _contents(head) == [0, 1, 2]


def test_add_front_none_node_keeps_list():
    head = _build([5])
    assert lstadd_front(head, None) is head
    assert lstadd_front(None, None) is None


def test_add_back_appends_at_end():
    head = _build(["a", "b"])
    last = lstnew("c")
    result = lstadd_back(head, last)
    assert result is head
    assert lstlast(head) is last
    assert _contents(head) == ["a", "b", "c"]


def test_add_back_none_node_keeps_list():
    head = _build([1, 2])
    assert lstadd_back(head, None) is head
    assert lstsize(head) == 2


def test_size_and_last_of_empty():
    assert lstsize(None) == 0
    assert lstlast(None) is None


@given(st.lists(st.integers()))
def test_build_round_trip(values):
    head = _build(values)
    assert _contents(head) == values
    assert lstsize(head) == len(values)


@given(st.lists(st.integers(), min_size=1))
def test_last_holds_final_value(values):
    head = _build(values)
    assert lstlast(head).content == values[-1]
    assert lstlast(head).next is None


@given(st.lists(st.integers()))
def test_add_front_reverses_order(values):
    head = None
    for value in values:
        head = lstadd_front(head, lstnew(value))
    assert _contents(head) == list(reversed(values))


def test_node_iteration_yields_nodes():
    head = _build([1, 2, 3])
    assert [node.content for node in head] == [1, 2, 3]


def test_lstdelone_calls_delete_with_content():
    deleted = []
    lstdelone(lstnew("x"), deleted.append)
    assert deleted == ["x"]


def test_lstdelone_none_does_nothing():
    deleted = []
    lstdelone(None, deleted.append)
    assert deleted == []


def test_lstclear_deletes_every_content_in_order():
    head = _build([1, 2, 3])
    second = head.next
    deleted = []
    assert lstclear(head, deleted.append) is None
    assert deleted == [1, 2, 3]
    assert head.next is None
    assert second.next is None


def test_lstclear_without_delete_keeps_list():
    head = _build([1, 2])
    assert lstclear(head, None) is head
    assert _contents(head) == [1, 2]


def test_lstclear_empty():
    deleted = []
    assert lstclear(None, deleted.append) is None
    assert deleted == []


@given(st.lists(st.integers()))
def test_lstmap_applies_function_and_leaves_original(values):
    head = _build(values)
    mapped = lstmap(head, lambda v: v * 2, lambda v: None)
    assert _contents(mapped) == [v * 2 for v in values]
    assert _contents(head) == values


def test_lstmap_makes_new_nodes():
    head = _build([1, 2])
    mapped = lstmap(head, lambda v: v, None)
    assert all(a is not b for a, b in zip(head, mapped))
    assert _contents(mapped) == [1, 2]


def test_lstmap_empty_or_no_function():
    assert lstmap(None, str, None) is None
    assert lstmap(_build([1]), None, None) is None


def test_lstmap_failure_releases_partial_result():
    deleted = []

    def f(value):
        if value == 3:
            raise ValueError("bad value")
        return value * 10

    with pytest.raises(ValueError):
        lstmap(_build([1, 2, 3, 4]), f, deleted.append)
    assert deleted == [10, 20]


def test_node_equality_is_identity():
    a = Node(1)
    b = Node(1)
    assert a != b
    assert a == a