"""Singly linked list of arbitrary contents.

A list is represented by its head ``Node`` (``None`` for the empty list).
Functions that can change which node is the head return the new head.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        """Yield this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    return iter(head) if head is not None else iter(())


def lstnew(content: Any) -> Node:
    """A new single-node list holding ``content``."""
    return Node(content)


def lstadd_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` before ``head``; returns the new head.

    A missing ``node`` leaves the list unchanged.
    """
    if node is None:
        return head
    if head is None:
        return node
    node.next = head
    return node


def lstadd_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append ``node`` after the last node of ``head``; returns the head.

    A missing ``node`` leaves the list unchanged.
    """
    if node is None:
        return head
    if head is None:
        return node
    last = lstlast(head)
    last.next = node
    return head


def lstsize(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lstlast(head: Optional[Node]) -> Optional[Node]:
    """The last node of the list, or None for the empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lstdelone(node: Optional[Node], delete: Callable[[Any], Any]) -> None:
    """Release ``node`` by handing its content to ``delete``."""
    if node is None:
        return
    delete(node.content)


def lstclear(
    head: Optional[Node], delete: Optional[Callable[[Any], Any]]
) -> Optional[Node]:
    """Release every node of the list; returns the (now empty) head.

    Without a ``delete`` callback nothing is done and ``head`` is returned.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node.next = None
        node = following
    return None


def lstiter(head: Optional[Node], f: Callable[[Any], Any]) -> None:
    """Call ``f`` on the content of every node, front to back."""
    for node in _nodes(head):
        f(node.content)


def lstmap(
    head: Optional[Node],
    f: Optional[Callable[[Any], Any]],
    delete: Optional[Callable[[Any], Any]],
) -> Optional[Node]:
    """A new list made of ``f(content)`` for every node.

    Returns None for an empty list or a missing ``f``. If ``f`` raises, the
    contents mapped so far are handed to ``delete`` and the error propagates.
    """
    if head is None or f is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    try:
        for node in head:
            created = Node(f(node.content))
            if tail is None:
                new_head = created
            else:
                tail.next = created
            tail = created
    except Exception:
        lstclear(new_head, delete)
        raise
    return new_head