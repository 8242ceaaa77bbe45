"""Singly linked lists and the point where two of them merge."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of the list in order."""
    return [node.value for node in _nodes(head)]


def length(head: ListNode | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def attach(first: ListNode | None, second: ListNode | None, position: int) -> None:
    """Make the tail of ``second`` point at the node of ``first`` at ``position``.

    Positions count from 1.
    """
    if position < 1:
        raise ValueError("position counts from 1")
    if second is None:
        raise ValueError("cannot attach an empty list")
    target = next((node for index, node in enumerate(_nodes(first), 1) if index == position), None)
    if target is None:
        raise IndexError(f"position {position} is past the end of the list")
    *_, tail = _nodes(second)
    tail.next = target


def intersection_value(first: ListNode | None, second: ListNode | None) -> Any | None:
    """Return the value of the first node shared by both lists, or None."""
    longer, shorter = first, second
    difference = length(first) - length(second)
    if difference < 0:
        longer, shorter = second, first
        difference = -difference
    for _ in range(difference):
        longer = longer.next
    for a, b in zip(_nodes(longer), _nodes(shorter)):
        if a is b:
            return a.value
    return None