"""A minimal singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell holding some content and a link to the next cell."""

    content: Any = None
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        return iterate(self)


def push_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put node in front of head and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def iterate(head: Optional[Node]) -> Iterator[Node]:
    """Yield every node from head to the end of the list."""
    node = head
    while node is not None:
        yield node
        node = node.next


def for_each(head: Optional[Node], f: Optional[Callable[[Node], object]]) -> None:
    """Call f on every node of the list."""
    if f is None:
        return
    for node in iterate(head):
        f(node)


def map_nodes(
    head: Optional[Node], f: Optional[Callable[[Node], Node]]
) -> Optional[Node]:
    """A new list made of f applied to every node, in the same order."""
    if head is None or f is None:
        return None
    mapped = [f(node) for node in iterate(head)]
    for node, following in zip(mapped, mapped[1:]):
        node.next = following
    return mapped[0]


def delete_one(
    node: Optional[Node], callback: Optional[Callable[[Any], object]]
) -> None:
    """Hand the node's content to callback and unlink the node."""
    if node is None or callback is None:
        return
    callback(node.content)
    node.content = None
    node.next = None


def delete_all(
    head: Optional[Node], callback: Optional[Callable[[Any], object]]
) -> None:
    """Hand every content to callback, last node first, and unlink the list."""
    if head is None or callback is None:
        return
    for node in reversed(list(iterate(head))):
        delete_one(node, callback)