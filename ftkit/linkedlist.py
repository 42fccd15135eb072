"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


def delete_one(node: Optional[Node], delete: Optional[Deleter]) -> None:
    """Release one node, handing its content to ``delete``.

    Nothing happens when either argument is None. The node's link to the
    rest of the list is cut; the nodes after it are left alone.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list that holds its first node in ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is None:
            return
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; its old successor is replaced."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node``, and any nodes it already links to, at the end."""
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def clear(self, delete: Optional[Deleter]) -> None:
        """Release every node, front to back, and leave the list empty.

        Without a ``delete`` function the list is left untouched.
        """
        if delete is None:
            return
        for node in self._nodes():
            delete_one(node, delete)
        self.head = None

    def for_each(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of every node, front to back."""
        if f is None:
            return
        for node in self._nodes():
            f(node.content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> "LinkedList":
        """Return a new list of ``f(content)`` for every node.

        If ``f`` returns None for any content, the contents already produced
        are handed to ``delete`` and ValueError is raised.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete function")
        result = LinkedList()
        tail: Optional[Node] = None
        for node in self._nodes():
            new_content = f(node.content)
            if new_content is None:
                result.clear(delete)
                raise ValueError("mapping produced no content for an element")
            new_node = Node(new_content)
            if tail is None:
                result.head = new_node
            else:
                tail.next = new_node
            tail = new_node
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"