"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that yields its contents in order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in items:
                self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the head; return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the tail; return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, handing each content to ``delete`` in order."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            if delete is not None:
                delete(node.content)

    def delete_first(self, delete: Deleter = None) -> None:
        """Remove the head node, handing its content to ``delete``.

        An empty list is left as it is.
        """
        node = self.head
        if node is None:
            return
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)

    def iterate(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list holding ``f(content)`` for each content.

        If ``f`` raises, the contents mapped so far are handed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result