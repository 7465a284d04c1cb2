"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass
class Node:
    """One link of a list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.append(item)

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Insert *content* at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, release: Callable[[Any], None] | None = None) -> Any:
        """Remove the first element, pass it to *release* if given, and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if release is not None:
            release(node.content)
        return node.content

    def clear(self, release: Callable[[Any], None] | None = None) -> None:
        """Remove every element, passing each to *release* in order if given."""
        while self.head is not None:
            self.pop_front(release)

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* on every element in order."""
        for content in self:
            func(content)