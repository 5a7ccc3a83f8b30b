"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Release = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list of contents, from front to back."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        return self._tail

    def pop_front(self, release: Release = None) -> Any:
        """Remove the first node, passing its content to ``release`` if given.

        Returns the removed content. Raises IndexError on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if release is not None:
            release(node.content)
        return node.content

    def clear(self, release: Release = None) -> None:
        """Remove every node, passing each content to ``release`` in order."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if release is not None:
                release(node.content)
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content from front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents built so far are passed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next