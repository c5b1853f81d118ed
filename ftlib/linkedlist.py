"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Add ``content`` as the new first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` as the new last element and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, front to back, passing each content to ``delete``."""
        node = self.head
        self.head = None
        self._tail = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Optional[Callable[[Any], Any]],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """A new list of ``f(content)`` for every element; contents are shared when ``f`` is None.

        If ``f`` raises, the elements built so far are cleared through
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(content if f is None else f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result