"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that hands out its nodes and iterates over contents."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove(self, node: Node, delete: Deleter = None) -> None:
        """Unlink ``node`` and pass its content to ``delete``.

        Raises ``ValueError`` if the node is not in this list.
        """
        previous = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                if delete is not None:
                    delete(current.content)
                return
            previous = current
        raise ValueError("node is not in this list")

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, contents already produced are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result