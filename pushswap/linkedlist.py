"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        for content in reversed(list(items)):
            self.push_front(content)

    def _nodes(self) -> Iterator[ListNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the front and return its node."""
        node = ListNode(content, self._head)
        self._head = node
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` at the end and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove_first(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Unlink the first node, pass its content to ``delete`` and return it."""
        if self._head is None:
            raise IndexError("remove_first from an empty list")
        node = self._head
        self._head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list; ``delete`` sees the contents from last to first."""
        contents = list(self)
        self._head = None
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the results built so far are passed to ``delete``
        from last to first and the exception propagates.
        """
        results = []
        try:
            for content in self:
                results.append(func(content))
        except Exception:
            if delete is not None:
                for item in reversed(results):
                    delete(item)
            raise
        return LinkedList(results)