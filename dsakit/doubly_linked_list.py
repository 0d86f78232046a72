"""Doubly linked list of integers with links in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _Node:
    __slots__ = ("info", "prev", "next")

    def __init__(self, info: int) -> None:
        self.info = info
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList:
    """A linear list whose nodes know both their neighbours."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.add_at_end(item)

    def add_to_empty(self, data: int) -> None:
        """Make the list hold ``data`` alone, discarding any previous contents."""
        node = _Node(data)
        self._head = self._tail = node
        self._size = 1

    def add_at_beginning(self, data: int) -> None:
        """Insert ``data`` before the first node."""
        if self._head is None:
            self.add_to_empty(data)
            return
        node = _Node(data)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._size += 1

    def add_at_end(self, data: int) -> None:
        """Insert ``data`` after the last node."""
        if self._tail is None:
            self.add_to_empty(data)
            return
        node = _Node(data)
        node.prev = self._tail
        self._tail.next = node
        self._tail = node
        self._size += 1

    def add_after(self, data: int, item: int) -> None:
        """Insert ``data`` after the first node holding ``item``."""
        target = self._find(item)
        if target is None:
            raise ValueError(f"{item} not present in the list")
        node = _Node(data)
        node.prev = target
        node.next = target.next
        if target.next is not None:
            target.next.prev = node
        else:
            self._tail = node
        target.next = node
        self._size += 1

    def add_before(self, data: int, item: int) -> None:
        """Insert ``data`` before the first node holding ``item``."""
        if self._head is None:
            raise ValueError("List is empty")
        target = self._find(item)
        if target is None:
            raise ValueError(f"{item} not present in the list")
        node = _Node(data)
        node.next = target
        node.prev = target.prev
        if target.prev is not None:
            target.prev.next = node
        else:
            self._head = node
        target.prev = node
        self._size += 1

    def delete(self, data: int) -> None:
        """Remove the first node holding ``data``."""
        if self._head is None:
            raise ValueError("List is empty")
        node = self._find(data)
        if node is None:
            raise ValueError(f"Element {data} not found")
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def _find(self, item: int) -> Optional[_Node]:
        node = self._head
        while node is not None:
            if node.info == item:
                return node
            node = node.next
        return None

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.info
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.info
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"