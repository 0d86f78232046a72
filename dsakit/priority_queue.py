"""Priority queue kept as a list sorted by ascending priority number."""

from __future__ import annotations

import bisect
import sys
from collections.abc import Iterator
from typing import Optional

_HEADER = "Priority       Item"
_MENU = "\n1.Enqueue\n2.Dequeue\n3.Display\n4.Quit\n"


class PriorityQueue:
    """Items leave in ascending priority number; equal priorities leave first-in first-out.

    With ``ties_first`` a new item whose priority is not above the front
    item's goes straight to the front, ahead of equal priorities there.
    """

    def __init__(self, ties_first: bool = False) -> None:
        self.ties_first = ties_first
        self._entries: list[tuple[int, int]] = []

    def enqueue(self, item: int, priority: int) -> None:
        """Insert ``item`` with ``priority``; smaller numbers are served first."""
        entries = self._entries
        if not entries or priority < entries[0][0] or (
            self.ties_first and priority <= entries[0][0]
        ):
            entries.insert(0, (priority, item))
            return
        position = bisect.bisect_right(entries, priority, key=lambda entry: entry[0])
        entries.insert(position, (priority, item))

    def dequeue(self) -> int:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("UNDERFLOW")
        return self._entries.pop(0)[1]

    def display(self) -> str:
        """Return a header line and one right-aligned row per entry."""
        rows = (f"{priority:5d}        {item:5d}" for priority, item in self._entries)
        return "\n".join([_HEADER, *rows])

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(item, priority)`` pairs from front to rear."""
        return iter([(item, priority) for priority, item in self._entries])

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _enqueue_from_input(queue: PriorityQueue) -> None:
    print("\nplease enter all integer numbers : ")
    item = _parse_int(input("Input the item to be added in the queue : "))
    if item is None:
        print("Invalid input please input any Integer value")
        return
    priority = _parse_int(input("\nEnter its priority : "))
    if priority is None:
        print("Invalid input please input any Integer value")
        return
    queue.enqueue(item, priority)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive priority-queue menu on standard input."""
    queue = PriorityQueue()
    print("\n Program for priority queue using linkedlist")
    try:
        while True:
            print(_MENU)
            choice = _parse_int(input("Enter your choice : "))
            if choice is None or choice < 0:
                print("Invalid input please select any Integer between 1-to-4")
                continue
            if choice == 1:
                _enqueue_from_input(queue)
            elif choice == 2:
                if queue:
                    print(f"\n dequeued element: {queue.dequeue()}")
                else:
                    print("\n UNDERFLOW")
            elif choice == 3:
                if queue:
                    print("\nQueue is :\n")
                    print(queue.display())
                else:
                    print("queue is Empty")
            elif choice == 4:
                print("\nEXITTED")
                return 0
            else:
                print("\nWrong choice")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())