"""First-in first-out queue of quilt orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_HEADER = "Name       \tContactNumber\t\tEmail\t\t\tSize\t\tColor\t\tTheme"
_GAP = "             |"


@dataclass(frozen=True)
class Order:
    """One customer order."""

    name: str
    contact_number: str
    email: str
    size: str
    color: str
    theme: str

    def row(self) -> str:
        """Render the order as one row of the queue listing."""
        return (
            f"{self.name}     |{self.contact_number}{_GAP}{self.email}{_GAP}"
            f"{self.size}{_GAP}{self.color}{_GAP}{self.theme}"
        )


class OrderQueue:
    """Orders served in the order they arrived."""

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: deque[Order] = deque(orders)

    def enqueue(self, order: Order) -> None:
        """Add ``order`` at the rear."""
        self._orders.append(order)

    def dequeue(self) -> Order:
        """Remove and return the order at the front."""
        if not self._orders:
            raise IndexError("dequeue from an empty queue")
        return self._orders.popleft()

    def display(self) -> str:
        """Return a header line followed by one row per order."""
        return "\n".join([_HEADER, *(order.row() for order in self._orders)])

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __len__(self) -> int:
        return len(self._orders)


def merge_orders(first: OrderQueue, second: OrderQueue) -> OrderQueue:
    """Drain both queues into a new one, alternating between them.

    Orders are taken one from ``first`` then one from ``second`` while both
    have orders; whatever remains in either is appended afterwards.
    """
    merged = OrderQueue()
    while first and second:
        merged.enqueue(first.dequeue())
        merged.enqueue(second.dequeue())
    for rest in (first, second):
        while rest:
            merged.enqueue(rest.dequeue())
    return merged