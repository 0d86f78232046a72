"""Menu, customer orders, bills and running sales totals for a small restaurant."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Union

_DEFAULT_MENU = (
    (1, "Hot and Sour Soup", 100.0),
    (2, "Manchow Soup", 200.0),
    (3, "Manchurian Noodles", 150.0),
    (4, "Fried Rice", 180.0),
    (5, "Hakka Noodles", 80.0),
)

EMPTY_LIST = "List is empty!!"


@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu, identified by its serial number."""

    serial: int
    name: str
    price: float

    def row(self) -> str:
        """Render the item as serial, name and price separated by tabs."""
        return f"{self.serial}\t{self.name}\t{self.price:.2f}"


@dataclass
class OrderLine:
    """An ordered dish; ``price`` is the quantity times the unit price."""

    serial: int
    name: str
    quantity: int
    price: float

    def row(self) -> str:
        """Render the line; a zero quantity is left out like a menu row."""
        if self.quantity == 0:
            return f"{self.serial}\t{self.name}\t{self.price:.2f}"
        return f"{self.serial}\t{self.name}\t{self.quantity}\t{self.price:.2f}"


def format_lines(lines: Iterable[Union[MenuItem, OrderLine]]) -> str:
    """Render menu items or order lines one per row, or the empty-list notice."""
    rows = [line.row() for line in lines]
    return "\n".join(rows) if rows else EMPTY_LIST


class Restaurant:
    """Holds the menu, the current customer's order and the sales so far."""

    def __init__(self, menu: Iterable[MenuItem] = ()) -> None:
        self._menu: dict[int, MenuItem] = {}
        self._orders: list[OrderLine] = []
        self._sales: dict[int, OrderLine] = {}
        for item in menu:
            self.add_menu_item(item.serial, item.name, item.price)

    @classmethod
    def with_default_menu(cls) -> "Restaurant":
        """Return a restaurant whose menu holds the five standard dishes."""
        return cls(MenuItem(serial, name, price) for serial, name, price in _DEFAULT_MENU)

    @property
    def menu(self) -> list[MenuItem]:
        """The menu items in the order they were added."""
        return list(self._menu.values())

    @property
    def orders(self) -> list[OrderLine]:
        """The lines of the current, unpaid order."""
        return list(self._orders)

    @property
    def sales(self) -> list[OrderLine]:
        """Sales so far, one line per dish with quantities and prices summed."""
        return [replace(line) for line in self._sales.values()]

    def add_menu_item(self, serial: int, name: str, price: float) -> MenuItem:
        """Add a dish; raise ValueError if the serial number is already used."""
        if serial in self._menu:
            raise ValueError("Food item with given serial number already exists!!")
        item = MenuItem(serial, name, float(price))
        self._menu[serial] = item
        return item

    def remove_menu_item(self, serial: int) -> MenuItem:
        """Remove and return a dish; raise KeyError if no dish has that serial."""
        try:
            return self._menu.pop(serial)
        except KeyError:
            raise KeyError("Food item with given serial number doesn't exist!") from None

    def place_order(self, serial: int, quantity: int) -> OrderLine:
        """Add ``quantity`` of the dish ``serial`` to the current order."""
        item = self._menu.get(serial)
        if item is None:
            raise KeyError("This item is not present in the menu!")
        line = OrderLine(serial, item.name, quantity, quantity * item.price)
        self._orders.append(line)
        return line

    def remove_order_item(self, serial: int) -> OrderLine:
        """Remove the first order line for ``serial``; raise KeyError if there is none."""
        for index, line in enumerate(self._orders):
            if line.serial == serial:
                return self._orders.pop(index)
        raise KeyError("Food item with given serial number doesn't exist!!")

    def bill_total(self) -> float:
        """Return the sum of the prices of the current order lines."""
        return sum((line.price for line in self._orders), 0.0)

    def checkout(self) -> tuple[list[OrderLine], float]:
        """Close the current order: record it in the sales and return its lines and total."""
        lines: Sequence[OrderLine] = list(self._orders)
        total = self.bill_total()
        for line in lines:
            recorded = self._sales.get(line.serial)
            if recorded is None:
                self._sales[line.serial] = replace(line)
            else:
                recorded.quantity += line.quantity
                recorded.price += line.price
        self._orders.clear()
        return list(lines), total