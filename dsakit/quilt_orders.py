"""Interactive order desk that keeps local and out-of-state quilt orders."""

from __future__ import annotations

import sys
from typing import Optional

from dsakit.order_queue import Order, OrderQueue, merge_orders

_FIELDS = ("name", "contact_number", "email", "size", "color", "theme")

_MENU = (
    "\n1.Add new local orders\n2.Add new out-of-state orders\n"
    "3.Display all local orders\n4.Display all out-of-state orders\n"
    "5.merged Orders\n6.Exit"
)
_LOCAL_PROMPT = (
    "Enter the Customer Name, Contact NO, EmailId, Size, colour scheme,"
    "Design Theme to be inserted in Local Orders\n"
)
_OUT_PROMPT = (
    "Enter the Customer Name, Contact NO, EmailId, Size, colour scheme,"
    "Design Theme to be inserted in out of state orders\n"
)


def parse_order(line: str) -> Order:
    """Build an order from six whitespace-separated fields.

    The fields are name, contact number, e-mail, size, colour and theme.
    Raise ValueError when the line does not hold exactly six fields.
    """
    fields = line.split()
    if len(fields) != len(_FIELDS):
        raise ValueError(
            f"expected {len(_FIELDS)} fields ({', '.join(_FIELDS)}), got {len(fields)}"
        )
    return Order(*fields)


def _add_order(queue: OrderQueue, prompt: str, confirmation: str) -> None:
    try:
        order = parse_order(input(prompt))
    except ValueError as exc:
        print(f"Invalid order: {exc}")
        return
    queue.enqueue(order)
    print(confirmation)


def _show(queue: OrderQueue, empty_message: str) -> None:
    if queue:
        print(queue.display())
    else:
        print(empty_message)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the order desk menu on standard input."""
    local = OrderQueue()
    out_of_state = OrderQueue()
    merged = OrderQueue()
    print("\nWELCOME TO e quiltmaker designs")
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input().strip())
            except ValueError:
                choice = -1
            if choice < 0:
                print("Invalid input Select Integer Between 1,2 And 6")
                continue
            if choice == 1:
                _add_order(local, _LOCAL_PROMPT, "Data Added to the queue")
            elif choice == 2:
                _add_order(out_of_state, _OUT_PROMPT, "Element Added to the queue")
            elif choice == 3:
                _show(local, "there is no  order in local ")
            elif choice == 4:
                _show(out_of_state, "there is no oder in out of state")
            elif choice == 5:
                for order in merge_orders(local, out_of_state):
                    merged.enqueue(order)
                print(merged.display())
            elif choice == 6:
                print("exit")
            else:
                print("Invalid Input enter betweeen 1-6 ")
            print("Thank YOU")
            if choice == 6:
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())