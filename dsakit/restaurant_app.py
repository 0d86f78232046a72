"""Text menus for the restaurant: admin section and customer section."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from dsakit.restaurant import Restaurant, format_lines

_INDENT = "\t" * 7
_WRONG = "Wrong Input !! PLease choose valid option"

_MAIN_MENU = (
    "\n        " + "*" * 74 + "\n"
    "                            WELCOME TO HOTEL MANAGEMENT SYSTEM                    \n"
    "          " + "*" * 74 + "\n\n\n"
    f"{_INDENT}1. ADMIN SECTION--> \n"
    f"{_INDENT}2. CUSTOMER SECTION--> \n"
    f"{_INDENT}3. Exit--> \n\n"
    f"{_INDENT}Enter Your Choice --->"
)
_ADMIN_MENU = (
    f"\n{_INDENT}1. View total sales\n"
    f"{_INDENT}2. Add new items in the order menu\n"
    f"{_INDENT}3. Delete items from the order menu\n"
    f"{_INDENT}4. Display order menu\n"
    f"{_INDENT}5. Back To Main Menu \n\n"
    f"{_INDENT}   Enter Your Choice --->"
)
_CUSTOMER_MENU = (
    f"\n{_INDENT}1. Place your order\n"
    f"{_INDENT}2. View your ordered items\n"
    f"{_INDENT}3. Delete an item from order\n"
    f"{_INDENT}4. Display and print final bill\n"
    f"{_INDENT}5. Back To Main Menu \n\n"
    f"{_INDENT}   Enter Your Choice --->"
)
_BANNER_RULE = "\t" * 5 + "   " + "-" * 46


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return None

    def ask_float(self, prompt: str) -> Optional[float]:
        try:
            return float(self.ask(prompt).strip())
        except ValueError:
            return None

    def say(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def listing(self, lines) -> None:
        rendered = format_lines(lines)
        self.say()
        for row in rendered.split("\n"):
            self.say(_INDENT + row)
        self.say()


def _banner(console: _Console, title: str) -> None:
    console.say()
    console.say(_BANNER_RULE)
    console.say(f"{_INDENT}    {title}")
    console.say(_BANNER_RULE)


def _add_menu_item(restaurant: Restaurant, console: _Console) -> None:
    serial = console.ask_int(f"\n{_INDENT}Enter serial no. of the food item: ")
    if serial is None:
        console.say(f"\n{_INDENT}{_WRONG}")
        return
    if any(item.serial == serial for item in restaurant.menu):
        console.say(f"\n{_INDENT}Food item with given serial number already exists!!\n")
        return
    name = console.ask(f"{_INDENT}Enter food item name: ").strip()
    price = console.ask_float(f"{_INDENT}Enter price: ")
    if price is None:
        console.say(f"\n{_INDENT}{_WRONG}")
        return
    restaurant.add_menu_item(serial, name, price)
    console.say(f"\n{_INDENT}New food item added to the list!!\n")


def _admin(restaurant: Restaurant, console: _Console) -> None:
    _banner(console, "ADMIN SECTION")
    while True:
        option = console.ask_int(_ADMIN_MENU)
        if option == 5:
            return
        if option == 1:
            console.listing(restaurant.sales)
        elif option == 2:
            _add_menu_item(restaurant, console)
        elif option == 3:
            serial = console.ask_int(
                f"\n{_INDENT}Enter serial no. of the food item which is to be deleted: "
            )
            try:
                restaurant.remove_menu_item(serial)
            except KeyError:
                console.say(f"\n{_INDENT}Food item with given serial number doesn't exist!\n")
            else:
                console.say(f"\n{_INDENT}### Updated list of food items menu ###")
                console.listing(restaurant.menu)
        elif option == 4:
            console.say(f"\n{_INDENT}   ### Order menu ###")
            console.listing(restaurant.menu)
        else:
            console.say(f"\n{_INDENT}{_WRONG}")


def _customer(restaurant: Restaurant, console: _Console) -> None:
    _banner(console, "CUSTOMER SECTION")
    while True:
        option = console.ask_int(_CUSTOMER_MENU)
        if option == 5:
            return
        if option == 1:
            console.listing(restaurant.menu)
            serial = console.ask_int(
                f"\n{_INDENT}Enter number corresponding to the item you want to order: "
            )
            quantity = console.ask_int(f"{_INDENT}Enter quantity: ")
            if serial is None or quantity is None:
                console.say(f"\n{_INDENT}{_WRONG}")
                continue
            try:
                restaurant.place_order(serial, quantity)
            except KeyError:
                console.say(f"\n{_INDENT}This item is not present in the menu!")
        elif option == 2:
            console.say(f"\n{_INDENT}  ### List of ordered items ###")
            console.listing(restaurant.orders)
        elif option == 3:
            serial = console.ask_int(
                f"\n{_INDENT}Enter serial no. of the food item which is to be deleted: "
            )
            try:
                restaurant.remove_order_item(serial)
            except KeyError:
                console.say(f"\n{_INDENT}Food item with given serial number doesn't exist!!")
            else:
                console.say(f"\n{_INDENT}### Updated list of your ordered food items ###")
                console.listing(restaurant.orders)
        elif option == 4:
            lines, total = restaurant.checkout()
            console.say(f"\n{_INDENT}  ### Final Bill ###")
            console.listing(lines)
            console.say(f"{_INDENT}Total price: {total:.2f}")
            console.ask(f"\n{_INDENT}Press any key to return to main menu:\n{_INDENT}")
            return
        else:
            console.say(f"\n{_INDENT}{_WRONG}")


def run(
    restaurant: Restaurant,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Run the main menu over ``stdin``/``stdout`` until Exit or end of input."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        while True:
            choice = console.ask_int(_MAIN_MENU)
            if choice == 3:
                console.say(f"\n\n{_INDENT}**********Thank you!!**********")
                return
            if choice == 1:
                _admin(restaurant, console)
            elif choice == 2:
                _customer(restaurant, console)
            else:
                console.say(f"\n{_INDENT}{_WRONG}")
    except EOFError:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Start the restaurant with its standard menu on the terminal."""
    run(Restaurant.with_default_menu(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())