import io
import sys

from dsakit.restaurant import MenuItem, Restaurant
from dsakit.restaurant_app import main, run


def session(text, restaurant=None):
    restaurant = restaurant or Restaurant.with_default_menu()
    out = io.StringIO()
    run(restaurant, io.StringIO(text), out)
    return restaurant, out.getvalue()


def test_exit_prints_thanks():
    _, out = session("3\n")
    assert "**********Thank you!!**********" in out


def test_customer_checkout_records_sales():
    restaurant, out = session("2\n1\n3\n2\n4\n\n3\n")
    assert restaurant.orders == []
    [sale] = restaurant.sales
    assert sale.serial == 3
    assert sale.quantity == 2
    assert sale.name == "Manchurian Noodles"
    assert "Total price: 300.00" in out


def test_repeated_checkouts_sum_sales():
    text = "2\n1\n4\n1\n4\n\n2\n1\n4\n2\n4\n\n3\n"
    restaurant, _ = session(text)
    [sale] = restaurant.sales
    assert sale.quantity == 3
    unit = next(item.price for item in restaurant.menu if item.serial == 4)
    assert sale.price == unit * 3


def test_order_for_unknown_item():
    restaurant, out = session("2\n1\n42\n1\n5\n3\n")
    assert "This item is not present in the menu!" in out
    assert restaurant.orders == []


def test_delete_order_item():
    restaurant, out = session("2\n1\n1\n1\n1\n2\n1\n3\n1\n5\n3\n")
    assert [line.serial for line in restaurant.orders] == [2]
    assert "### Updated list of your ordered food items ###" in out


def test_admin_adds_menu_item():
    restaurant, out = session("1\n2\n9\nSpring Rolls\n55.5\n5\n3\n")
    assert restaurant.menu[-1] == MenuItem(9, "Spring Rolls", 55.5)
    assert "New food item added to the list!!" in out


def test_admin_duplicate_serial_rejected():
    restaurant, out = session("1\n2\n1\n5\n3\n")
    assert "already exists" in out
    assert len(restaurant.menu) == 5


def test_admin_delete_items():
    restaurant, out = session("1\n3\n2\n3\n77\n5\n3\n")
    assert [item.serial for item in restaurant.menu] == [1, 3, 4, 5]
    assert "Food item with given serial number doesn't exist!" in out


def test_admin_shows_empty_sales_and_menu():
    _, out = session("1\n1\n4\n5\n3\n", Restaurant())
    assert out.count("List is empty!!") == 2


def test_wrong_main_choice_then_end_of_input():
    _, out = session("8\n")
    assert "Wrong Input !! PLease choose valid option" in out
    assert "Thank you" not in out


def test_main_uses_default_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n4\n5\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Hot and Sour Soup" in out
    assert "Hakka Noodles" in out