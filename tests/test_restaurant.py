import pytest

from dsakit.restaurant import (
    EMPTY_LIST,
    MenuItem,
    OrderLine,
    Restaurant,
    format_lines,
)


@pytest.fixture
def restaurant():
    return Restaurant.with_default_menu()


def test_default_menu_holds_five_dishes_in_order(restaurant):
    assert [item.serial for item in restaurant.menu] == [1, 2, 3, 4, 5]
    assert restaurant.menu[0] == MenuItem(1, "Hot and Sour Soup", 100.0)
    assert restaurant.menu[-1].name == "Hakka Noodles"


def test_add_menu_item_appends(restaurant):
    restaurant.add_menu_item(6, "Spring Rolls", 120)
    assert restaurant.menu[-1] == MenuItem(6, "Spring Rolls", 120.0)
    assert len(restaurant.menu) == 6


def test_add_menu_item_rejects_duplicate_serial(restaurant):
    with pytest.raises(ValueError):
        restaurant.add_menu_item(3, "Other", 10)
    assert len(restaurant.menu) == 5


def test_remove_menu_item(restaurant):
    removed = restaurant.remove_menu_item(2)
    assert removed.name == "Manchow Soup"
    assert [item.serial for item in restaurant.menu] == [1, 3, 4, 5]


def test_remove_missing_menu_item_raises(restaurant):
    with pytest.raises(KeyError):
        restaurant.remove_menu_item(42)


def test_place_order_prices_by_quantity(restaurant):
    line = restaurant.place_order(4, 3)
    menu_price = restaurant.menu[3].price
    assert line.price == 3 * menu_price
    assert line.name == "Fried Rice"
    assert restaurant.orders == [line]


def test_place_order_for_unknown_dish_raises(restaurant):
    with pytest.raises(KeyError):
        restaurant.place_order(9, 1)
    assert restaurant.orders == []


def test_remove_order_item_removes_first_match(restaurant):
    restaurant.place_order(1, 1)
    restaurant.place_order(2, 2)
    restaurant.place_order(1, 5)
    removed = restaurant.remove_order_item(1)
    assert removed.quantity == 1
    assert [(line.serial, line.quantity) for line in restaurant.orders] == [(2, 2), (1, 5)]


def test_remove_order_item_missing_raises(restaurant):
    restaurant.place_order(1, 1)
    with pytest.raises(KeyError):
        restaurant.remove_order_item(3)


def test_bill_total_is_sum_of_lines(restaurant):
    lines = [restaurant.place_order(1, 2), restaurant.place_order(5, 1)]
    assert restaurant.bill_total() == sum(line.price for line in lines)


def test_checkout_clears_order_and_records_sales(restaurant):
    restaurant.place_order(1, 2)
    restaurant.place_order(3, 1)
    expected_total = restaurant.bill_total()
    lines, total = restaurant.checkout()
    assert total == expected_total
    assert [line.serial for line in lines] == [1, 3]
    assert restaurant.orders == []
    assert restaurant.bill_total() == 0.0
    assert [(line.serial, line.quantity) for line in restaurant.sales] == [(1, 2), (3, 1)]


def test_sales_accumulate_across_checkouts(restaurant):
    first = restaurant.place_order(2, 1)
    restaurant.checkout()
    second = restaurant.place_order(2, 4)
    restaurant.checkout()
    (line,) = restaurant.sales
    assert line.quantity == first.quantity + second.quantity
    assert line.price == first.price + second.price


def test_sales_are_copies(restaurant):
    restaurant.place_order(1, 1)
    restaurant.checkout()
    restaurant.sales[0].quantity = 100
    assert restaurant.sales[0].quantity == 1


def test_format_lines_menu_row():
    assert format_lines([MenuItem(1, "Hot and Sour Soup", 100.0)]) == "1\tHot and Sour Soup\t100.00"


def test_format_lines_order_row_includes_quantity():
    row = format_lines([OrderLine(2, "Manchow Soup", 3, 1.5)])
    assert row.split("\t") == ["2", "Manchow Soup", "3", "1.50"]


def test_format_lines_empty():
    assert format_lines([]) == EMPTY_LIST


def test_format_lines_one_row_per_line(restaurant):
    text = format_lines(restaurant.menu)
    assert len(text.splitlines()) == len(restaurant.menu)