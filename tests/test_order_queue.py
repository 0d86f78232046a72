import pytest

from dsakit.order_queue import Order, OrderQueue, merge_orders


def _order(name):
    return Order(name, "5550100", f"{name}@example.com", "queen", "blue", "stars")


def test_fifo_order():
    q = OrderQueue([_order("ann"), _order("bob")])
    q.enqueue(_order("cy"))
    assert len(q) == 3
    assert [q.dequeue().name for _ in range(3)] == ["ann", "bob", "cy"]
    assert len(q) == 0


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        OrderQueue().dequeue()


def test_empty_queue_is_falsy_and_filled_truthy():
    q = OrderQueue()
    assert not q
    q.enqueue(_order("ann"))
    assert bool(q) is True


def test_iteration_does_not_consume():
    q = OrderQueue([_order("ann"), _order("bob")])
    assert [o.name for o in q] == ["ann", "bob"]
    assert len(q) == 2


def test_display_header_and_rows():
    q = OrderQueue([_order("ann")])
    lines = q.display().split("\n")
    assert lines[0] == "Name       \tContactNumber\t\tEmail\t\t\tSize\t\tColor\t\tTheme"
    assert lines[1].startswith("ann     |5550100")
    assert lines[1].endswith("|stars")
    assert "ann@example.com" in lines[1]


def test_display_empty_is_header_only():
    assert OrderQueue().display().count("\n") == 0


def test_merge_alternates_and_appends_rest():
    first = OrderQueue([_order("a1"), _order("a2"), _order("a3")])
    second = OrderQueue([_order("b1")])
    merged = merge_orders(first, second)
    assert [o.name for o in merged] == ["a1", "b1", "a2", "a3"]
    assert len(first) == 0
    assert len(second) == 0


def test_merge_keeps_every_order():
    first = OrderQueue([_order("a1")])
    second = OrderQueue([_order("b1"), _order("b2")])
    merged = merge_orders(first, second)
    assert sorted(o.name for o in merged) == ["a1", "b1", "b2"]


def test_merge_of_empty_queues():
    assert len(merge_orders(OrderQueue(), OrderQueue())) == 0