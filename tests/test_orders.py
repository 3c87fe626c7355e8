from datetime import datetime

import pytest

from tableorders.orders import CANCEL_NOTE, ROW_WIDTH, OrderBook, OrderError, State

STAMP = datetime(2024, 5, 6, 7, 8, 9)
STAMP_TEXT = "2024-05-06 07:08:09"


@pytest.fixture
def book():
    return OrderBook(clock=lambda: STAMP)


def test_create_order_and_search(book):
    order = book.create_order(3, "An", "12:00")
    assert book.search_order(3) is order
    assert order.state == State.SERVING
    assert (order.total_dishes, order.total_meals) == (0, 0)
    assert order.update_time == ""


def test_create_order_twice_raises(book):
    book.create_order(3, "An", "12:00")
    with pytest.raises(OrderError):
        book.create_order(3, "Binh", "12:05")


def test_add_dish_opens_order(book):
    book.add_dish(4, "Pho", 2, "it hanh", "Binh")
    order = book.search_order(4)
    assert order.employee_name == "Binh"
    assert order.time == STAMP_TEXT
    assert order.update_time == ""
    assert order.total_dishes == 1
    assert order.total_meals == 2
    assert order.dishes[0].note == "it hanh"


def test_add_same_dish_accumulates(book):
    book.add_dish(4, "Pho", 2, "a", "Binh")
    dish = book.add_dish(4, "Pho", 3, "b", "Binh")
    order = book.search_order(4)
    assert dish.num_ordered == 5
    assert dish.note == "b"
    assert order.total_dishes == 1
    assert order.total_meals == 5
    assert order.update_time == order.time


def test_add_to_existing_order_sets_update_time(book):
    book.create_order(2, "An", "morning")
    book.add_dish(2, "Com", 1, "", "An")
    book.add_dish(2, "Canh", 1, "", "An")
    order = book.search_order(2)
    assert order.time == "morning"
    assert order.update_time == STAMP_TEXT
    assert [d.id for d in order.dishes] == ["Com", "Canh"]
    assert order.total_dishes == 2


def test_update_dish_completes_order(book):
    book.add_dish(1, "Pho", 2, "", "An")
    dish = book.update_dish(1, "Pho", 1)
    assert dish.num_transferred == 1
    assert dish.state == State.SERVING
    book.update_dish(1, "Pho", 1)
    assert dish.state == State.PAID
    assert book.search_order(1) is None
    assert book.render_order(1) == "Chua co order\n"


def test_paid_table_stays_closed(book):
    book.add_dish(1, "Pho", 1, "", "An")
    book.update_dish(1, "Pho", 1)
    book.add_dish(1, "Com", 1, "", "An")
    assert len(book.orders) == 2
    assert book.search_order(1) is None


def test_update_dish_errors(book):
    book.add_dish(1, "Pho", 2, "", "An")
    with pytest.raises(OrderError):
        book.update_dish(1, "Pho", 3)
    with pytest.raises(OrderError):
        book.update_dish(1, "Bun", 1)
    with pytest.raises(OrderError):
        book.update_dish(9, "Pho", 1)


def test_cancel_dish(book):
    book.add_dish(1, "Pho", 2, "", "An")
    book.add_dish(1, "Com", 3, "", "An")
    dish = book.cancel_dish(1, "Com", "doi y")
    order = book.search_order(1)
    assert dish.note == CANCEL_NOTE
    assert dish.state == State.CANCELED
    assert dish.num_ordered == 0
    assert order.total_dishes == 1
    assert order.total_meals == 2
    assert "|Com:" not in book.render_order(1)
    assert "|Pho:" in book.render_order(1)


def test_cancel_served_dish_raises(book):
    book.add_dish(1, "Pho", 2, "", "An")
    book.update_dish(1, "Pho", 1)
    with pytest.raises(OrderError):
        book.cancel_dish(1, "Pho", "")


def test_cancel_order(book):
    book.add_dish(5, "Pho", 2, "", "An")
    order = book.cancel_order(5)
    assert order.state == State.CANCELED
    assert order.total_meals == 0
    assert book.render_order(5) == "Da huy\n"
    with pytest.raises(OrderError):
        book.render_bill(5)
    with pytest.raises(OrderError):
        book.update_dish(5, "Pho", 1)


def test_cancel_order_after_serving_raises(book):
    book.add_dish(5, "Pho", 2, "", "An")
    book.update_dish(5, "Pho", 1)
    with pytest.raises(OrderError):
        book.cancel_order(5)
    with pytest.raises(OrderError):
        book.cancel_order(6)


def test_render_order_rows_have_fixed_width(book):
    book.add_dish(1, "Pho bo", 12, "khong hanh", "An")
    book.add_dish(1, "Com", 0, "", "An")
    lines = book.render_order(1).splitlines()
    assert lines[0] == "Nhan vien phuc vu: An"
    assert lines[1] == "Danh sach cac mon an:"
    assert all(len(line) == ROW_WIDTH for line in lines[2:])
    assert len(lines) == 3 + 2 * 5


def test_render_bill(book):
    book.create_order(7, "An", "noon")
    order = book.search_order(7)
    assert book.render_bill(7).splitlines()[0] == "noon"
    book.add_dish(7, "Pho", 2, "", "An")
    book.update_dish(7, "Pho", 1)
    lines = book.render_bill(7).splitlines()
    assert lines[0] == STAMP_TEXT
    assert lines[1] == f"Ban {order.table_id}"
    assert lines[-2] == f"Tong so mon: {order.total_dishes_done}"
    assert lines[-1] == f"Tong so suat an: {order.total_meals_done}"
    assert order.total_meals_done == 1
    assert not any("da dat" in line for line in lines)


def test_render_bill_missing_raises(book):
    with pytest.raises(OrderError):
        book.render_bill(42)