"""Restaurant table orders: opening, adding dishes, serving, cancelling and billing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
CANCEL_NOTE = "Khach huy"
ROW_WIDTH = 252
_RULE = "-" * ROW_WIDTH


class State(enum.IntEnum):
    """Lifecycle state shared by orders and dishes."""

    SERVING = 1
    PAID = 2
    CANCELED = 3


class OrderError(Exception):
    """Raised when an order operation cannot be carried out."""


@dataclass
class Dish:
    """One dish line of an order."""

    id: str
    time: str
    num_ordered: int
    note: str = ""
    num_transferred: int = 0
    update_time: str = ""
    state: State = State.SERVING


@dataclass
class Order:
    """The order of one table."""

    time: str
    employee_name: str
    table_id: int
    dishes: List[Dish] = field(default_factory=list)
    total_dishes: int = 0
    total_meals: int = 0
    total_dishes_done: int = 0
    total_meals_done: int = 0
    update_time: str = ""
    state: State = State.SERVING


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _digit_count(value: int) -> int:
    if value == 0:
        return 1
    count = 0
    while value > 0:
        count += 1
        value //= 10
    return count


def _dish_rows(dish: Dish, with_ordered: bool) -> List[str]:
    rows = [f"|{dish.id}:" + " " * (249 - _byte_len(dish.id)) + "|"]
    if with_ordered:
        rows.append(
            f"|    - So luong suat an da dat: {dish.num_ordered}"
            + " " * (219 - _digit_count(dish.num_ordered))
            + "|"
        )
    rows.append(
        f"|    - So luong suat an da hoan thanh: {dish.num_transferred}"
        + " " * (212 - _digit_count(dish.num_transferred))
        + "|"
    )
    rows.append(f"|    - Ghi chu: {dish.note}" + " " * (235 - _byte_len(dish.note)) + "|")
    rows.append(_RULE)
    return rows


def _join(lines: List[str]) -> str:
    return "".join(line + "\n" for line in lines)


class OrderBook:
    """All orders of the restaurant, kept in the order they were opened."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock if clock is not None else datetime.now
        self.orders: List[Order] = []

    def _now(self) -> str:
        return self._clock().strftime(TIME_FORMAT)

    def search_order(self, table_id: int) -> Optional[Order]:
        """Return the open order of a table, or None.

        Only the first order ever opened for the table is considered; once it
        is paid the table has no open order.
        """
        found = next((o for o in self.orders if o.table_id == table_id), None)
        if found is None or found.state == State.PAID:
            return None
        return found

    def create_order(self, table_id: int, employee_name: str, time: str) -> Order:
        if self.search_order(table_id) is not None:
            raise OrderError(f"table {table_id} already has an order")
        order = Order(time=time, employee_name=employee_name, table_id=table_id)
        self.orders.append(order)
        return order

    def add_dish(
        self, table_id: int, dish_id: str, number: int, note: str, employee_name: str
    ) -> Dish:
        """Order `number` servings of a dish, opening the table's order if needed."""
        stamp = self._now()
        order = self.search_order(table_id)
        if order is None:
            order = self.create_order(table_id, employee_name, stamp)
        else:
            order.update_time = stamp

        if not order.dishes:
            dish = Dish(id=dish_id, time=stamp, num_ordered=number, note=note)
            order.dishes.append(dish)
            order.total_dishes = 1
            order.total_meals = number
            order.state = State.SERVING
            return dish

        existing = next((d for d in order.dishes if d.id == dish_id), None)
        if existing is not None:
            existing.num_ordered += number
            existing.state = State.SERVING
            existing.note = note
            existing.update_time = stamp
            order.total_meals += number
            order.state = State.SERVING
            order.update_time = stamp
            return existing

        dish = Dish(id=dish_id, time=stamp, num_ordered=number, note=note)
        order.dishes.append(dish)
        order.total_dishes += 1
        order.total_meals += number
        order.state = State.SERVING
        order.update_time = stamp
        return dish

    def update_dish(self, table_id: int, dish_id: str, number: int) -> Dish:
        """Record `number` servings of a dish as brought to the table."""
        stamp = self._now()
        order = self.search_order(table_id)
        if order is None or order.state == State.CANCELED:
            raise OrderError(f"table {table_id} has no open order")
        for dish in order.dishes:
            if dish.id == dish_id and dish.num_ordered >= number:
                dish.num_transferred += number
                order.total_meals_done += number
                if dish.num_ordered == dish.num_transferred:
                    dish.state = State.PAID
                    order.total_dishes_done += 1
                    if order.total_dishes_done == order.total_dishes:
                        order.state = State.PAID
                dish.update_time = stamp
                order.update_time = stamp
                return dish
        raise OrderError(f"cannot serve {number} of {dish_id!r} at table {table_id}")

    def cancel_dish(self, table_id: int, dish_id: str, note: str) -> Dish:
        """Cancel a dish that has not been served yet.

        The dish note is always replaced by CANCEL_NOTE; `note` is not kept.
        """
        stamp = self._now()
        order = self.search_order(table_id)
        if order is None:
            raise OrderError(f"table {table_id} has no open order")
        for dish in order.dishes:
            if dish.id == dish_id and dish.num_transferred == 0:
                order.total_dishes -= 1
                order.total_meals -= dish.num_ordered
                dish.num_ordered = 0
                dish.num_transferred = 0
                dish.state = State.CANCELED
                dish.note = CANCEL_NOTE
                dish.update_time = stamp
                order.update_time = stamp
                return dish
        raise OrderError(f"cannot cancel {dish_id!r} at table {table_id}")

    def cancel_order(self, table_id: int) -> Order:
        """Cancel a whole order, allowed only while nothing has been served."""
        stamp = self._now()
        order = self.search_order(table_id)
        if order is None or order.total_meals_done > 0:
            raise OrderError(f"cannot cancel the order of table {table_id}")
        order.total_dishes = 0
        order.total_meals = 0
        order.total_meals_done = 0
        order.total_dishes_done = 0
        order.state = State.CANCELED
        order.update_time = stamp
        return order

    def render_order(self, table_id: int) -> str:
        """Return the printable state of a table's order."""
        order = self.search_order(table_id)
        if order is None:
            return "Chua co order\n"
        if order.state == State.PAID:
            return "Da hoan thanh\n"
        if order.state == State.CANCELED:
            return "Da huy\n"
        lines = [
            f"Nhan vien phuc vu: {order.employee_name}",
            "Danh sach cac mon an:",
            _RULE,
        ]
        for dish in order.dishes:
            if dish.state != State.CANCELED:
                lines.extend(_dish_rows(dish, with_ordered=True))
        return _join(lines)

    def render_bill(self, table_id: int) -> str:
        """Return the bill of a table's open order."""
        order = self.search_order(table_id)
        if order is None or order.state == State.CANCELED:
            raise OrderError(f"table {table_id} has no billable order")
        lines = [order.update_time or order.time, f"Ban {order.table_id}", _RULE, _RULE]
        for dish in order.dishes:
            if dish.state != State.CANCELED:
                lines.extend(_dish_rows(dish, with_ordered=False))
        lines.append(f"Tong so mon: {order.total_dishes_done}")
        lines.append(f"Tong so suat an: {order.total_meals_done}")
        return _join(lines)