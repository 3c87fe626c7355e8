# tableorders

A small order book for restaurant tables. Staff open an order for a table,
add dishes to it, and record the portions that reach the table. They can
cancel dishes or whole orders, and print the current order or the bill.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`.

## Command stream

The `tableorders` command reads commands from standard input and writes
printed orders and bills to standard output:

```
tableorders < session.txt
```

Each section begins with a line `? <command>`. One entry per line follows, and
a line holding only `#` ends the section. Dish names and notes go in double
quotes and are cut to 99 characters.

```
? create_order
alice 3 2024-05-01 12:00:00
#
? add_dish
alice 3 "Pho bo" 2 "no onion"
#
? update_dish
alice 3 "Pho bo" 1
#
? cancel_dish
alice 3 "Pho bo" "changed mind"
#
? cancel_order
3
#
? print_order
3
? create_bill
3
#
```

- `create_order`: employee name, table number, then the opening time as free text.
- `add_dish`: employee name, table number, dish, quantity, note. If the table
  has no open order, one is opened with the current time.
- `update_dish`: employee name, table number, dish, number of portions served.
- `cancel_dish`: employee name, table number, dish, note. A dish can be
  cancelled only while none of it has been served. Its note becomes
  `Khach huy`.
- `cancel_order`: table number. An order can be cancelled only while nothing
  has been served.
- `print_order`: exactly one table line, with no `#` terminator.
- `create_bill`: table numbers, one per line.

Entries that cannot be parsed or carried out are skipped without output.
Unknown `? command` sections are ignored. Input stops at the first line that
does not begin a command section.

Printed orders and bills use fixed-width boxes 252 characters wide. The
report text is in Vietnamese, for example `Chua co order`, `Da huy` and
`Tong so mon`.

## Using the library

```python
from tableorders.orders import OrderBook

book = OrderBook()
book.add_dish(3, "Pho bo", 2, "no onion", "alice")
book.update_dish(3, "Pho bo", 1)
print(book.render_order(3))
print(book.render_bill(3))
```

`OrderBook(clock=None)` takes an optional `clock`. This is a callable that
returns a `datetime`, and it defaults to `datetime.now`. Timestamps are
stored as `YYYY-MM-DD HH:MM:SS` strings.

Operations that cannot be carried out raise `OrderError`. Examples are
serving more portions than were ordered, or billing a table that has no order.

The `OrderBook` methods are:

- `create_order`
- `add_dish`
- `update_dish`
- `cancel_dish`
- `cancel_order`
- `render_order`
- `render_bill`
- `search_order`

Once every dish of an order has been served, the order's state becomes
`State.PAID`. `search_order` then returns `None` for that table.

The records are the dataclasses `Dish` and `Order`, with states from the
`State` enum (`SERVING`, `PAID`, `CANCELED`).

`tableorders.cli.run(lines, out, book=None)` processes any iterable of lines
and writes to any text stream. It returns the order book it used.

## Limitations

- Orders are kept in memory only. Nothing is saved when the program exits.
- A table's lookup only ever considers the first order opened for it. After
  that order is paid, orders opened later for the same table cannot be
  looked up.