"""Command reader: applies order commands from a text stream to an order book."""

from __future__ import annotations

import re
import sys
from typing import Callable, Dict, Iterable, Iterator, Optional, TextIO, Tuple

from tableorders.orders import OrderBook, OrderError

MAX_QUOTED = 99

_QUERY = re.compile(r"\?\s*(\S+)")
_INT = re.compile(r"\s*([+-]?\d+)")


def extract_quoted_string(text: str) -> Tuple[str, str]:
    """Return the first double-quoted value in `text` and the text after it.

    At most MAX_QUOTED characters are taken; a missing closing quote ends the
    value at the end of the text.
    """
    start = text.find('"')
    rest = text[start + 1:] if start >= 0 else ""
    value = []
    pos = 0
    while pos < len(rest) and rest[pos] != '"' and len(value) < MAX_QUOTED:
        value.append(rest[pos])
        pos += 1
    if pos < len(rest) and rest[pos] == '"':
        pos += 1
    return "".join(value), rest[pos:]


def _scan_int(text: str) -> Optional[int]:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _skip_field(text: str) -> str:
    index = text.find(" ")
    return "" if index < 0 else text[index:].lstrip(" ")


def _head(line: str) -> Optional[Tuple[str, int, str]]:
    """Split off the employee name and table id at the start of an entry."""
    words = line.split()
    if not words:
        return None
    name = words[0]
    rest = line[len(name):].lstrip(" ")
    table_id = _scan_int(rest)
    if table_id is None:
        return None
    return name, table_id, _skip_field(rest)


def _entries(lines: Iterator[str]) -> Iterator[str]:
    for line in lines:
        words = line.split()
        if words and words[0] == "#":
            return
        yield line


def _create_order(book: OrderBook, line: str, out: TextIO) -> None:
    head = _head(line)
    if head is None:
        return
    name, table_id, rest = head
    if rest.endswith(("\n", "\r")):
        rest = rest[:-1]
    book.create_order(table_id, name, rest)


def _add_dish(book: OrderBook, line: str, out: TextIO) -> None:
    head = _head(line)
    if head is None:
        return
    name, table_id, rest = head
    dish, rest = extract_quoted_string(rest)
    rest = rest.lstrip(" ")
    quantity = _scan_int(rest)
    if quantity is None:
        return
    note, _ = extract_quoted_string(_skip_field(rest))
    book.add_dish(table_id, dish, quantity, note, name)


def _update_dish(book: OrderBook, line: str, out: TextIO) -> None:
    head = _head(line)
    if head is None:
        return
    _, table_id, rest = head
    dish, rest = extract_quoted_string(rest)
    quantity = _scan_int(rest.lstrip(" "))
    if quantity is None:
        return
    book.update_dish(table_id, dish, quantity)


def _cancel_dish(book: OrderBook, line: str, out: TextIO) -> None:
    head = _head(line)
    if head is None:
        return
    _, table_id, rest = head
    dish, rest = extract_quoted_string(rest)
    note, _ = extract_quoted_string(rest.lstrip(" "))
    book.cancel_dish(table_id, dish, note)


def _cancel_order(book: OrderBook, line: str, out: TextIO) -> None:
    table_id = _scan_int(line)
    if table_id is not None:
        book.cancel_order(table_id)


def _create_bill(book: OrderBook, line: str, out: TextIO) -> None:
    table_id = _scan_int(line)
    if table_id is not None:
        out.write(book.render_bill(table_id))


_BLOCK_COMMANDS: Dict[str, Callable[[OrderBook, str, TextIO], None]] = {
    "create_order": _create_order,
    "add_dish": _add_dish,
    "update_dish": _update_dish,
    "cancel_dish": _cancel_dish,
    "cancel_order": _cancel_order,
    "create_bill": _create_bill,
}


def run(lines: Iterable[str], out: TextIO, book: Optional[OrderBook] = None) -> OrderBook:
    """Apply the commands read from `lines`, writing reports to `out`.

    Processing stops at the first line that is not a `? command` header.
    Entries that cannot be parsed or applied are skipped.
    """
    book = book if book is not None else OrderBook()
    stream = iter(lines)
    last_table = 0
    for line in stream:
        match = _QUERY.match(line)
        if match is None:
            break
        query = match.group(1)
        if query == "print_order":
            entry = next(stream, None)
            if entry is None:
                break
            table_id = _scan_int(entry)
            if table_id is not None:
                last_table = table_id
            out.write(book.render_order(last_table))
            continue
        handler = _BLOCK_COMMANDS.get(query)
        if handler is None:
            continue
        for entry in _entries(stream):
            try:
                handler(book, entry, out)
            except OrderError:
                pass
    return book


def main(argv: Optional[list] = None) -> int:
    """Read commands from standard input and print reports to standard output."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())