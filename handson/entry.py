"""First account book programs: reading entries from the terminal and a text file."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from handson.textbook import Item, format_line, parse_line

SEPARATOR = "==========="
GREETING = "Hello, 世界"
DEFAULT_FILE = "accountbook.txt"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class TokenReader:
    """Reads whitespace-separated words and integers from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens = self._scan(stream)

    @staticmethod
    def _scan(stream: Iterable[str]) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        """Return the next word; raise EOFError when the input is exhausted."""
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("入力がありません") from None

    def integer(self) -> int:
        """Return the next word as an integer; raise ValueError if it is not one."""
        token = self.word()
        if not _INTEGER.fullmatch(token):
            raise ValueError(f"整数ではありません: {token!r}")
        value = int(token)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"整数が範囲外です: {token!r}")
        return value


def _prompt(text: str, out: TextIO) -> None:
    print(text, end="", file=out, flush=True)


def hello(out: TextIO | None = None) -> None:
    """Write the greeting; it goes to standard error unless ``out`` is given."""
    out = sys.stderr if out is None else out
    print(GREETING, file=out)


def read_item(reader: TokenReader, out: TextIO) -> Item:
    """Prompt for a category and a price and return them as an item."""
    _prompt("品目>", out)
    category = reader.word()
    _prompt("値段>", out)
    price = reader.integer()
    return Item(category, price)


def record_one(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Item:
    """Read one item and report what was spent on it."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    item = read_item(TokenReader(stdin), stdout)
    print(SEPARATOR, file=stdout)
    print(f"{item.category}に{item.price}円使いました", file=stdout)
    print(SEPARATOR, file=stdout)
    return item


def show_items(items: Iterable[Item], out: TextIO | None = None) -> None:
    """Write the items between separator lines, one "category:price円" per line."""
    out = sys.stdout if out is None else out
    print(SEPARATOR, file=out)
    for item in items:
        print(f"{item.category}:{item.price}円", file=out)
    print(SEPARATOR, file=out)


def _read_count(reader: TokenReader, out: TextIO) -> int:
    _prompt("何件入力しますか>", out)
    return reader.integer()


def record_many(stdin: TextIO | None = None, stdout: TextIO | None = None) -> list[Item]:
    """Ask how many items to enter, read them, then list them."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    reader = TokenReader(stdin)
    count = _read_count(reader, stdout)
    if count < 0:
        raise ValueError(f"件数が負の値です: {count}")
    items = [read_item(reader, stdout) for _ in range(count)]
    show_items(items, stdout)
    return items


def record_to_file(
    path: str | os.PathLike[str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> list[Item]:
    """Replace the file at ``path`` with the items read from the input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    reader = TokenReader(stdin)
    items: list[Item] = []
    with open(path, "w", encoding="utf-8", newline="\n") as file:
        count = _read_count(reader, stdout)
        for _ in range(count):
            item = read_item(reader, stdout)
            file.write(format_line(item) + "\n")
            items.append(item)
    return items


def show_file(path: str | os.PathLike[str], out: TextIO | None = None) -> None:
    """List the items stored in the file at ``path`` as they are read."""
    out = sys.stdout if out is None else out
    with open(path, encoding="utf-8", newline="\n") as file:
        print(SEPARATOR, file=out)
        for line in file:
            item = parse_line(line.removesuffix("\n").removesuffix("\r"))
            print(f"{item.category}:{item.price}円", file=out)
        print(SEPARATOR, file=out)


def main(argv: list[str] | None = None) -> int:
    """Run one of the introductory account book programs."""
    parser = argparse.ArgumentParser(description="Simple account book programs.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hello", help="print a greeting")
    commands.add_parser("once", help="enter one item")
    commands.add_parser("many", help="enter several items")
    file_command = commands.add_parser("file", help="enter items into a text file")
    file_command.add_argument("--path", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    try:
        if args.command == "hello":
            hello()
        elif args.command == "once":
            record_one()
        elif args.command == "many":
            record_many()
        else:
            record_to_file(args.path)
            show_file(args.path)
    except (OSError, ValueError, EOFError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0