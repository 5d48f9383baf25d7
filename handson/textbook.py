"""Account book entries stored as lines of text in a file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

PARSE_ERROR_MESSAGE = "パースに失敗しました"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class ParseError(ValueError):
    """A line of the account book could not be read."""

    def __init__(self, message: str = PARSE_ERROR_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class Item:
    """One expense: what it was for and what it cost."""

    category: str
    price: int


def parse_line(line: str) -> Item:
    """Parse a "category price" line separated by a single space."""
    fields = line.split(" ")
    if len(fields) != 2:
        raise ParseError()
    category, price_text = fields
    if not _INTEGER.fullmatch(price_text):
        raise ParseError(f"値段を数値に変換できません: {price_text!r}")
    price = int(price_text)
    if not _INT_MIN <= price <= _INT_MAX:
        raise ParseError(f"値段が範囲外です: {price_text!r}")
    return Item(category, price)


def format_line(item: Item) -> str:
    """Format an item as a "category price" line, without line ending."""
    return f"{item.category} {item.price}"


def _strip_line_end(line: str) -> str:
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def read_items(path: str | os.PathLike[str]) -> list[Item]:
    """Read every item of the file at ``path``, in file order."""
    with open(path, encoding="utf-8", newline="\n") as file:
        return [parse_line(_strip_line_end(line)) for line in file]


@dataclass
class FileAccountBook:
    """An account book kept in a text file, one item per line."""

    path: str | os.PathLike[str]

    def add_item(self, item: Item) -> None:
        """Append ``item`` to the file, creating it if needed."""
        with open(self.path, "a", encoding="utf-8", newline="\n") as file:
            file.write(format_line(item) + "\n")

    def get_items(self, limit: int) -> list[Item]:
        """Return at most the ``limit`` most recently added items, oldest first."""
        if limit < 0:
            raise ValueError(f"limit must not be negative: {limit}")
        items = read_items(self.path)
        if len(items) < limit:
            return items
        return items[len(items) - limit :]