"""Account book entries stored in an SQLite database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Protocol

from handson.textbook import Item as _TextItem

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS items(
    id        INTEGER PRIMARY KEY,
    category  TEXT NOT NULL,
    price     INTEGER NOT NULL
);"""

_INSERT_ITEM = "INSERT INTO items(category, price) VALUES (?,?);"

_SELECT_ITEMS = "SELECT id, category, price FROM items ORDER BY id DESC LIMIT ?"

_SELECT_SUMMARIES = """
SELECT
    category,
    COUNT(1) AS count,
    SUM(price) AS sum
FROM
    items
GROUP BY
    category"""


class _Entry(Protocol):
    category: str
    price: int


@dataclass
class Item(_TextItem):
    """An expense as stored in the database; ``id`` is set once it is saved."""

    id: int | None = None


@dataclass
class Summary:
    """Totals of all expenses of one category."""

    category: str
    count: int
    sum: int

    def avg(self) -> float:
        """Average price of the category, or 0 when it has no items."""
        if self.count == 0:
            return 0.0
        return self.sum / self.count


class AccountBook:
    """An account book kept in the ``items`` table of an SQLite database."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create_table(self) -> None:
        """Create the ``items`` table unless it already exists."""
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def add_item(self, item: _Entry) -> None:
        """Store ``item``; the database assigns its id."""
        with self._conn:
            self._conn.execute(_INSERT_ITEM, (item.category, item.price))

    def get_items(self, limit: int) -> list[Item]:
        """Return at most ``limit`` items, most recently added first."""
        rows = self._conn.execute(_SELECT_ITEMS, (limit,)).fetchall()
        return [
            Item(category=category, price=price, id=item_id)
            for item_id, category, price in rows
        ]

    def get_summaries(self) -> list[Summary]:
        """Return the count and total price of each category."""
        rows = self._conn.execute(_SELECT_SUMMARIES).fetchall()
        return [Summary(category, count, total) for category, count, total in rows]