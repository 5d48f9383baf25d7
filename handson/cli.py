"""Interactive menu for keeping an account book in a file or a database."""

from __future__ import annotations

import argparse
import contextlib
import sqlite3
import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

from handson.accountbook import AccountBook, Summary
from handson.entry import SEPARATOR, TokenReader, read_item
from handson.textbook import FileAccountBook, Item

LATEST = 10
TEXT_MENU = "[1]入力 [2]最新10件 [3]終了"
DB_MENU = "[1]入力 [2]最新10件 [3]集計 [4]終了"
DEFAULT_DB = "accountbook.db"


class _Book(Protocol):
    def add_item(self, item: Item) -> None: ...

    def get_items(self, limit: int) -> list: ...


def show_items(items: Iterable[object], out: TextIO | None = None) -> None:
    """List items; those with a database id are shown as "[0001] category:price円"."""
    out = sys.stdout if out is None else out
    print(SEPARATOR, file=out)
    for item in items:
        item_id = getattr(item, "id", None)
        prefix = "" if item_id is None else f"[{item_id:04d}] "
        print(f"{prefix}{item.category}:{item.price}円", file=out)
    print(SEPARATOR, file=out)


def show_summary(summaries: Iterable[Summary], out: TextIO | None = None) -> None:
    """Write a tab-separated table of count, total and average per category."""
    out = sys.stdout if out is None else out
    print(SEPARATOR, file=out)
    print("品目\t個数\t合計\t平均", file=out)
    for s in summaries:
        print(f"{s.category}\t{s.count}\t{s.sum}円\t{s.avg():.2f}円", file=out)
    print(SEPARATOR, file=out)


def _input_items(book: _Book, reader: TokenReader, out: TextIO) -> None:
    print("何件入力しますか>", end="", file=out, flush=True)
    count = reader.integer()
    for _ in range(count):
        book.add_item(read_item(reader, out))


def _loop(
    book: _Book,
    stdin: TextIO | None,
    stdout: TextIO | None,
    stderr: TextIO | None,
    *,
    with_summary: bool,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    reader = TokenReader(stdin)
    menu = DB_MENU if with_summary else TEXT_MENU
    quit_mode = 4 if with_summary else 3

    while True:
        print(menu, file=stdout)
        print(">", end="", file=stdout, flush=True)
        try:
            mode = reader.integer()
        except EOFError:
            return 0
        except ValueError:
            continue

        try:
            if mode == 1:
                _input_items(book, reader, stdout)
            elif mode == 2:
                show_items(book.get_items(LATEST), stdout)
            elif with_summary and mode == 3:
                show_summary(book.get_summaries(), stdout)
            elif mode == quit_mode:
                print("終了します", file=stdout)
                return 0
        except EOFError:
            return 0
        except (OSError, ValueError, sqlite3.Error) as exc:
            print("エラー:", exc, file=stderr)
            return 1


def run_text(
    book: FileAccountBook,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the input / latest 10 / quit menu on a file-based book.

    Returns 0 when the user quits or the input ends, 1 after an error.
    """
    return _loop(book, stdin, stdout, stderr, with_summary=False)


def run(
    book: AccountBook,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the input / latest 10 / summary / quit menu on a database book.

    Returns 0 when the user quits or the input ends, 1 after an error.
    """
    return _loop(book, stdin, stdout, stderr, with_summary=True)


def main(argv: list[str] | None = None) -> int:
    """Keep an account book interactively in SQLite or, with --text, in a file."""
    parser = argparse.ArgumentParser(description="Interactive account book.")
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite database file")
    parser.add_argument(
        "--text", metavar="PATH", default=None, help="use a text file instead"
    )
    args = parser.parse_args(argv)

    if args.text is not None:
        return run_text(FileAccountBook(args.text))

    try:
        conn = sqlite3.connect(args.db)
    except sqlite3.Error as exc:
        print("エラー：", exc, file=sys.stderr)
        return 1
    with contextlib.closing(conn):
        book = AccountBook(conn)
        try:
            book.create_table()
        except sqlite3.Error as exc:
            print("エラー：", exc, file=sys.stderr)
            return 1
        return run(book)