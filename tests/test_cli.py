import io
import sqlite3
import sys

import pytest

from handson.accountbook import AccountBook, Item as DbItem, Summary
from handson.cli import main, run, run_text, show_items, show_summary
from handson.textbook import FileAccountBook, Item


@pytest.fixture
def book():
    conn = sqlite3.connect(":memory:")
    book = AccountBook(conn)
    book.create_table()
    yield book
    conn.close()


def test_show_items_with_ids():
    out = io.StringIO()
    show_items([DbItem("コーヒー", 100, id=1)], out)
    assert out.getvalue() == "===========\n[0001] コーヒー:100円\n===========\n"


def test_show_items_without_ids():
    out = io.StringIO()
    show_items([Item("コーヒー", 100)], out)
    assert out.getvalue().splitlines()[1] == "コーヒー:100円"


def test_show_summary_format():
    out = io.StringIO()
    show_summary([Summary("コーヒー", 1, 100)], out)
    assert out.getvalue().splitlines() == [
        "===========",
        "品目\t個数\t合計\t平均",
        "コーヒー\t1\t100円\t100.00円",
        "===========",
    ]


def test_run_adds_lists_and_quits(book):
    stdin = io.StringIO("1\n2\nコーヒー 100\n紅茶 150\n2\n4\n")
    out, err = io.StringIO(), io.StringIO()
    assert run(book, stdin, out, err) == 0
    text = out.getvalue()
    assert "[1]入力 [2]最新10件 [3]集計 [4]終了" in text
    assert text.index("[0002] 紅茶:150円") < text.index("[0001] コーヒー:100円")
    assert text.endswith("終了します\n")
    assert err.getvalue() == ""
    assert [i.category for i in book.get_items(10)] == ["紅茶", "コーヒー"]


def test_run_summary(book):
    book.add_item(Item("コーヒー", 100))
    out = io.StringIO()
    assert run(book, io.StringIO("3\n4\n"), out, io.StringIO()) == 0
    assert "コーヒー\t1\t100円\t100.00円" in out.getvalue()


def test_run_ends_at_end_of_input(book):
    out = io.StringIO()
    assert run(book, io.StringIO("9\n"), out, io.StringIO()) == 0
    assert "終了します" not in out.getvalue()


def test_run_reports_bad_price(book):
    err = io.StringIO()
    assert run(book, io.StringIO("1\n1\nコーヒー abc\n"), io.StringIO(), err) == 1
    assert err.getvalue().startswith("エラー: ")
    assert book.get_items(10) == []


def test_run_text_missing_file_is_error(tmp_path):
    err = io.StringIO()
    book = FileAccountBook(tmp_path / "missing.txt")
    assert run_text(book, io.StringIO("2\n"), io.StringIO(), err) == 1
    assert err.getvalue().startswith("エラー: ")


def test_run_text_adds_and_lists(tmp_path):
    path = tmp_path / "book.txt"
    out = io.StringIO()
    stdin = io.StringIO("1\n1\nコーヒー 100\n2\n3\n")
    assert run_text(FileAccountBook(path), stdin, out, io.StringIO()) == 0
    assert "コーヒー:100円" in out.getvalue().splitlines()
    assert path.read_text(encoding="utf-8") == "コーヒー 100\n"
    assert out.getvalue().endswith("終了します\n")


def test_run_text_mode_three_quits_without_summary(tmp_path):
    out = io.StringIO()
    book = FileAccountBook(tmp_path / "book.txt")
    assert run_text(book, io.StringIO("3\n"), out, io.StringIO()) == 0
    assert "品目\t個数" not in out.getvalue()
    assert out.getvalue().endswith("終了します\n")


def test_main_with_database(tmp_path, capsys, monkeypatch):
    db = tmp_path / "accountbook.db"
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n1\nコーヒー 100\n4\n"))
    assert main(["--db", str(db)]) == 0
    assert "終了します" in capsys.readouterr().out
    conn = sqlite3.connect(db)
    try:
        assert conn.execute("SELECT category, price FROM items").fetchall() == [
            ("コーヒー", 100)
        ]
    finally:
        conn.close()


def test_main_with_text_file(tmp_path, capsys, monkeypatch):
    path = tmp_path / "book.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n1\n紅茶 150\n3\n"))
    assert main(["--text", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "紅茶 150\n"