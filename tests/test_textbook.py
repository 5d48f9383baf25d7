import pytest

from handson.textbook import (
    FileAccountBook,
    Item,
    ParseError,
    format_line,
    parse_line,
    read_items,
)


def test_parse_line():
    assert parse_line("コーヒー 100") == Item("コーヒー", 100)


def test_parse_line_signed_price():
    assert parse_line("返金 -100").price == -100
    assert parse_line("返金 +100").price == 100


@pytest.mark.parametrize("line", ["コーヒー", "コーヒー 100 円", "a  1", ""])
def test_parse_line_wrong_field_count(line):
    with pytest.raises(ParseError) as info:
        parse_line(line)
    assert str(info.value) == "パースに失敗しました"


@pytest.mark.parametrize("line", ["コーヒー abc", "コーヒー 1.5", "コーヒー ", "a 1_0"])
def test_parse_line_bad_price(line):
    with pytest.raises(ParseError):
        parse_line(line)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_line("x y")


def test_format_parse_round_trip():
    item = Item("ランチ", 850)
    assert parse_line(format_line(item)) == item
    assert format_line(item) == "ランチ 850"


def test_read_items(tmp_path):
    path = tmp_path / "accountbook.txt"
    path.write_text("コーヒー 100\r\nランチ 850\n", encoding="utf-8")
    assert read_items(path) == [Item("コーヒー", 100), Item("ランチ", 850)]


def test_read_items_bad_line(tmp_path):
    path = tmp_path / "accountbook.txt"
    path.write_text("コーヒー 100\n\nランチ 850\n", encoding="utf-8")
    with pytest.raises(ParseError):
        read_items(path)


def test_add_item_writes_lines(tmp_path):
    path = tmp_path / "accountbook.txt"
    book = FileAccountBook(path)
    book.add_item(Item("コーヒー", 100))
    book.add_item(Item("ランチ", 850))
    assert path.read_text(encoding="utf-8") == "コーヒー 100\nランチ 850\n"


def test_get_items_returns_latest(tmp_path):
    book = FileAccountBook(tmp_path / "accountbook.txt")
    items = [Item(f"item{n}", n) for n in range(5)]
    for item in items:
        book.add_item(item)
    assert book.get_items(10) == items
    assert book.get_items(5) == items
    assert book.get_items(2) == items[-2:]
    assert book.get_items(0) == []


def test_get_items_negative_limit(tmp_path):
    book = FileAccountBook(tmp_path / "accountbook.txt")
    book.add_item(Item("コーヒー", 100))
    with pytest.raises(ValueError):
        book.get_items(-1)


def test_get_items_missing_file(tmp_path):
    book = FileAccountBook(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        book.get_items(10)