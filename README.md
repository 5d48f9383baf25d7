# handson

Small, self-contained exercises collected into one package:

- **Coffee brewing** (`handson.coffee`): a simulation of boiling water,
  grinding beans and brewing coffee, one step after another, with typed
  quantities (`Water`, `HotWater`, `Bean`, `GroundBean`, `Coffee`) and an
  optional `Tracer` that records how long each step took.
- **Account book** (`handson.textbook`, `handson.accountbook`,
  `handson.entry`, `handson.cli`): record what you spent money on, first in
  a plain text file, then in SQLite with per-category summaries, through
  simple prompts and an interactive menu.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `handson-coffee` | Makes coffee one step after another and prints each ingredient and the result |
| `handson-entry` | Early account-book exercises: reading items from the keyboard |
| `handson-accountbook` | Interactive account book: enter items, show the latest 10, show a summary |

### `handson-coffee`

Options: `--cups N` (default 20), `--scale F` to multiply every waiting
time (default 1.0, so 20 cups take several seconds), and `--trace PATH` to
write the recorded regions as tab-separated lines to a file.

```
$ handson-coffee --scale 0
3600[ml] water
400[g] beans
3600[ml] hot water
400[g] ground beans
20 cup(s) coffee
```

### `handson-entry`

Subcommands:

- `hello` prints `Hello, 世界` to standard error.
- `once` asks for one category and price and reports `<品目>に<値段>円使いました`.
- `many` asks how many items to enter, reads them and lists them.
- `file [--path PATH]` asks for items, writes them to the text file
  (default `accountbook.txt`, replaced each time) and lists its contents.

### `handson-accountbook`

Keeps the book in the SQLite file given by `--db` (default
`accountbook.db`) and shows the menu `[1]入力 [2]最新10件 [3]集計 [4]終了`.
With `--text PATH` it keeps the book in a text file instead and offers
`[1]入力 [2]最新10件 [3]終了`. The command exits with status 0 when you
choose quit or the input ends, and with status 1 after an error.

## Using the library

### Coffee

```python
import io

from handson.coffee import Coffee, Tracer, make_coffee

print(Coffee(2).water())        # 360[ml] water
tracer = Tracer()
cups = make_coffee(8, tracer=tracer, scale=0, out=io.StringIO())
print(cups)                     # 8 cup(s) coffee
```

Quantities of different kinds cannot be added to each other; doing so
raises `TypeError`.

### Account book in a text file

```python
from handson.textbook import FileAccountBook, Item

book = FileAccountBook("accountbook.txt")
book.add_item(Item("コーヒー", 120))
print(book.get_items(10))   # at most the last 10 items, oldest first
```

Each line holds `category price` separated by a single space. `parse_line`
raises `ParseError` (a `ValueError`) for a line that does not split into
exactly two fields or whose price is not an integer. A negative limit
raises `ValueError`.

### Account book in SQLite

```python
import sqlite3

from handson.accountbook import AccountBook
from handson.textbook import Item

book = AccountBook(sqlite3.connect("accountbook.db"))
book.create_table()
book.add_item(Item(category="コーヒー", price=120))

for item in book.get_items(10):   # newest first, each with its id
    print(item)

for summary in book.get_summaries():
    print(summary.category, summary.count, summary.sum, summary.avg())
```

A summary's average is `0.0` when its count is zero.

`handson.cli.show_items` and `handson.cli.show_summary` write the same
listings the interactive menu prints; `handson.cli.run` and
`handson.cli.run_text` run the menu on any input and output streams.

## What this package does not do

- The coffee simulation runs each step one after another only; it has no
  concurrent version.
- The account book has no web pages and no HTTP server: it is used from
  the terminal or as a library.
- There is no binary-tree exercise.