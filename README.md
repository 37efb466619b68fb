# ever

A simple train ticket sales system with an interactive text menu. It keeps
trains and sold tickets in memory, loads and saves them as semicolon-separated
text files, prints the timetable and a summary of sales, and can write either
one to a file.

## Installation

```
pip install .
```

## Running

```
ever
```

The menu is in Hungarian. It offers:

1. Load or save the train database. When loading, you can choose to clear the trains already held first.
2. Load or save the ticket database, with the same choice. Loaded tickets are linked to held trains by train number.
3. Add a train.
4. Delete trains where a chosen field matches a value. Each match is confirmed with `i` (delete), `n` (keep), `a` (delete this and all later matches) or `c` (stop).
5. Issue a ticket.
6. Print the timetable and optionally save it to a file.
7. Print the sales summary and optionally save it to a file.
8. Quit.

Input is read one whitespace-separated word at a time, so names and values
must not contain spaces. If a value entered while adding a train or issuing a
ticket is malformed, the entry is dropped. If standard input ends, the command
exits with status -1.

## File formats

Trains are stored one per line:

```
number;departure_station;departure_time;arrival_station;arrival_time
```

Tickets are stored one per line:

```
train_number;car;seat;price;discounts;class;return;selling_station
```

Prices are written with six decimal places, and `return` is `True` or `False`.
When a file is read, records are split on any whitespace. Missing trailing
fields are left empty. Numeric fields take the leading number, or 0 if there
is none. A ticket whose train number matches no held train is kept without a
train, and its train number is saved as empty.

## Using it from Python

```python
import io
from ever.menu import Menu

stdin = io.StringIO("3\n1234\nKelenfold\n08:30\nKOKI\n09:00\n6\nn\n8\n")
stdout = io.StringIO()
menu = Menu(stdin, stdout)
while menu.active():
    menu.next_state()
print(stdout.getvalue())
```

`Menu` holds its data in the lists `menu.trains` and `menu.tickets`. The
`menu.state` property gives the screen that will be shown next, as a
`MenuState`. When input runs out, `next_state` raises
`ever.tokens.EndOfInput`.

The building blocks are spread over these modules:

- `ever.train` provides `Train`. Fields are read as text with `train["vonatszam"]`, or with their own type through `train.value(name)`. They are set with type checking through `train[name] = value`. An unknown field name raises `UnknownFieldError`, and a value of the wrong type raises `FieldTypeError`.
- `ever.ticket` provides `Ticket`, which offers the same field access. Tickets compare equal when all their fields are equal and they refer to the same train object. They are ordered by price.
- `ever.storage` provides:
  - `load_trains`, `save_trains`, `load_tickets` and `save_tickets` for reading and writing the files;
  - `parse_train_line`, `format_train_line`, `parse_ticket_line` and `format_ticket_line` for single records;
  - `find_train` and `parse_bool`;
  - `timetable` and `sales_summary`, which build the printed reports.
- `ever.tokens` provides `TokenReader`, the word-by-word input reader.

## What it does not do

Nothing is saved automatically. Data lives in memory until you save it
explicitly through menu items 1 and 2.

## Tests

```
pip install .[test]
pytest
```