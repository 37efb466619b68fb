"""Loading, saving and listing trains and tickets."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import Optional, Union

from .ticket import Ticket
from .train import Train

StrPath = Union[str, "PathLike[str]"]

_SEPARATOR = ";"
_TRAIN_FIELD_COUNT = 5
_TICKET_FIELD_COUNT = 8

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_REAL = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text: str) -> int:
    """Return the integer at the start of text, or 0 if there is none."""
    found = _LEADING_INT.match(text)
    return int(found.group(1)) if found else 0


def _leading_real(text: str) -> float:
    """Return the number at the start of text, or 0.0 if there is none."""
    found = _LEADING_REAL.match(text)
    return float(found.group(1)) if found else 0.0


def _split_fields(line: str, count: int, what: str) -> list[str]:
    fields = line.split(_SEPARATOR)
    if len(fields) > count:
        raise ValueError(f"{what}: too many fields in {line!r}")
    return fields + [""] * (count - len(fields))


def parse_bool(text: str) -> bool:
    """Return True for "True" and False for "False"; reject anything else."""
    if text == "True":
        return True
    if text == "False":
        return False
    raise ValueError("Jegy: helytelen formatumu a retur mezo")


def find_train(trains: Iterable[Train], number: int) -> Optional[Train]:
    """Return the first train with the given number, or None."""
    return next((train for train in trains if train.number == number), None)


def parse_train_line(line: str) -> Train:
    """Build a train from a semicolon-separated record; missing fields are empty."""
    number, dep_station, dep_time, arr_station, arr_time = _split_fields(
        line, _TRAIN_FIELD_COUNT, "Vonat"
    )
    return Train(_leading_int(number), dep_station, dep_time, arr_station, arr_time)


def format_train_line(train: Train) -> str:
    """Return the semicolon-separated record of a train, without a newline."""
    return _SEPARATOR.join(train[name] for name in Train.FIELDS)


def parse_ticket_line(line: str, trains: Sequence[Train]) -> Ticket:
    """Build a ticket from a record, linking it to a train from trains."""
    (
        train_number,
        car,
        seat,
        price,
        discounts,
        car_class,
        is_return,
        sold_at,
    ) = _split_fields(line, _TICKET_FIELD_COUNT, "Jegy")
    return Ticket(
        train=find_train(trains, _leading_int(train_number)),
        car=_leading_int(car),
        seat=seat,
        price=_leading_real(price),
        discounts=discounts,
        car_class=_leading_int(car_class),
        is_return=parse_bool(is_return),
        sold_at=sold_at,
    )


_TICKET_COLUMNS = (
    "vonat",
    "kocsiszam",
    "hely",
    "ar",
    "kedvezmenyek",
    "kocsiosztaly",
    "retur",
    "elado_allomas",
)


def format_ticket_line(ticket: Ticket) -> str:
    """Return the semicolon-separated record of a ticket, without a newline."""
    return _SEPARATOR.join(ticket[name] for name in _TICKET_COLUMNS)


def _records(path: StrPath) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return handle.read().split()


def load_trains(path: StrPath) -> list[Train]:
    """Read trains from a file of whitespace-separated records."""
    return [parse_train_line(record) for record in _records(path)]


def save_trains(path: StrPath, trains: Iterable[Train]) -> None:
    """Write trains to a file, one record per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for train in trains:
            handle.write(format_train_line(train) + "\n")


def load_tickets(path: StrPath, trains: Sequence[Train]) -> list[Ticket]:
    """Read tickets from a file, linking each to a train by its number."""
    return [parse_ticket_line(record, trains) for record in _records(path)]


def save_tickets(path: StrPath, tickets: Iterable[Ticket]) -> None:
    """Write tickets to a file, one record per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for ticket in tickets:
            handle.write(format_ticket_line(ticket) + "\n")


def timetable(trains: Iterable[Train]) -> str:
    """Return the timetable of the trains, one line each."""
    return "".join(
        f"Vonatszám: {train['vonatszam']}\t"
        f"Honnan: {train['indulasi_allomas']}\t"
        f"Indul: {train['indulasi_ido']}\t"
        f"Hova: {train['erkezesi_allomas']}\t"
        f"Érkezik: {train['erkezesi_ido']}\n"
        for train in trains
    )


def sales_summary(tickets: Iterable[Ticket]) -> str:
    """Return a summary of the tickets sold, one line each."""
    return "".join(
        f"Vonatszám: {ticket['vonat']}\t"
        f"Kocsiszám: {ticket['kocsiszam']}\t"
        f"Hely: {ticket['hely']}\t"
        f"Ár: {ticket['ar']}\t"
        f"Kervezmények: {ticket['kedvezmenyek']}\t"
        f"Kocsiosztály: {ticket['kocsiosztaly']}\t"
        f"Retúr jegy: {ticket['retur']}\t"
        f"Eladás helye: {ticket['elado_allomas']}\n"
        for ticket in tickets
    )