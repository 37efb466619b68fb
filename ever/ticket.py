"""Tickets sold for trains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .train import FieldTypeError, Train, UnknownFieldError, _coerce, _WRONG_TYPE

_TICKET_FIELDS: dict[str, tuple[str, type]] = {
    "vonat": ("train", Train),
    "kocsiszam": ("car", int),
    "hely": ("seat", str),
    "ar": ("price", float),
    "kedvezmenyek": ("discounts", str),
    "kocsiosztaly": ("car_class", int),
    "retur": ("is_return", bool),
    "elado_allomas": ("sold_at", str),
}


def _lookup(name: str) -> tuple[str, type]:
    try:
        return _TICKET_FIELDS[name]
    except KeyError:
        raise UnknownFieldError("A Jegy osztalynak nincs ilyen mezoje") from None


@dataclass(eq=False)
class Ticket:
    """A ticket; tickets are ordered by price."""

    train: Optional[Train] = None
    car: int = 0
    seat: str = ""
    price: float = 0.0
    discounts: str = ""
    car_class: int = 3
    is_return: bool = False
    sold_at: str = ""

    def __getitem__(self, name: str) -> str:
        """Return the named field as text."""
        attr, _ = _lookup(name)
        value = getattr(self, attr)
        if attr == "train":
            return "" if value is None else value["vonatszam"]
        if attr == "price":
            return f"{value:f}"
        return str(value)

    def __setitem__(self, name: str, value: Any) -> None:
        """Set the named field, checking the value's type."""
        attr, kind = _lookup(name)
        if attr == "train":
            if value is not None and not isinstance(value, Train):
                raise FieldTypeError(_WRONG_TYPE)
        else:
            value = _coerce(value, kind)
        setattr(self, attr, value)

    def value(self, name: str) -> Any:
        """Return the named field with its own type."""
        attr, _ = _lookup(name)
        return getattr(self, attr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return (
            self.train is other.train
            and self.car == other.car
            and self.seat == other.seat
            and self.price == other.price
            and self.discounts == other.discounts
            and self.car_class == other.car_class
            and self.is_return == other.is_return
            and self.sold_at == other.sold_at
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return self.price < other.price

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return self.price > other.price