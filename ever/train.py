"""Trains and named access to their fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


class UnknownFieldError(ValueError):
    """The record has no field of the given name."""


class FieldTypeError(ValueError):
    """A value of the wrong type was given for a field."""


_WRONG_TYPE = "Hibas template parameter"


def _coerce(value: Any, kind: type) -> Any:
    """Check that value suits a field of the given type and return it."""
    if isinstance(value, bool) and kind is not bool:
        raise FieldTypeError(_WRONG_TYPE)
    if kind is float and isinstance(value, int):
        return float(value)
    if isinstance(value, kind):
        return value
    raise FieldTypeError(_WRONG_TYPE)


_TRAIN_FIELDS: dict[str, tuple[str, type]] = {
    "vonatszam": ("number", int),
    "indulasi_allomas": ("departure_station", str),
    "indulasi_ido": ("departure_time", str),
    "erkezesi_allomas": ("arrival_station", str),
    "erkezesi_ido": ("arrival_time", str),
}


def _lookup(name: str) -> tuple[str, type]:
    try:
        return _TRAIN_FIELDS[name]
    except KeyError:
        raise UnknownFieldError("A Vonat osztalynak nincs ilyen mezoje") from None


@dataclass
class Train:
    """A train with its number, departure and arrival."""

    number: int = 0
    departure_station: str = ""
    departure_time: str = ""
    arrival_station: str = ""
    arrival_time: str = ""

    FIELDS: ClassVar[tuple[str, ...]] = tuple(_TRAIN_FIELDS)

    def __getitem__(self, name: str) -> str:
        """Return the named field as text."""
        attr, _ = _lookup(name)
        return str(getattr(self, attr))

    def __setitem__(self, name: str, value: Any) -> None:
        """Set the named field, checking the value's type."""
        attr, kind = _lookup(name)
        setattr(self, attr, _coerce(value, kind))

    def value(self, name: str) -> Any:
        """Return the named field with its own type."""
        attr, _ = _lookup(name)
        return getattr(self, attr)