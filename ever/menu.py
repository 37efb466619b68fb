"""Interactive text menu for managing trains and selling tickets."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from enum import Enum, auto
from typing import Optional, TextIO, TypeVar

from .storage import (
    find_train,
    load_tickets,
    load_trains,
    parse_bool,
    sales_summary,
    save_tickets,
    save_trains,
    timetable,
)
from .ticket import Ticket
from .tokens import EndOfInput, InputError, TokenReader
from .train import Train

_T = TypeVar("_T")

_BANNER = (
    "\n"
    "============ E V E R ============\n"
    "Egyszerű Vonatjegy Eladó Rendszer\n"
    "\t1. Vonat adatbázis betöltése/mentése \n"
    "\t2. Jegy adatbázis betöltése/mentése \n"
    "\t3. Vonat felvétele \n"
    "\t4. Vonat törlése \n"
    "\t5. Jegy kiadása \n"
    "\t6. Menetrend generálása \n"
    "\t7. Eladások összesítése \n"
    "\t8. Kilépés \n"
)


class MenuState(Enum):
    """The screens the menu moves between."""

    MAIN = auto()
    TRAIN_DATA = auto()
    TICKET_DATA = auto()
    ADD_TRAIN = auto()
    DELETE_TRAIN = auto()
    ISSUE_TICKET = auto()
    TIMETABLE = auto()
    SALES = auto()
    QUIT = auto()


_CHOICES = {
    1: MenuState.TRAIN_DATA,
    2: MenuState.TICKET_DATA,
    3: MenuState.ADD_TRAIN,
    4: MenuState.DELETE_TRAIN,
    5: MenuState.ISSUE_TICKET,
    6: MenuState.TIMETABLE,
    7: MenuState.SALES,
    8: MenuState.QUIT,
}


class Menu:
    """The user interface: reads commands from one stream, answers on another.

    Running out of input raises EndOfInput from next_state.
    """

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self._reader = TokenReader(sys.stdin if stdin is None else stdin)
        self._out = sys.stdout if stdout is None else stdout
        self._state = MenuState.MAIN
        self._running = True
        self.trains: list[Train] = []
        self.tickets: list[Ticket] = []

    @property
    def state(self) -> MenuState:
        """The screen the next call of next_state shows."""
        return self._state

    def active(self) -> bool:
        """Return True until the user asks to quit."""
        return self._running

    def next_state(self) -> None:
        """Run the current screen and move on to the next one."""
        handlers = {
            MenuState.MAIN: self._main_screen,
            MenuState.TRAIN_DATA: self._train_data,
            MenuState.TICKET_DATA: self._ticket_data,
            MenuState.ADD_TRAIN: self._add_train,
            MenuState.DELETE_TRAIN: self._delete_trains,
            MenuState.ISSUE_TICKET: self._issue_ticket,
            MenuState.TIMETABLE: self._timetable,
            MenuState.SALES: self._sales,
        }
        if self._state is MenuState.QUIT:
            self._running = False
            return
        handlers[self._state]()

    # input helpers

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask_int(self, prompt: str, low: int, high: int) -> int:
        choice = 0
        while not low <= choice <= high:
            self._write(prompt)
            try:
                choice = self._reader.integer()
            except InputError:
                self._reader.discard_line()
                choice = 0
        return choice

    def _ask_char(self, prompt: str, allowed: str) -> str:
        while True:
            self._reader.discard_line()
            self._write(prompt)
            answer = self._reader.char()
            if answer in allowed:
                return answer

    def _ask_filename(self) -> str:
        self._write("Fájlnév: ")
        return self._reader.word()

    def _strict(self, read: Callable[[], _T]) -> _T:
        """Read a value; on bad input drop the rest of the line and re-raise."""
        try:
            return read()
        except InputError:
            self._reader.discard_line()
            raise

    def _report(self, path: str, verb: str, ok: bool) -> None:
        outcome = "sikeres" if ok else "sikertelen"
        self._write(f"[Válasz]: {path} {verb} {outcome} volt.\n")

    # screens

    def _main_screen(self) -> None:
        self._write(_BANNER)
        choice = self._ask_int("Művelet választás(1-8): ", 1, 8)
        self._state = _CHOICES[choice]

    def _load_or_save(self, what: str, store: list) -> tuple[str, str]:
        action = self._ask_char(f"{what} adatbázis betölt/ment? (b vagy m): ", "bm")
        if action == "b":
            overwrite = self._ask_char(
                f"{what} adatbázis felülír? (i vagy n): ", "in"
            )
            if overwrite == "i":
                store.clear()
        return action, self._ask_filename()

    def _train_data(self) -> None:
        self._state = MenuState.MAIN
        action, path = self._load_or_save("Vonat", self.trains)
        if action == "b":
            try:
                loaded = load_trains(path)
            except OSError:
                self._report(path, "beolvasása", False)
                return
            self.trains.extend(loaded)
            self._report(path, "beolvasása", True)
        else:
            try:
                save_trains(path, self.trains)
            except OSError:
                self._report(path, "mentése", False)
                return
            self._report(path, "mentése", True)

    def _ticket_data(self) -> None:
        self._state = MenuState.MAIN
        action, path = self._load_or_save("Jegy", self.tickets)
        if action == "b":
            try:
                loaded = load_tickets(path, self.trains)
            except OSError:
                self._report(path, "beolvasása", False)
                return
            self.tickets.extend(loaded)
            self._report(path, "beolvasása", True)
        else:
            try:
                save_tickets(path, self.tickets)
            except OSError:
                self._report(path, "mentése", False)
                return
            self._report(path, "mentése", True)

    def _add_train(self) -> None:
        self._write("Vonat felvétele (whitespace eldobásra kerül): \n")
        self._state = MenuState.MAIN
        try:
            self._write("[Új vonat][vonatszam]: ")
            number = self._strict(self._reader.integer)
            train = Train(number)
            for name in Train.FIELDS[1:]:
                self._write(f"[{number}][{name}]: ")
                train[name] = self._strict(self._reader.word)
        except InputError:
            self._write("[Új vonat] Vonat felvétele sikertelen\n")
            return
        self.trains.append(train)
        self._write(f"[{train['vonatszam']}] Vonat felvétele sikeres\n")

    def _confirm_delete(self, train: Train) -> str:
        self._write(timetable([train]))
        return self._ask_char(
            "Találat (i: töröl, n: nem töröl, a: összes töröl, c: megszakít): ",
            "inac",
        )

    def _delete_trains(self) -> None:
        self._state = MenuState.MAIN
        self._write("Melyik mező alapján történjen a törlés?\n")
        for position, name in enumerate(Train.FIELDS, start=1):
            self._write(f"\t{position}. {name}\n")
        choice = self._ask_int("Mező választás(1-5):", 1, len(Train.FIELDS))
        field = Train.FIELDS[choice - 1]
        self._write(
            "Keresett vonat mezőjének értéke (whitespace eldobásra kerül): "
        )
        wanted = self._reader.word()

        kept: list[Train] = []
        delete_all = False
        cancelled = False
        for train in self.trains:
            if cancelled or train[field] != wanted:
                kept.append(train)
                continue
            if delete_all:
                continue
            answer = self._confirm_delete(train)
            if answer == "a":
                delete_all = True
            elif answer == "n":
                kept.append(train)
            elif answer == "c":
                kept.append(train)
                cancelled = True
        self.trains[:] = kept
        if not cancelled:
            self._write("Törlés(ek) sikeres(ek).\n")

    def _issue_ticket(self) -> None:
        self._write("Jegy kiadása (whitespace eldobásra kerül): \n")
        self._state = MenuState.MAIN
        reader = self._reader
        try:
            self._write("[Új Jegy][vonatszam]: ")
            number = self._strict(reader.integer)
            ticket = Ticket(train=find_train(self.trains, number))
            self._write("[Új Jegy][kocsiszam]: ")
            ticket.car = self._strict(reader.integer)
            self._write("[Új Jegy][hely]: ")
            ticket.seat = self._strict(reader.word)
            self._write("[Új Jegy][ar]: ")
            ticket.price = self._strict(reader.real)
            self._write("[Új Jegy][kedvezmenyek]: ")
            ticket.discounts = self._strict(reader.word)
            self._write("[Új Jegy][kocsiosztaly]: ")
            ticket.car_class = self._strict(reader.integer)
            self._write("[Új Jegy][retur](True/False): ")
            ticket.is_return = parse_bool(self._strict(reader.word))
            self._write("[Új Jegy][elado_allomas]: ")
            ticket.sold_at = self._strict(reader.word)
        except ValueError:
            self._write("[Új Jegy] Jegy kiadása sikertelen\n")
            return
        self.tickets.append(ticket)
        self._write("[Új Jegy] Jegy kiadása sikeres\n")

    def _show_and_offer_save(self, text: str, question: str) -> None:
        self._state = MenuState.MAIN
        self._write(text + "\n")
        answer = self._ask_char(f"\n{question} (i vagy n): ", "in")
        if answer != "i":
            return
        path = self._ask_filename()
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text + "\n")
        except OSError:
            self._report(path, "mentése", False)
            return
        self._report(path, "mentése", True)

    def _timetable(self) -> None:
        self._show_and_offer_save(timetable(self.trains), "Menetrend mentése?")

    def _sales(self) -> None:
        self._show_and_offer_save(
            sales_summary(self.tickets), "Eladás összesítés mentése?"
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="ever", description="Egyszerű Vonatjegy Eladó Rendszer"
    )
    parser.parse_args(argv)
    menu = Menu(sys.stdin, sys.stdout)
    try:
        while menu.active():
            menu.next_state()
    except EndOfInput:
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())