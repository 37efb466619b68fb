import pytest

from ever.storage import (
    find_train,
    format_ticket_line,
    format_train_line,
    load_tickets,
    load_trains,
    parse_bool,
    parse_ticket_line,
    parse_train_line,
    sales_summary,
    save_tickets,
    save_trains,
    timetable,
)
from ever.ticket import Ticket
from ever.train import Train


@pytest.fixture
def trains():
    return [
        Train(5536, "BP.Nyugati", "07:45", "Dunakeszi", "08:03"),
        Train(1234, "Kelenföld", "08:30", "KÖKI", "09:00"),
    ]


@pytest.fixture
def tickets(trains):
    return [
        Ticket(trains[1], 402, "101", 1200.0, "nincs", 2, False, "KÖKI"),
        Ticket(trains[0], 301, "test", 0.0, "ingyen_van", 1, True, "BP.Déli"),
    ]


def test_parse_bool_accepts_exact_words():
    assert parse_bool("True") is True
    assert parse_bool("False") is False


@pytest.mark.parametrize("text", ["true", "", "1", "False "])
def test_parse_bool_rejects_other_text(text):
    with pytest.raises(ValueError):
        parse_bool(text)


def test_find_train_returns_matching_train(trains):
    assert find_train(trains, 1234) is trains[1]
    assert find_train(trains, 23420) is None


def test_find_train_returns_first_of_duplicates():
    first = Train(7, "A")
    second = Train(7, "B")
    assert find_train([first, second], 7) is first


def test_train_line_round_trip(trains):
    for train in trains:
        assert parse_train_line(format_train_line(train)) == train


def test_train_line_uses_semicolons(trains):
    assert format_train_line(trains[1]) == "1234;Kelenföld;08:30;KÖKI;09:00"


def test_short_train_line_leaves_fields_empty():
    train = parse_train_line("1223")
    assert train == Train(1223)


def test_train_line_with_too_many_fields_is_rejected():
    with pytest.raises(ValueError):
        parse_train_line("1;a;b;c;d;e")


def test_train_number_takes_leading_digits():
    assert parse_train_line("1234x;a;b;c;d").number == 1234
    assert parse_train_line("abc;a;b;c;d").number == 0


def test_ticket_line_round_trip(trains, tickets):
    for ticket in tickets:
        assert parse_ticket_line(format_ticket_line(ticket), trains) == ticket


def test_ticket_line_links_train_by_number(trains, tickets):
    parsed = parse_ticket_line(format_ticket_line(tickets[0]), trains)
    assert parsed.train is trains[1]


def test_ticket_line_for_unknown_train_has_no_train(tickets):
    parsed = parse_ticket_line(format_ticket_line(tickets[0]), [])
    assert parsed.train is None
    assert parsed.price == tickets[0].price


def test_ticket_line_with_bad_return_flag_is_rejected(trains):
    with pytest.raises(ValueError):
        parse_ticket_line("1234;402;101;1200;nincs;2;maybe;KÖKI", trains)


def test_ticket_line_with_too_many_fields_is_rejected(trains):
    with pytest.raises(ValueError):
        parse_ticket_line("1;2;3;4;5;6;True;8;9", trains)


def test_ticket_line_price_is_printed_with_six_decimals(tickets):
    assert format_ticket_line(tickets[1]).split(";")[3] == "0.000000"


def test_trains_file_round_trip(tmp_path, trains):
    path = tmp_path / "vonatok.txt"
    save_trains(path, trains)
    assert load_trains(path) == trains


def test_saved_trains_file_has_one_line_each(tmp_path, trains):
    path = tmp_path / "vonatok.txt"
    save_trains(path, trains)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [format_train_line(train) for train in trains]


def test_tickets_file_round_trip(tmp_path, trains, tickets):
    path = tmp_path / "jegyek.txt"
    save_tickets(path, tickets)
    assert load_tickets(path, trains) == tickets


def test_empty_files_load_nothing(tmp_path):
    path = tmp_path / "ures.txt"
    path.write_text("\n\n", encoding="utf-8")
    assert load_trains(path) == []
    assert load_tickets(path, []) == []


def test_loading_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_trains(tmp_path / "nincs.txt")
    with pytest.raises(OSError):
        load_tickets(tmp_path / "nincs.txt", [])


def test_timetable_lists_every_train(trains):
    text = timetable(trains)
    lines = text.splitlines()
    assert len(lines) == len(trains)
    assert lines[0] == (
        "Vonatszám: 5536\tHonnan: BP.Nyugati\tIndul: 07:45\t"
        "Hova: Dunakeszi\tÉrkezik: 08:03"
    )
    assert text.endswith("\n")


def test_timetable_of_no_trains_is_empty():
    assert timetable([]) == ""


def test_sales_summary_lists_every_ticket(tickets):
    lines = sales_summary(tickets).splitlines()
    assert len(lines) == len(tickets)
    assert lines[1].startswith("Vonatszám: 5536\tKocsiszám: 301\tHely: test\t")
    assert "Retúr jegy: True" in lines[1]
    assert lines[1].endswith("Eladás helye: BP.Déli")


def test_sales_summary_ticket_without_train_has_empty_number():
    line = sales_summary([Ticket()]).splitlines()[0]
    assert line.startswith("Vonatszám: \t")
    assert "Kocsiosztály: 3" in line