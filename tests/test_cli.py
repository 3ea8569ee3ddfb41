import json
import re
from datetime import date

import pytest

from reisebuero.agency import TravelAgency
from reisebuero.bookings import HotelBooking, format_german_date
from reisebuero.cli import (
    customer_travel_rows,
    format_long_date,
    main,
    travel_booking_rows,
    travel_period,
)
from reisebuero.travels import Customer, Travel

ENTRIES = [
    {
        "id": "B1", "price": 100.0, "fromDate": "20240105", "toDate": "20240107",
        "type": "Hotel", "hotel": "Hotel Adler", "town": "Berlin", "roomType": "DZ",
        "customerId": 1, "travelId": 17, "firstName": "Anna", "lastName": "Muster",
    },
    {
        "id": "B2", "price": 250.5, "fromDate": "20240104", "toDate": "20240104",
        "type": "Flight", "fromDest": "FRA", "toDest": "BER", "airline": "Air Test",
        "bookingClass": "J", "customerId": 1, "travelId": 17,
        "firstName": "Anna", "lastName": "Muster",
    },
    {
        "id": "B3", "price": 40, "fromDate": "20240301", "toDate": "20240303",
        "type": "Train", "fromStation": "Köln", "toStation": "Bonn",
        "departureTime": "10:00", "arrivalTime": "10:30", "bookingClass": "SP2",
        "stops": ["Wesseling"], "customerId": "2", "travelId": "18",
        "firstName": "Ben", "lastName": "Beispiel",
    },
]


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "buchungen.json"
    path.write_text(json.dumps(ENTRIES), encoding="utf-8")
    return path


@pytest.fixture
def agency():
    result = TravelAgency()
    result.load_entries(ENTRIES)
    return result


def test_format_long_date_pinned():
    assert format_long_date(date(2024, 1, 1)) == "Montag, 1. Januar 2024"
    assert format_long_date(date(2024, 12, 24)) == "Dienstag, 24. Dezember 2024"


def test_format_long_date_missing():
    assert format_long_date(None) == ""


def test_travel_period_spans_bookings(agency):
    travel = agency.find_travel_by_id("17")
    assert travel_period(travel) == (date(2024, 1, 4), date(2024, 1, 7))


def test_travel_period_empty_travel():
    assert travel_period(Travel("X")) == (date(9999, 12, 31), date(1, 1, 1))


def test_travel_period_missing_start_date():
    travel = Travel("X")
    travel.add_booking(HotelBooking("H", 1.0, None, date(2024, 5, 2), "A", "B", "EZ"))
    travel.add_booking(HotelBooking("I", 1.0, date(2024, 5, 1), date(2024, 5, 3), "A", "B", "EZ"))
    start, end = travel_period(travel)
    assert start is None
    assert end == date(2024, 5, 3)


def test_customer_travel_rows(agency):
    customer = agency.find_customer_by_id("1")
    rows = customer_travel_rows(customer)
    assert [row.travel_id for row in rows] == ["17"]
    assert rows[0].start == format_long_date(date(2024, 1, 4))
    assert rows[0].end == format_long_date(date(2024, 1, 7))


def test_customer_without_travels_has_no_rows():
    assert customer_travel_rows(Customer("9", "A", "B")) == []


def test_travel_booking_rows(agency):
    travel = agency.find_travel_by_id("17")
    rows = travel_booking_rows(travel)
    assert [row.booking.id for row in rows] == ["B1", "B2"]
    assert [row.icon for row in rows] == ["hotel", "flug"]
    for row in rows:
        assert row.start == format_german_date(row.booking.from_date)
        assert row.end == format_german_date(row.booking.to_date)
        assert re.fullmatch(r"\d+\.\d{2}", row.price)
        assert float(row.price) == row.booking.price


def test_train_icon(agency):
    rows = travel_booking_rows(agency.find_travel_by_id("18"))
    assert [row.icon for row in rows] == ["zug"]


def test_main_summary(data_file, capsys):
    assert main(["summary", str(data_file)]) == 0
    assert "3 Buchungen, 2 Reisen, 2 Kunden eingelesen." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["summary", str(tmp_path / "fehlt.json")]) == 1
    assert "Datei konnte nicht geöffnet werden" in capsys.readouterr().err


def test_main_customer(data_file, capsys):
    assert main(["customer", str(data_file), " 1 "]) == 0
    out = capsys.readouterr().out
    assert "Vorname: Anna" in out
    assert "Nachname: Muster" in out
    assert "17\t" in out


def test_main_unknown_customer(data_file, capsys):
    assert main(["customer", str(data_file), "99"]) == 1
    assert "Kein Kunde mit dieser ID gefunden." in capsys.readouterr().err


def test_main_empty_customer_id(data_file):
    assert main(["customer", str(data_file), "   "]) == 1


def test_main_travel(data_file, capsys):
    assert main(["travel", str(data_file), "17"]) == 0
    out = capsys.readouterr().out
    assert "hotel B1" in out
    assert "flug B2" in out


def test_main_unknown_travel(data_file):
    assert main(["travel", str(data_file), "99"]) == 1


def test_main_booking(data_file, capsys):
    assert main(["booking", str(data_file), "B3"]) == 0
    out = capsys.readouterr().out
    assert "Abfahrt von: Köln" in out
    assert "Buchungsklasse: Sparpreis 2. Klasse" in out
    assert "Wesseling" in out


def test_main_unknown_booking(data_file, capsys):
    assert main(["booking", str(data_file), "B9"]) == 1
    assert "Keine Buchung mit ID B9 gefunden." in capsys.readouterr().err


def test_main_edit_writes_output(data_file, tmp_path, capsys):
    output = tmp_path / "neu.json"
    code = main([
        "edit", str(data_file), "B1", "--price", "120", "--extra1", "Hotel Linde",
        "--to", "08.01.2024", "--output", str(output),
    ])
    assert code == 0
    assert "Zur Reise mit der ID 17 gehören 2 Buchungen." in capsys.readouterr().out
    reloaded = TravelAgency()
    reloaded.read_file(str(output))
    booking = reloaded.find_booking("B1")
    assert booking.price == 120.0
    assert booking.hotel == "Hotel Linde"
    assert booking.to_date == date(2024, 1, 8)
    assert booking.town == "Berlin"


def test_main_edit_without_changes_does_not_save(data_file, tmp_path):
    output = tmp_path / "neu.json"
    assert main(["edit", str(data_file), "B1", "--output", str(output)]) == 0
    assert not output.exists()


def test_main_edit_bad_date(data_file):
    with pytest.raises(SystemExit):
        main(["edit", str(data_file), "B1", "--from", "2024-01-01"])