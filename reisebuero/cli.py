"""Command line front end: load a booking file, look up customers, travels and bookings."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime
from typing import NamedTuple, Optional, Sequence

from reisebuero.agency import TravelAgency
from reisebuero.bookings import (
    Booking,
    FlightBooking,
    HotelBooking,
    RentalCarReservation,
    TrainTicket,
    format_german_date,
)
from reisebuero.details import BookingForm
from reisebuero.travels import Customer, Travel

__all__ = [
    "TravelRow",
    "BookingRow",
    "format_long_date",
    "travel_period",
    "customer_travel_rows",
    "travel_booking_rows",
    "main",
]

_WEEKDAYS = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")
_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)

_EARLIEST_START = date(9999, 12, 31)
_LATEST_END = date(1, 1, 1)

_ICONS: tuple[tuple[type, str], ...] = (
    (FlightBooking, "flug"),
    (HotelBooking, "hotel"),
    (RentalCarReservation, "auto"),
    (TrainTicket, "zug"),
)


class TravelRow(NamedTuple):
    """One line of a customer's travel table."""

    travel_id: str
    start: str
    end: str


class BookingRow(NamedTuple):
    """One line of a travel's booking table."""

    booking: Booking
    icon: str
    start: str
    end: str
    price: str


def format_long_date(value: Optional[date]) -> str:
    """Format a date like ``Montag, 1. Januar 2024``; a missing date gives an empty string."""
    if value is None:
        return ""
    return (
        f"{_WEEKDAYS[value.weekday()]}, {value.day}. "
        f"{_MONTHS[value.month - 1]} {value.year:04d}"
    )


def travel_period(travel: Travel) -> tuple[Optional[date], Optional[date]]:
    """Return the earliest start and latest end of a travel's bookings.

    A booking without a start date makes the start unknown (None).  A travel
    without bookings spans from 31.12.9999 to 01.01.0001.
    """
    start: Optional[date] = _EARLIEST_START
    end: Optional[date] = _LATEST_END
    for booking in travel.bookings:
        if booking.from_date is None:
            start = None
        elif start is not None and booking.from_date < start:
            start = booking.from_date
        if booking.to_date is not None and (end is None or booking.to_date > end):
            end = booking.to_date
    return start, end


def customer_travel_rows(customer: Customer) -> list[TravelRow]:
    """Return one row per travel of the customer with its id and period."""
    rows = []
    for travel in customer.travels:
        start, end = travel_period(travel)
        rows.append(TravelRow(travel.id, format_long_date(start), format_long_date(end)))
    return rows


def _icon(booking: Booking) -> str:
    return next((name for cls, name in _ICONS if isinstance(booking, cls)), "")


def travel_booking_rows(travel: Travel) -> list[BookingRow]:
    """Return one row per booking of the travel with its kind, dates and price."""
    return [
        BookingRow(
            booking,
            _icon(booking),
            format_german_date(booking.from_date),
            format_german_date(booking.to_date),
            f"{booking.price:.2f}",
        )
        for booking in travel.bookings
    ]


def _german_date(text: str) -> date:
    try:
        return datetime.strptime(text, "%d.%m.%Y").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Ungültiges Datum: {text}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reisebuero", description="Reisebüro-Verwaltung")
    commands = parser.add_subparsers(dest="command", required=True)

    summary = commands.add_parser("summary", help="Datei einlesen und Umfang anzeigen")
    summary.add_argument("file")

    customer = commands.add_parser("customer", help="Reisen eines Kunden anzeigen")
    customer.add_argument("file")
    customer.add_argument("customer_id")

    travel = commands.add_parser("travel", help="Buchungen einer Reise anzeigen")
    travel.add_argument("file")
    travel.add_argument("travel_id")

    booking = commands.add_parser("booking", help="Details einer Buchung anzeigen")
    booking.add_argument("file")
    booking.add_argument("booking_id")

    edit = commands.add_parser("edit", help="Buchung ändern und speichern")
    edit.add_argument("file")
    edit.add_argument("booking_id")
    edit.add_argument("--price", type=float)
    edit.add_argument("--from", dest="from_date", type=_german_date, metavar="TT.MM.JJJJ")
    edit.add_argument("--to", dest="to_date", type=_german_date, metavar="TT.MM.JJJJ")
    edit.add_argument("--extra1")
    edit.add_argument("--extra2")
    edit.add_argument("--output", help="Zieldatei (Standard: Eingabedatei)")
    return parser


def _show_summary(agency: TravelAgency) -> int:
    print(
        f"{len(agency.bookings)} Buchungen, {len(agency.travels)} Reisen, "
        f"{len(agency.customers)} Kunden eingelesen."
    )
    return 0


def _show_customer(agency: TravelAgency, customer_id: str) -> int:
    customer_id = customer_id.strip()
    if not customer_id:
        print("Keine ID angegeben.", file=sys.stderr)
        return 1
    customer = agency.find_customer_by_id(customer_id)
    if customer is None:
        print("Kein Kunde mit dieser ID gefunden.", file=sys.stderr)
        return 1
    print(f"ID: {customer.id}")
    print(f"Vorname: {customer.first_name}")
    print(f"Nachname: {customer.last_name}")
    print("Reise-ID\tBeginn der Reise\tEnde der Reise")
    for row in customer_travel_rows(customer):
        print("\t".join(row))
    return 0


def _show_travel(agency: TravelAgency, travel_id: str) -> int:
    travel = agency.find_travel_by_id(travel_id)
    if travel is None:
        print("Keine Reise mit dieser ID gefunden.", file=sys.stderr)
        return 1
    print("Buchung\tStart\tEnde\tPreis")
    for row in travel_booking_rows(travel):
        print(f"{row.icon} {row.booking.id}\t{row.start}\t{row.end}\t{row.price}")
    return 0


def _find_booking(agency: TravelAgency, booking_id: str) -> Optional[Booking]:
    booking = agency.find_booking(booking_id)
    if booking is None:
        print(f"Keine Buchung mit ID {booking_id} gefunden.", file=sys.stderr)
    return booking


def _show_booking(agency: TravelAgency, booking_id: str) -> int:
    booking = _find_booking(agency, booking_id)
    if booking is None:
        return 1
    form = BookingForm.from_booking(booking)
    print(booking.show_details())
    print(f"Buchung: {form.id}")
    print(f"Von: {format_german_date(form.from_date)}")
    print(f"Bis: {format_german_date(form.to_date)}")
    print(f"Preis: {form.price:.2f}")
    if form.extra1_label:
        print(f"{form.extra1_label}: {form.extra1}")
    if form.extra2_label:
        print(f"{form.extra2_label}: {form.extra2}")
    for line in form.details:
        print(line)
    return 0


def _edit_booking(agency: TravelAgency, args: argparse.Namespace) -> int:
    booking = _find_booking(agency, args.booking_id)
    if booking is None:
        return 1
    form = BookingForm.from_booking(booking)
    changes = {
        name: getattr(args, name)
        for name in ("price", "from_date", "to_date", "extra1", "extra2")
        if getattr(args, name) is not None
    }
    form.update(**changes)
    if not form.apply():
        print("Keine Änderungen.")
        return 0
    statistics = agency.write_file(args.output or args.file)
    print(statistics.message())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line front end and return its exit status."""
    args = _build_parser().parse_args(argv)
    agency = TravelAgency()
    try:
        agency.read_file(args.file)
        if args.command == "summary":
            return _show_summary(agency)
        if args.command == "customer":
            return _show_customer(agency, args.customer_id)
        if args.command == "travel":
            return _show_travel(agency, args.travel_id)
        if args.command == "booking":
            return _show_booking(agency, args.booking_id)
        return _edit_booking(agency, args)
    except (OSError, ValueError) as exc:
        print(f"Fehler: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())