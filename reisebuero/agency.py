"""The travel agency: loads bookings from JSON, groups them into travels and customers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from reisebuero.bookings import (
    Booking,
    FlightBooking,
    HotelBooking,
    RentalCarReservation,
    TrainTicket,
)
from reisebuero.travels import Customer, Travel

__all__ = ["Statistics", "TravelAgency"]

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "price", "fromDate", "toDate", "type", "customerId", "travelId")


class _EntryError(ValueError):
    """A single JSON entry could not be turned into a booking."""


def _require(entry: Mapping[str, Any], key: str) -> Any:
    try:
        return entry[key]
    except KeyError:
        raise _EntryError(f"Fehlendes Feld: {key}") from None


def _text(entry: Mapping[str, Any], key: str) -> str:
    value = _require(entry, key)
    if not isinstance(value, str):
        raise _EntryError(f"Feld {key} ist kein Text.")
    return value


def _number(entry: Mapping[str, Any], key: str) -> float:
    value = _require(entry, key)
    if not isinstance(value, (int, float)):
        raise _EntryError(f"Feld {key} ist keine Zahl.")
    return float(value)


def _identifier(entry: Mapping[str, Any], key: str) -> str:
    value = _require(entry, key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(int(value))
    raise _EntryError(f"Feld {key} ist weder Text noch Zahl.")


def _string_list(entry: Mapping[str, Any], key: str) -> list[str]:
    value = _require(entry, key)
    items = value if isinstance(value, list) else [value]
    if not all(isinstance(item, str) for item in items):
        raise _EntryError(f"Feld {key} enthält keinen Text.")
    return list(items)


def _parse_date(text: str) -> Optional[date]:
    """Parse ``yyyyMMdd``; anything that is not a valid date gives None."""
    if len(text) != 8 or not (text.isascii() and text.isdigit()):
        return None
    try:
        return date(int(text[:4]), int(text[4:6]), int(text[6:]))
    except ValueError:
        return None


def _format_date(value: Optional[date]) -> str:
    if value is None:
        return ""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


@dataclass(frozen=True)
class Statistics:
    """Summary figures reported after saving."""

    flight_count: int
    hotel_count: int
    rental_count: int
    total_value: float
    travel_count: int
    customer_count: int
    travels_of_customer_1: int
    bookings_of_travel_17: int

    def message(self) -> str:
        """Return the summary as a German text."""
        return (
            f"Es wurden {self.flight_count} Flugreservierungen, {self.hotel_count} "
            f"Hotelbuchungen und {self.rental_count} Mietwagenreservierungen "
            f"im Gesamtwert von {self.total_value:.2f} Euro eingelesen.\n"
            f"Es wurden {self.travel_count} Reisen und {self.customer_count} "
            "Kunden angelegt.\n"
            f"Der Kunde mit der ID 1 hat {self.travels_of_customer_1} Reisen gebucht.\n"
            f"Zur Reise mit der ID 17 gehören {self.bookings_of_travel_17} Buchungen."
        )


@dataclass
class TravelAgency:
    """All bookings, travels and customers known to the agency."""

    bookings: list[Booking] = field(default_factory=list)
    travels: list[Travel] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)

    def reset(self) -> None:
        """Forget all bookings, travels and customers."""
        self.bookings.clear()
        self.travels.clear()
        self.customers.clear()

    def load_entries(self, entries: Iterable[Any]) -> list[str]:
        """Replace the agency's data with the given JSON entries.

        Entries that cannot be read are skipped; the returned list holds one
        message for each of them.
        """
        self.reset()
        seen_ids: set[str] = set()
        problems: list[str] = []
        for entry in entries:
            try:
                self._load_entry(entry, seen_ids)
            except _EntryError as exc:
                logger.warning("Fehler beim Einlesen: %s", exc)
                problems.append(str(exc))
        return problems

    def _load_entry(self, entry: Any, seen_ids: set[str]) -> None:
        if not isinstance(entry, Mapping) or any(key not in entry for key in _REQUIRED_FIELDS):
            raise _EntryError("Fehlende Pflichtfelder.")
        if "firstName" not in entry and "customerFirstname" not in entry:
            raise _EntryError("Fehlender Vorname.")
        if "lastName" not in entry and "customerLastname" not in entry:
            raise _EntryError("Fehlender Nachname.")

        booking_id = _text(entry, "id")
        if booking_id in seen_ids:
            raise _EntryError(f"Doppelte Buchungs-ID: {booking_id}")
        seen_ids.add(booking_id)

        price = _number(entry, "price")
        from_date = _parse_date(_text(entry, "fromDate"))
        to_date = _parse_date(_text(entry, "toDate"))
        kind = _text(entry, "type")
        travel_id = _identifier(entry, "travelId")
        customer_id = _identifier(entry, "customerId")
        first_name = _text(entry, "firstName" if "firstName" in entry else "customerFirstname")
        last_name = _text(entry, "lastName" if "lastName" in entry else "customerLastname")

        customer = self.find_customer_by_id(customer_id)
        if customer is None:
            customer = Customer(customer_id, first_name, last_name)
            self.customers.append(customer)

        travel = self.find_travel_by_id(travel_id)
        if travel is None:
            travel = Travel(travel_id)
            self.travels.append(travel)
            customer.add_travel(travel)

        booking = self._make_booking(entry, kind, booking_id, price, from_date, to_date)
        if booking is not None:
            self.bookings.append(booking)
            travel.add_booking(booking)

    @staticmethod
    def _make_booking(
        entry: Mapping[str, Any],
        kind: str,
        booking_id: str,
        price: float,
        from_date: Optional[date],
        to_date: Optional[date],
    ) -> Optional[Booking]:
        if kind == "Flight":
            return FlightBooking(
                booking_id,
                price,
                from_date,
                to_date,
                from_dest=_text(entry, "fromDest"),
                to_dest=_text(entry, "toDest"),
                airline=_text(entry, "airline"),
                booking_class=_text(entry, "bookingClass") if "bookingClass" in entry else "Y",
            )
        if kind == "Hotel":
            return HotelBooking(
                booking_id,
                price,
                from_date,
                to_date,
                hotel=_text(entry, "hotel"),
                town=_text(entry, "town"),
                room_type=_text(entry, "roomType") if "roomType" in entry else "Standard",
            )
        if kind in ("Rental", "RentalCar"):
            pickup = _text(entry, "pickupLocation")
            return_location = _text(entry, "returnLocation")
            company = _text(entry, "company")
            if "carType" in entry:
                car_type = _text(entry, "carType")
            elif "vehicleClass" in entry:
                car_type = _text(entry, "vehicleClass")
            else:
                car_type = "Standard"
            return RentalCarReservation(
                booking_id,
                price,
                from_date,
                to_date,
                pickup_location=pickup,
                return_location=return_location,
                company=company,
                car_type=car_type,
            )
        if kind == "Train":
            from_station = _text(entry, "fromStation")
            to_station = _text(entry, "toStation")
            departure = _text(entry, "departureTime")
            arrival = _text(entry, "arrivalTime")
            if "bookingClass" in entry:
                booking_class = _text(entry, "bookingClass")
            elif "ticketType" in entry:
                booking_class = _text(entry, "ticketType")
            else:
                booking_class = ""
            if "stops" in entry:
                stops = _string_list(entry, "stops")
            elif "connectingStations" in entry:
                stops = _string_list(entry, "connectingStations")
            else:
                stops = []
            return TrainTicket(
                booking_id,
                price,
                from_date,
                to_date,
                from_station=from_station,
                to_station=to_station,
                departure_time=departure,
                arrival_time=arrival,
                booking_class=booking_class,
                stops=stops,
            )
        return None

    def read_file(self, filename: str) -> list[str]:
        """Load the agency's data from a JSON file; return messages for skipped entries."""
        self.reset()
        try:
            with open(filename, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise OSError(f"Datei konnte nicht geöffnet werden: {filename}") from exc
        if data is None:
            entries: list[Any] = []
        elif isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            entries = list(data.values())
        else:
            entries = [data]
        return self.load_entries(entries)

    def to_entries(self) -> list[dict[str, Any]]:
        """Return the bookings as JSON-ready dictionaries."""
        entries = []
        for booking in self.bookings:
            entry: dict[str, Any] = {
                "id": booking.id,
                "price": float(booking.price),
                "fromDate": _format_date(booking.from_date),
                "toDate": _format_date(booking.to_date),
            }
            if isinstance(booking, FlightBooking):
                entry.update(
                    type="Flight",
                    fromDest=booking.from_dest,
                    toDest=booking.to_dest,
                    airline=booking.airline,
                    bookingClass=booking.booking_class,
                )
            elif isinstance(booking, HotelBooking):
                entry.update(
                    type="Hotel",
                    hotel=booking.hotel,
                    town=booking.town,
                    roomType=booking.room_type,
                )
            elif isinstance(booking, RentalCarReservation):
                entry.update(
                    type="Rental",
                    pickupLocation=booking.pickup_location,
                    returnLocation=booking.return_location,
                    company=booking.company,
                    carType=booking.car_type,
                )
            elif isinstance(booking, TrainTicket):
                entry.update(
                    type="Train",
                    fromStation=booking.from_station,
                    toStation=booking.to_station,
                    departureTime=booking.departure_time,
                    arrivalTime=booking.arrival_time,
                    bookingClass=booking.booking_class,
                    stops=list(booking.stops),
                )

            travel = next((t for t in self.travels if t.contains_booking(booking)), None)
            if travel is not None:
                entry["travelId"] = travel.id
                customer = next(
                    (c for c in self.customers if c.contains_travel(travel)), None
                )
                if customer is not None:
                    entry["customerId"] = customer.id
                    entry["firstName"] = customer.first_name
                    entry["lastName"] = customer.last_name
            entries.append(entry)
        return entries

    def write_file(self, filename: str) -> Statistics:
        """Save all bookings as JSON and return the summary figures."""
        entries = self.to_entries()
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                json.dump(
                    entries or None, handle, indent=4, sort_keys=True, ensure_ascii=False
                )
                handle.write("\n")
        except OSError as exc:
            raise OSError(
                f"Datei konnte nicht geöffnet werden zum Schreiben: {filename}"
            ) from exc
        return self.statistics()

    def statistics(self) -> Statistics:
        """Compute the summary figures of the current data."""
        customer = self.find_customer_by_id("1")
        travel = self.find_travel_by_id("17")
        return Statistics(
            flight_count=sum(isinstance(b, FlightBooking) for b in self.bookings),
            hotel_count=sum(isinstance(b, HotelBooking) for b in self.bookings),
            rental_count=sum(isinstance(b, RentalCarReservation) for b in self.bookings),
            total_value=sum(b.price for b in self.bookings),
            travel_count=len(self.travels),
            customer_count=len(self.customers),
            travels_of_customer_1=len(customer.travels) if customer else 0,
            bookings_of_travel_17=len(travel.bookings) if travel else 0,
        )

    def find_booking(self, booking_id: str) -> Optional[Booking]:
        """Return the booking with the given id, or None."""
        return next((b for b in self.bookings if b.id == booking_id), None)

    def find_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the customer with the given id, or None."""
        return next((c for c in self.customers if c.id == customer_id), None)

    def find_travel_by_id(self, travel_id: str) -> Optional[Travel]:
        """Return the travel with the given id, or None."""
        return next((t for t in self.travels if t.id == travel_id), None)