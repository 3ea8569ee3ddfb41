"""Booking types of the travel agency: flights, hotels, rental cars and trains."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

__all__ = [
    "Booking",
    "FlightBooking",
    "HotelBooking",
    "RentalCarReservation",
    "TrainTicket",
    "format_german_date",
]


def format_german_date(value: Optional[date]) -> str:
    """Format a date as ``dd.MM.yyyy``; a missing date gives an empty string."""
    if value is None:
        return ""
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def _money(price: float) -> str:
    return f"{price:.2f}"


@dataclass(eq=False)
class Booking(ABC):
    """A single booked item with an id, a price and a date range."""

    id: str
    price: float
    from_date: Optional[date]
    to_date: Optional[date]

    @abstractmethod
    def show_details(self) -> str:
        """Return a human-readable description of the booking."""


@dataclass(eq=False)
class FlightBooking(Booking):
    """A flight between two airports."""

    from_dest: str
    to_dest: str
    airline: str
    booking_class: str

    def show_details(self) -> str:
        return (
            f"Flugbuchung von {self.from_dest} nach {self.to_dest} mit {self.airline}"
            f" am {format_german_date(self.from_date)}. Preis: {_money(self.price)} Euro"
        )


@dataclass(eq=False)
class HotelBooking(Booking):
    """A hotel stay."""

    hotel: str
    town: str
    room_type: str

    def show_details(self) -> str:
        return (
            f"Hotelreservierung im {self.hotel} in {self.town}"
            f" vom {format_german_date(self.from_date)}"
            f" bis zum {format_german_date(self.to_date)}."
            f" Preis: {self.price:g} Euro"
        )


@dataclass(eq=False)
class RentalCarReservation(Booking):
    """A rental car picked up and returned at given locations."""

    pickup_location: str
    return_location: str
    company: str
    car_type: str

    def show_details(self) -> str:
        return (
            f"Mietwagenreservierung mit {self.company}."
            f" Abholung am {format_german_date(self.from_date)} in {self.pickup_location},"
            f" Rückgabe am {format_german_date(self.to_date)} in {self.return_location}."
            f" Preis: {_money(self.price)} Euro"
        )


@dataclass(eq=False)
class TrainTicket(Booking):
    """A train journey, optionally with intermediate stops."""

    from_station: str
    to_station: str
    departure_time: str
    arrival_time: str
    booking_class: str
    stops: list[str] = field(default_factory=list)

    def show_details(self) -> str:
        details = (
            f"Zugbuchung von {self.from_station} nach {self.to_station}"
            f" am {format_german_date(self.from_date)},"
            f" Abfahrt: {self.departure_time}, Ankunft: {self.arrival_time},"
            f" Tarif: {self.booking_class}. Preis: {_money(self.price)} Euro."
        )
        if self.stops:
            details += " Zwischenhalte: " + ", ".join(self.stops)
        return details