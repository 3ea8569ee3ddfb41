"""Editing form for a single booking, with readable names for tariff and room codes."""

from __future__ import annotations

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

__all__ = [
    "describe_train_class",
    "describe_flight_class",
    "describe_room_type",
    "BookingForm",
]

_TRAIN_CLASSES = {
    "SSP1": "Supersparpreis 1. Klasse",
    "SSP2": "Supersparpreis 2. Klasse",
    "SP1": "Sparpreis 1. Klasse",
    "SP2": "Sparpreis 2. Klasse",
    "FP1": "Flexpreis 1. Klasse",
    "FP2": "Flexpreis 2. Klasse",
}

_FLIGHT_CLASSES = {
    "Y": "Economy",
    "W": "Premium Economy",
    "J": "Business",
    "F": "First",
}

_ROOM_TYPES = {
    "EZ": "Einzelzimmer",
    "DZ": "Doppelzimmer",
    "SU": "Suite",
    "AP": "Appartment",
}

# The two free-text fields of the form map onto these attributes, per booking type.
_EXTRA_ATTRIBUTES: tuple[tuple[type, str, str], ...] = (
    (TrainTicket, "from_station", "to_station"),
    (FlightBooking, "from_dest", "to_dest"),
    (HotelBooking, "hotel", "town"),
    (RentalCarReservation, "pickup_location", "return_location"),
)

_EDITABLE_FIELDS = frozenset({"price", "from_date", "to_date", "extra1", "extra2"})


def describe_train_class(code: str) -> str:
    """Return the German name of a train tariff code; unknown codes are returned as given."""
    return _TRAIN_CLASSES.get(code, code)


def describe_flight_class(code: str) -> str:
    """Return the name of a flight booking class; unknown codes are returned as given."""
    return _FLIGHT_CLASSES.get(code, code)


def describe_room_type(code: str) -> str:
    """Return the German name of a room category; unknown codes are returned as given."""
    return _ROOM_TYPES.get(code, code)


def _extra_attributes(booking: Booking) -> Optional[tuple[str, str]]:
    for cls, first, second in _EXTRA_ATTRIBUTES:
        if isinstance(booking, cls):
            return first, second
    return None


@dataclass
class BookingForm:
    """The editable view of one booking; changes reach the booking only on apply()."""

    booking: Booking
    id: str
    price: float
    from_date: Optional[date]
    to_date: Optional[date]
    extra1: str = ""
    extra2: str = ""
    extra1_label: str = ""
    extra2_label: str = ""
    details: list[str] = field(default_factory=list)
    modified: bool = False

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingForm":
        """Fill a form with the values of a booking."""
        form = cls(
            booking=booking,
            id=booking.id,
            price=booking.price,
            from_date=booking.from_date,
            to_date=booking.to_date,
        )
        if isinstance(booking, TrainTicket):
            form.extra1_label, form.extra1 = "Abfahrt von", booking.from_station
            form.extra2_label, form.extra2 = "Ankunft in", booking.to_station
            form.details = [
                "Buchungsklasse: " + describe_train_class(booking.booking_class),
                *booking.stops,
            ]
        elif isinstance(booking, FlightBooking):
            form.extra1_label, form.extra1 = "Von Flughafen", booking.from_dest
            form.extra2_label, form.extra2 = "Nach Flughafen", booking.to_dest
            form.details = [
                "Airline: " + booking.airline,
                "Buchungsklasse: " + describe_flight_class(booking.booking_class),
            ]
        elif isinstance(booking, HotelBooking):
            form.extra1_label, form.extra1 = "Hotel", booking.hotel
            form.extra2_label, form.extra2 = "Ort", booking.town
            form.details = ["Zimmerkategorie: " + describe_room_type(booking.room_type)]
        elif isinstance(booking, RentalCarReservation):
            form.extra1_label, form.extra1 = "Abholung", booking.pickup_location
            form.extra2_label, form.extra2 = "Rückgabe", booking.return_location
            form.details = ["Firma: " + booking.company]
        return form

    def update(self, **kwargs: Any) -> None:
        """Change editable fields; the form counts as modified once a value differs."""
        unknown = set(kwargs) - _EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"Nicht änderbare Felder: {', '.join(sorted(unknown))}")
        for name, value in kwargs.items():
            if name == "price":
                value = float(value)
            if getattr(self, name) != value:
                setattr(self, name, value)
                self.modified = True

    def apply(self) -> bool:
        """Write the form's values back into the booking if it was modified."""
        if not self.modified:
            return False
        booking = self.booking
        booking.price = self.price
        booking.from_date = self.from_date
        booking.to_date = self.to_date
        attributes = _extra_attributes(booking)
        if attributes is not None:
            first, second = attributes
            setattr(booking, first, self.extra1)
            setattr(booking, second, self.extra2)
        return True