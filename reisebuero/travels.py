"""Travels group bookings; customers own travels."""

from __future__ import annotations

from dataclasses import dataclass, field

from reisebuero.bookings import Booking

__all__ = ["Travel", "Customer"]


@dataclass(eq=False)
class Travel:
    """A travel made up of several bookings."""

    id: str
    bookings: list[Booking] = field(default_factory=list)

    def add_booking(self, booking: Booking) -> None:
        """Append a booking to this travel."""
        self.bookings.append(booking)

    def contains_booking(self, booking: Booking) -> bool:
        """Tell whether this very booking object belongs to the travel."""
        return any(b is booking for b in self.bookings)


@dataclass(eq=False)
class Customer:
    """A customer with the travels booked by them."""

    id: str
    first_name: str
    last_name: str
    travels: list[Travel] = field(default_factory=list)

    def add_travel(self, travel: Travel) -> None:
        """Append a travel to this customer."""
        self.travels.append(travel)

    def contains_travel(self, travel: Travel) -> bool:
        """Tell whether this very travel object belongs to the customer."""
        return any(t is travel for t in self.travels)