"""
Booking Domain Entities

- Booking: aggregate root representing a hotel room reservation
- BookingStatus: lifecycle states of a booking
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from shared.domain.base import Aggregate
from shared.domain.value_objects import DateRange


class BookingStatus(Enum):
    """
    Booking lifecycle states

    New bookings always start as PENDING. The remaining states are part of
    the stored vocabulary; nothing in this service moves a booking into them.
    """
    PENDING = 'Pending'
    CONFIRMED = 'Confirmed'
    CHECKED_IN = 'CheckedIn'
    CHECKED_OUT = 'CheckedOut'
    CANCELLED = 'Cancelled'


@dataclass(kw_only=True, eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    A guest's reservation of a room for a date range. Field-level rules
    (lengths, formats, ranges) are checked before a booking is built; the
    aggregate itself trusts its input.
    """

    guest_name: str
    guest_email: str
    guest_phone: str
    room_id: str
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    total_amount: Decimal
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = None

    @property
    def stay(self) -> DateRange:
        return DateRange(self.check_in_date, self.check_out_date)
