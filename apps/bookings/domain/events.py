"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass(kw_only=True)
class BookingCreated(DomainEvent):
    """
    Event: A new booking was created in PENDING status
    """
    booking_id: UUID
    guest_name: str
    guest_email: str
    room_id: str
    stay: DateRange
    number_of_guests: int
    total_amount: Decimal
