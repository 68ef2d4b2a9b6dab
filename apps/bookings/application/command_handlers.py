"""
Booking Command Handlers

Commands:
- CreateBookingCommand: Create a new booking in PENDING status
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import utcnow
from apps.bookings.application.repositories import BookingRepository
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.events import BookingCreated

logger = logging.getLogger(__name__)

BOOKING_CREATED_MESSAGE = "Booking created successfully"


# ===== Commands =====

@dataclass(frozen=True)
class CreateBookingCommand:
    guest_name: str
    guest_email: str
    guest_phone: str
    room_id: str
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    total_amount: Decimal
    notes: Optional[str] = None


@dataclass(frozen=True)
class CreateBookingResult:
    booking_id: UUID
    status: str
    message: str


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    The command has already passed create_booking_validator when it reaches
    the handler. The identifier is generated before anything is written so
    that the stored document and the BookingCreated event share it.
    """

    def __init__(self, booking_repo: BookingRepository, bus):
        self.booking_repo = booking_repo
        self.bus = bus

    def handle(self, command: CreateBookingCommand) -> CreateBookingResult:
        booking_id = uuid4()
        logger.info(
            f"Creating booking {booking_id} for room {command.room_id}, "
            f"dates {command.check_in_date} - {command.check_out_date}"
        )

        booking = Booking(
            id=booking_id,
            guest_name=command.guest_name,
            guest_email=command.guest_email,
            guest_phone=command.guest_phone,
            room_id=command.room_id,
            check_in_date=command.check_in_date,
            check_out_date=command.check_out_date,
            number_of_guests=command.number_of_guests,
            total_amount=command.total_amount,
            status=BookingStatus.PENDING,
            created_at=utcnow(),
            notes=command.notes,
        )
        booking.add_event(BookingCreated(
            aggregate_id=booking.id,
            booking_id=booking.id,
            guest_name=booking.guest_name,
            guest_email=booking.guest_email,
            room_id=booking.room_id,
            stay=booking.stay,
            number_of_guests=booking.number_of_guests,
            total_amount=booking.total_amount,
        ))

        with DjangoUnitOfWork(self.bus) as uow:
            self.booking_repo.add(booking)
            uow.collect_events(booking)

        return CreateBookingResult(
            booking_id=booking.id,
            status=booking.status.value,
            message=BOOKING_CREATED_MESSAGE,
        )
