"""
Booking repository implementations

- DocumentBookingRepository: JSON documents in the database (BookingDocument)
- InMemoryBookingRepository: dict-backed, for tests and local experiments
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
import logging

from apps.bookings.application.repositories import BookingRepository
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.models import BookingDocument

logger = logging.getLogger(__name__)

# Newest first; the identifier breaks ties so page boundaries stay put.
ORDERING = ("-created_at", "id")


def to_document(booking: Booking) -> Dict[str, Any]:
    """Render a booking as a JSON-compatible document."""
    return {
        "id": str(booking.id),
        "guest_name": booking.guest_name,
        "guest_email": booking.guest_email,
        "guest_phone": booking.guest_phone,
        "room_id": booking.room_id,
        "check_in_date": booking.check_in_date.isoformat(),
        "check_out_date": booking.check_out_date.isoformat(),
        "number_of_guests": booking.number_of_guests,
        "total_amount": str(booking.total_amount),
        "status": booking.status.value,
        "created_at": booking.created_at.isoformat(),
        "updated_at": booking.updated_at.isoformat() if booking.updated_at else None,
        "notes": booking.notes,
    }


def from_document(data: Dict[str, Any]) -> Booking:
    updated_at = data.get("updated_at")
    return Booking(
        id=UUID(data["id"]),
        guest_name=data["guest_name"],
        guest_email=data["guest_email"],
        guest_phone=data["guest_phone"],
        room_id=data["room_id"],
        check_in_date=date.fromisoformat(data["check_in_date"]),
        check_out_date=date.fromisoformat(data["check_out_date"]),
        number_of_guests=data["number_of_guests"],
        total_amount=Decimal(data["total_amount"]),
        status=BookingStatus(data["status"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        notes=data.get("notes"),
    )


class DocumentBookingRepository(BookingRepository):
    """Stores each booking as one BookingDocument row."""

    def add(self, booking: Booking) -> None:
        BookingDocument.objects.create(
            id=booking.id,
            data=to_document(booking),
            created_at=booking.created_at,
        )
        logger.debug(f"Stored booking document {booking.id}")

    def get(self, booking_id: UUID) -> Optional[Booking]:
        document = BookingDocument.objects.filter(pk=booking_id).first()
        if document is None:
            return None
        return from_document(document.data)

    def get_all(self) -> List[Booking]:
        return [from_document(d.data) for d in BookingDocument.objects.order_by(*ORDERING)]

    def get_paged(self, page_number: int, page_size: int) -> Tuple[List[Booking], int]:
        queryset = BookingDocument.objects.order_by(*ORDERING)
        total_count = queryset.count()
        offset = (page_number - 1) * page_size
        if offset >= total_count:
            return [], total_count
        page = queryset[offset:offset + page_size]
        return [from_document(d.data) for d in page], total_count


class InMemoryBookingRepository(BookingRepository):
    """Keeps bookings in a dict; documents are copied in and out."""

    def __init__(self) -> None:
        self._documents: Dict[UUID, Dict[str, Any]] = {}

    def add(self, booking: Booking) -> None:
        self._documents[booking.id] = to_document(booking)

    def get(self, booking_id: UUID) -> Optional[Booking]:
        data = self._documents.get(booking_id)
        return from_document(data) if data is not None else None

    def get_all(self) -> List[Booking]:
        bookings = sorted((from_document(d) for d in self._documents.values()), key=lambda b: b.id)
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    def get_paged(self, page_number: int, page_size: int) -> Tuple[List[Booking], int]:
        bookings = self.get_all()
        offset = (page_number - 1) * page_size
        return bookings[offset:offset + page_size], len(bookings)
