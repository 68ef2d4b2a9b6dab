"""
Booking Query Handlers

Queries:
- GetBookingQuery: One booking by identifier, or None
- GetAllBookingsQuery: Every booking, newest first
- GetPagedBookingsQuery: One page of bookings with paging metadata
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from math import ceil
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from apps.bookings.application.repositories import BookingRepository
from apps.bookings.domain.entities import Booking

T = TypeVar("T")


# ===== Queries =====

@dataclass(frozen=True)
class GetBookingQuery:
    booking_id: UUID


@dataclass(frozen=True)
class GetAllBookingsQuery:
    pass


@dataclass(frozen=True)
class GetPagedBookingsQuery:
    page_number: int
    page_size: int


# ===== Read models =====

@dataclass(frozen=True)
class BookingResponse:
    id: UUID
    guest_name: str
    guest_email: str
    guest_phone: str
    room_id: str
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    total_amount: Decimal
    status: str
    created_at: datetime
    updated_at: Optional[datetime]
    notes: Optional[str]

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            guest_name=booking.guest_name,
            guest_email=booking.guest_email,
            guest_phone=booking.guest_phone,
            room_id=booking.room_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            number_of_guests=booking.number_of_guests,
            total_amount=booking.total_amount,
            status=booking.status.value,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
            notes=booking.notes,
        )


@dataclass(frozen=True)
class BookingListItem:
    """Summary projection used by the listing endpoints."""
    id: UUID
    guest_name: str
    guest_email: str
    room_id: str
    check_in_date: date
    check_out_date: date
    status: str
    total_amount: Decimal

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingListItem":
        return cls(
            id=booking.id,
            guest_name=booking.guest_name,
            guest_email=booking.guest_email,
            room_id=booking.room_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            status=booking.status.value,
            total_amount=booking.total_amount,
        )


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    items: List[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_count / self.page_size)


# ===== Query Handlers =====

class GetBookingHandler:
    def __init__(self, booking_repo: BookingRepository):
        self.booking_repo = booking_repo

    def handle(self, query: GetBookingQuery) -> Optional[BookingResponse]:
        booking = self.booking_repo.get(query.booking_id)
        if booking is None:
            return None
        return BookingResponse.from_booking(booking)


class GetAllBookingsHandler:
    def __init__(self, booking_repo: BookingRepository):
        self.booking_repo = booking_repo

    def handle(self, query: GetAllBookingsQuery) -> List[BookingListItem]:
        return [BookingListItem.from_booking(b) for b in self.booking_repo.get_all()]


class GetPagedBookingsHandler:
    """Page bounds are checked by paged_bookings_validator before this runs."""

    def __init__(self, booking_repo: BookingRepository):
        self.booking_repo = booking_repo

    def handle(self, query: GetPagedBookingsQuery) -> PagedResult[BookingListItem]:
        bookings, total_count = self.booking_repo.get_paged(query.page_number, query.page_size)
        return PagedResult(
            items=[BookingListItem.from_booking(b) for b in bookings],
            total_count=total_count,
            page_number=query.page_number,
            page_size=query.page_size,
        )
