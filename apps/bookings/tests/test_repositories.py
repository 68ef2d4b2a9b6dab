from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.bookings.domain.entities import BookingStatus
from apps.bookings.infrastructure.repositories import (
    DocumentBookingRepository,
    InMemoryBookingRepository,
    from_document,
    to_document,
)
from apps.bookings.models import BookingDocument


@pytest.fixture(params=["document", "memory"])
def repo(request, db):
    if request.param == "document":
        return DocumentBookingRepository()
    return InMemoryBookingRepository()


def test_add_then_get(repo, make_booking):
    booking = make_booking(notes="Crib needed", total_amount=Decimal("199.99"))

    repo.add(booking)
    loaded = repo.get(booking.id)

    assert loaded is not booking
    assert to_document(loaded) == to_document(booking)
    assert loaded.status is BookingStatus.PENDING


def test_get_missing_returns_none(repo):
    assert repo.get(uuid4()) is None


def test_get_all_orders_by_created_at_descending(repo, make_booking):
    older = make_booking()
    newer = make_booking()
    oldest = make_booking(created_at=older.created_at - timedelta(days=1))
    for booking in (older, newer, oldest):
        repo.add(booking)

    assert [b.id for b in repo.get_all()] == [newer.id, older.id, oldest.id]


def test_get_paged_skips_and_takes(repo, make_booking):
    bookings = [make_booking() for _ in range(7)]
    for booking in bookings:
        repo.add(booking)
    newest_first = [b.id for b in reversed(bookings)]

    page, total = repo.get_paged(2, 3)
    last, _ = repo.get_paged(3, 3)
    beyond, _ = repo.get_paged(4, 3)

    assert total == 7
    assert [b.id for b in page] == newest_first[3:6]
    assert [b.id for b in last] == newest_first[6:]
    assert beyond == []


def test_same_created_at_is_ordered_by_id(repo, make_booking):
    first = make_booking()
    twins = [make_booking(created_at=first.created_at) for _ in range(4)]
    for booking in [first, *twins]:
        repo.add(booking)
    expected = sorted(b.id for b in [first, *twins])

    pages = [repo.get_paged(number, 2)[0] for number in (1, 2, 3)]

    assert [b.id for b in repo.get_all()] == expected
    assert [b.id for page in pages for b in page] == expected


def test_page_far_past_the_end_is_empty(repo, make_booking):
    repo.add(make_booking())

    page, total = repo.get_paged(10**18, 100)

    assert page == []
    assert total == 1


@pytest.mark.django_db
def test_document_layout(make_booking):
    booking = make_booking(status=BookingStatus.CONFIRMED)

    DocumentBookingRepository().add(booking)
    document = BookingDocument.objects.get(pk=booking.id)

    assert document.created_at == booking.created_at
    assert document.data["id"] == str(booking.id)
    assert document.data["status"] == "Confirmed"
    assert document.data["total_amount"] == "100.00"
    assert document.data["check_in_date"] == booking.check_in_date.isoformat()
    assert BookingDocument._meta.db_table == "hotel_booking_bookings"


def test_document_round_trip_keeps_timestamps(make_booking):
    booking = make_booking()
    booking.updated_at = booking.created_at + timedelta(hours=1)

    restored = from_document(to_document(booking))

    assert restored.created_at == booking.created_at
    assert restored.updated_at == booking.updated_at
    assert restored == booking
