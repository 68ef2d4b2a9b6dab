from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.bookings.application.command_handlers import CreateBookingCommand
from apps.bookings.bootstrap import bootstrap
from apps.bookings.domain.entities import Booking
from apps.bookings.infrastructure.repositories import InMemoryBookingRepository


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def make_command(today):
    def _make(**overrides) -> CreateBookingCommand:
        fields = dict(
            guest_name="Daniyar Akhmetov",
            guest_email="daniyar@example.com",
            guest_phone="+77015550000",
            room_id="room-101",
            check_in_date=today + timedelta(days=2),
            check_out_date=today + timedelta(days=4),
            number_of_guests=2,
            total_amount=Decimal("320.00"),
            notes=None,
        )
        fields.update(overrides)
        return CreateBookingCommand(**fields)

    return _make


@pytest.fixture
def make_booking(today):
    """Bookings with strictly increasing created_at, one minute apart."""
    start = datetime(2026, 1, 1, 12, 0, tzinfo=dt_timezone.utc)
    counter = iter(range(10_000))

    def _make(**overrides) -> Booking:
        index = next(counter)
        fields = dict(
            guest_name=f"Guest {index}",
            guest_email=f"guest{index}@example.com",
            guest_phone="+77010000000",
            room_id=f"room-{index}",
            check_in_date=today + timedelta(days=1),
            check_out_date=today + timedelta(days=2),
            number_of_guests=1,
            total_amount=Decimal("100.00"),
            created_at=start + timedelta(minutes=index),
        )
        fields.update(overrides)
        return Booking(**fields)

    return _make


@pytest.fixture
def memory_repo():
    return InMemoryBookingRepository()


@pytest.fixture
def bus(memory_repo):
    return bootstrap(memory_repo)
