"""Handlers subscribed to booking domain events."""

import logging

from apps.bookings.domain.events import BookingCreated

logger = logging.getLogger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info(
        f"Booking {event.booking_id} created for room {event.room_id}: "
        f"{len(event.stay)} night(s) {event.stay}, {event.number_of_guests} guest(s), "
        f"total {event.total_amount}"
    )
