"""Wires booking handlers to a message bus."""

from __future__ import annotations

import logging

from shared.application.message_bus import MessageBus

from .application.command_handlers import CreateBookingCommand, CreateBookingHandler
from .application.event_handlers import log_booking_created
from .application.query_handlers import (
    GetAllBookingsHandler,
    GetAllBookingsQuery,
    GetBookingHandler,
    GetBookingQuery,
    GetPagedBookingsHandler,
    GetPagedBookingsQuery,
)
from .application.repositories import BookingRepository
from .application.validators import create_booking_validator, paged_bookings_validator
from .domain.events import BookingCreated

logger = logging.getLogger(__name__)


def bootstrap(booking_repo: BookingRepository | None = None) -> MessageBus:
    """Build a message bus whose handlers share one repository.

    The document store repository is used unless another one is passed in.
    """
    if booking_repo is None:
        from .infrastructure.repositories import DocumentBookingRepository

        booking_repo = DocumentBookingRepository()

    bus = MessageBus()
    bus.register_handler(
        CreateBookingCommand,
        CreateBookingHandler(booking_repo, bus).handle,
        validator=create_booking_validator,
    )
    bus.register_handler(GetBookingQuery, GetBookingHandler(booking_repo).handle)
    bus.register_handler(GetAllBookingsQuery, GetAllBookingsHandler(booking_repo).handle)
    bus.register_handler(
        GetPagedBookingsQuery,
        GetPagedBookingsHandler(booking_repo).handle,
        validator=paged_bookings_validator,
    )
    bus.register_event_handler(BookingCreated, log_booking_created)

    logger.debug(f"Booking message bus ready ({booking_repo.__class__.__name__})")
    return bus
