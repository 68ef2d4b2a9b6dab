"""
Unit of Work Pattern

Manages database transactions and ensures that domain events
are published only after successful transaction commit.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction  # type: ignore

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass

    @abstractmethod
    def collect_events(self, aggregate):
        """Collect events from aggregate root"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork(bus) as uow:
            booking = Booking(...)
            booking.add_event(BookingCreated(...))
            repository.add(booking)
            uow.collect_events(booking)
        # Events are published on the bus after commit
    """

    def __init__(self, bus):
        self.bus = bus
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing for after the database commit

        transaction.on_commit() runs the callback only once the outermost
        atomic block commits, and never if it rolls back.
        """
        logger.debug(f"Committing transaction with {len(self._events)} events")

        events = self._events.copy()
        self._events.clear()

        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        """Rollback changes and discard events"""
        logger.warning(f"Rolling back transaction, discarding {len(self._events)} events")
        self._events.clear()

    def collect_events(self, aggregate):
        """
        Collect events from aggregate root

        Extracts all domain events from the aggregate and
        clears them from the aggregate.
        """
        new_events = aggregate.events
        if new_events:
            self._events.extend(new_events)
            aggregate.clear_events()
            logger.debug(
                f"Collected {len(new_events)} events from "
                f"{aggregate.__class__.__name__} (ID: {aggregate.id})"
            )

    def _publish_events(self, events: List[DomainEvent]):
        logger.info(f"Publishing {len(events)} domain events after commit")

        try:
            self.bus.publish_events(events)
        except Exception as e:
            # The write is already committed; publishing failures are only reported
            logger.error(f"Error publishing events: {e}", exc_info=True)
