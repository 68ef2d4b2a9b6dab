"""Storage port for the Booking aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from apps.bookings.domain.entities import Booking


class BookingRepository(ABC):
    """
    Abstract repository for Booking aggregates

    Every listing is ordered by creation time, newest first. Paging is
    offset based: skip (page_number - 1) * page_size, take page_size.
    """

    @abstractmethod
    def add(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: UUID) -> Optional[Booking]:
        """Return the booking or None when it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get_paged(self, page_number: int, page_size: int) -> Tuple[List[Booking], int]:
        """Return one page of bookings and the total number of bookings."""
        raise NotImplementedError
