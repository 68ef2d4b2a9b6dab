"""Document storage for bookings."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BookingDocument(models.Model):
    """A booking stored whole as a JSON document keyed by its identifier.

    ``created_at`` is mirrored out of the document so listings can be
    ordered and paged by the database.
    """

    id = models.UUIDField(primary_key=True, editable=False)
    data = models.JSONField()
    created_at = models.DateTimeField(db_index=True)

    class Meta:
        db_table = "hotel_booking_bookings"
        verbose_name = _("Booking document")
        verbose_name_plural = _("Booking documents")
        ordering = ["-created_at", "id"]

    def __str__(self) -> str:
        return f"Booking {self.id}"
