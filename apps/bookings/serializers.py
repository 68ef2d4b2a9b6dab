"""Serializers for the booking API.

Field names are the camelCase wire names; ``source`` maps them onto the
snake_case attributes of commands, queries and read models.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.command_handlers import CreateBookingCommand


class CreateBookingSerializer(serializers.Serializer):
    """Parses a create request into a command.

    Only types are checked here. Business rules (lengths, formats, date
    ordering, ranges) belong to ``create_booking_validator``. Strings are
    kept as sent and amounts keep their precision.
    """

    guestName = serializers.CharField(source="guest_name", allow_blank=True, trim_whitespace=False)
    guestEmail = serializers.CharField(source="guest_email", allow_blank=True, trim_whitespace=False)
    guestPhone = serializers.CharField(source="guest_phone", allow_blank=True, trim_whitespace=False)
    roomId = serializers.CharField(source="room_id", allow_blank=True, trim_whitespace=False)
    checkInDate = serializers.DateField(source="check_in_date")
    checkOutDate = serializers.DateField(source="check_out_date")
    numberOfGuests = serializers.IntegerField(source="number_of_guests")
    totalAmount = serializers.DecimalField(source="total_amount", max_digits=None, decimal_places=None)
    notes = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None, trim_whitespace=False
    )

    def to_command(self) -> CreateBookingCommand:
        return CreateBookingCommand(**self.validated_data)


class CreateBookingResultSerializer(serializers.Serializer):
    bookingId = serializers.UUIDField(source="booking_id")
    status = serializers.CharField()
    message = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Full booking projection."""

    id = serializers.UUIDField()
    guestName = serializers.CharField(source="guest_name")
    guestEmail = serializers.CharField(source="guest_email")
    guestPhone = serializers.CharField(source="guest_phone")
    roomId = serializers.CharField(source="room_id")
    checkInDate = serializers.DateField(source="check_in_date")
    checkOutDate = serializers.DateField(source="check_out_date")
    numberOfGuests = serializers.IntegerField(source="number_of_guests")
    totalAmount = serializers.DecimalField(source="total_amount", max_digits=None, decimal_places=None)
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)
    notes = serializers.CharField(allow_null=True)


class BookingListItemSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    guestName = serializers.CharField(source="guest_name")
    guestEmail = serializers.CharField(source="guest_email")
    roomId = serializers.CharField(source="room_id")
    checkInDate = serializers.DateField(source="check_in_date")
    checkOutDate = serializers.DateField(source="check_out_date")
    status = serializers.CharField()
    totalAmount = serializers.DecimalField(source="total_amount", max_digits=None, decimal_places=None)


class PagedBookingsSerializer(serializers.Serializer):
    items = BookingListItemSerializer(many=True)
    totalCount = serializers.IntegerField(source="total_count")
    pageNumber = serializers.IntegerField(source="page_number")
    pageSize = serializers.IntegerField(source="page_size")
    totalPages = serializers.IntegerField(source="total_pages")


class BookingListParamsSerializer(serializers.Serializer):
    """Query string of the list endpoint; both parameters are optional."""

    pageNumber = serializers.IntegerField(source="page_number", required=False)
    pageSize = serializers.IntegerField(source="page_size", required=False)


class ErrorSerializer(serializers.Serializer):
    message = serializers.CharField()


class ValidationErrorSerializer(ErrorSerializer):
    errors = serializers.DictField(child=serializers.ListField(child=serializers.CharField()))
