"""
Validation rules for booking messages

Rules report on the attribute names of the message; the API layer renders
them as camelCase keys.
"""

from django.core.validators import (  # type: ignore
    EmailValidator,
    MaxLengthValidator,
    MaxValueValidator,
    MinValueValidator,
    RegexValidator,
)
from django.utils import timezone  # type: ignore

from shared.application.validation import Rule, RuleValidator, is_blank, passes

GUEST_NAME_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500
MIN_GUESTS = 1
MAX_GUESTS = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

PHONE_PATTERN = r"^\+?[\d\s\-\(\)]+\Z"

_email = EmailValidator()
_phone = RegexValidator(PHONE_PATTERN)


def _filled_and(validator):
    """Format checks only apply once the value is present."""
    return lambda value: is_blank(value) or passes(validator, value)


create_booking_validator = RuleValidator([
    Rule("guest_name", lambda c: not is_blank(c.guest_name),
         "Guest name is required"),
    Rule("guest_name", lambda c: passes(MaxLengthValidator(GUEST_NAME_MAX_LENGTH), c.guest_name or ""),
         f"Guest name must not exceed {GUEST_NAME_MAX_LENGTH} characters"),

    Rule("guest_email", lambda c: not is_blank(c.guest_email),
         "Guest email is required"),
    Rule("guest_email", lambda c: _filled_and(_email)(c.guest_email),
         "Invalid email format"),

    Rule("guest_phone", lambda c: not is_blank(c.guest_phone),
         "Guest phone is required"),
    Rule("guest_phone", lambda c: _filled_and(_phone)(c.guest_phone),
         "Invalid phone number format"),

    Rule("room_id", lambda c: not is_blank(c.room_id),
         "Room ID is required"),

    Rule("check_in_date", lambda c: c.check_in_date >= timezone.localdate(),
         "Check-in date must be today or in the future"),
    Rule("check_out_date", lambda c: c.check_out_date > c.check_in_date,
         "Check-out date must be after check-in date"),

    Rule("number_of_guests", lambda c: passes(MinValueValidator(MIN_GUESTS), c.number_of_guests),
         f"Number of guests must be at least {MIN_GUESTS}"),
    Rule("number_of_guests", lambda c: passes(MaxValueValidator(MAX_GUESTS), c.number_of_guests),
         f"Number of guests cannot exceed {MAX_GUESTS}"),

    Rule("total_amount", lambda c: c.total_amount > 0,
         "Total amount must be greater than 0"),

    Rule("notes", lambda c: c.notes is None or passes(MaxLengthValidator(NOTES_MAX_LENGTH), c.notes),
         f"Notes must not exceed {NOTES_MAX_LENGTH} characters"),
])


paged_bookings_validator = RuleValidator([
    Rule("page_number", lambda q: q.page_number >= 1,
         "Page number must be at least 1"),
    Rule("page_size", lambda q: q.page_size >= MIN_PAGE_SIZE,
         f"Page size must be at least {MIN_PAGE_SIZE}"),
    Rule("page_size", lambda q: q.page_size <= MAX_PAGE_SIZE,
         f"Page size must not exceed {MAX_PAGE_SIZE}"),
])
