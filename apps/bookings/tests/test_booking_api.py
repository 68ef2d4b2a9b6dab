"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest import mock
from uuid import UUID, uuid4

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.infrastructure.repositories import DocumentBookingRepository
from apps.bookings.models import BookingDocument


class BookingAPITests(APITestCase):
    """Создание, просмотр и постраничный список бронирований через API."""

    def setUp(self) -> None:
        self.list_url = reverse("booking-list")
        self.today = timezone.localdate()

    def _payload(self, **overrides) -> dict:
        check_in = self.today + timedelta(days=1)
        payload = {
            "guestName": "Aigerim Sadykova",
            "guestEmail": "aigerim@example.com",
            "guestPhone": "+7 (701) 555-12-34",
            "roomId": "room-204",
            "checkInDate": str(check_in),
            "checkOutDate": str(check_in + timedelta(days=3)),
            "numberOfGuests": 2,
            "totalAmount": "450.00",
            "notes": "Late arrival, around 23:00",
        }
        payload.update(overrides)
        return payload

    def _create(self, **overrides):
        return self.client.post(self.list_url, self._payload(**overrides), format="json")

    def test_create_booking(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "Pending")
        self.assertEqual(response.data["message"], "Booking created successfully")
        booking_id = response.data["bookingId"]
        self.assertTrue(BookingDocument.objects.filter(pk=booking_id).exists())
        self.assertEqual(response["Location"], reverse("booking-detail", args=[booking_id]))

    def test_each_booking_gets_a_new_identifier(self) -> None:
        first = self._create()
        second = self._create()

        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)
        self.assertEqual(second.status_code, status.HTTP_201_CREATED, second.data)
        self.assertNotEqual(first.data["bookingId"], second.data["bookingId"])
        self.assertEqual(BookingDocument.objects.count(), 2)

    def test_created_booking_round_trips(self) -> None:
        payload = self._payload()
        create_response = self.client.post(self.list_url, payload, format="json")
        booking_id = create_response.data["bookingId"]

        response = self.client.get(reverse("booking-detail", args=[booking_id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        data = response.data
        self.assertEqual(data["id"], str(booking_id))
        self.assertEqual(data["status"], "Pending")
        self.assertIsNotNone(data["createdAt"])
        self.assertIsNone(data["updatedAt"])
        for field in ("guestName", "guestEmail", "guestPhone", "roomId", "checkInDate", "checkOutDate", "notes"):
            self.assertEqual(data[field], payload[field], field)
        self.assertEqual(data["numberOfGuests"], payload["numberOfGuests"])
        self.assertEqual(Decimal(data["totalAmount"]), Decimal(payload["totalAmount"]))

    def test_notes_are_optional(self) -> None:
        payload = self._payload()
        del payload["notes"]

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        detail = self.client.get(reverse("booking-detail", args=[response.data["bookingId"]]))
        self.assertIsNone(detail.data["notes"])

    def test_text_fields_are_stored_as_sent(self) -> None:
        padded = {
            "guestName": "Ann ",
            "guestPhone": "+7 701 555 12 34 ",
            "roomId": " room-7",
            "notes": "  note\n",
        }
        response = self._create(**padded)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        detail = self.client.get(reverse("booking-detail", args=[response.data["bookingId"]]))
        for field, value in padded.items():
            self.assertEqual(detail.data[field], value, field)

    def test_padding_counts_towards_the_name_limit(self) -> None:
        response = self._create(guestName="x" * 100 + "  ")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["errors"], {"guestName": ["Guest name must not exceed 100 characters"]})

    def test_whitespace_only_name_is_missing(self) -> None:
        response = self._create(guestName="   ")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["errors"], {"guestName": ["Guest name is required"]})

    def test_total_amount_keeps_its_precision(self) -> None:
        for amount in ("10.125", "12345678901.00", "0.001"):
            with self.subTest(amount=amount):
                response = self._create(totalAmount=amount)

                self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
                detail = self.client.get(reverse("booking-detail", args=[response.data["bookingId"]]))
                self.assertEqual(Decimal(detail.data["totalAmount"]), Decimal(amount))

    def test_check_in_today_is_allowed(self) -> None:
        response = self._create(
            checkInDate=str(self.today),
            checkOutDate=str(self.today + timedelta(days=1)),
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_single_invalid_field_is_reported(self) -> None:
        check_in = self.today + timedelta(days=1)
        cases = {
            "guestName": {"guestName": ""},
            "guestEmail": {"guestEmail": "not-an-email"},
            "guestPhone": {"guestPhone": "call me maybe"},
            "roomId": {"roomId": ""},
            "checkInDate": {
                "checkInDate": str(self.today - timedelta(days=1)),
                "checkOutDate": str(self.today + timedelta(days=2)),
            },
            "checkOutDate": {"checkInDate": str(check_in), "checkOutDate": str(check_in)},
            "numberOfGuests": {"numberOfGuests": 11},
            "totalAmount": {"totalAmount": "0"},
            "notes": {"notes": "x" * 501},
        }
        for field, overrides in cases.items():
            with self.subTest(field=field):
                response = self._create(**overrides)

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
                self.assertEqual(response.data["message"], "Validation failed")
                self.assertEqual(list(response.data["errors"]), [field])
        self.assertEqual(BookingDocument.objects.count(), 0)

    def test_all_violations_are_reported_together(self) -> None:
        response = self._create(guestName="", guestEmail="", numberOfGuests=0, totalAmount="-5")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        errors = response.data["errors"]
        self.assertEqual(errors["guestName"], ["Guest name is required"])
        self.assertEqual(errors["guestEmail"], ["Guest email is required"])
        self.assertEqual(errors["numberOfGuests"], ["Number of guests must be at least 1"])
        self.assertEqual(errors["totalAmount"], ["Total amount must be greater than 0"])

    def test_malformed_values_use_the_same_error_shape(self) -> None:
        payload = self._payload(checkInDate="tomorrow", numberOfGuests="two")
        del payload["roomId"]

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Validation failed")
        self.assertEqual(set(response.data["errors"]), {"checkInDate", "numberOfGuests", "roomId"})

    def test_unknown_booking_returns_404(self) -> None:
        missing = uuid4()

        response = self.client.get(reverse("booking-detail", args=[missing]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": f"Booking with ID {missing} not found"})

    def test_malformed_identifier_does_not_reach_the_handler(self) -> None:
        response = self.client.get(f"{self.list_url}/not-a-uuid")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def _create_many(self, count: int) -> list[str]:
        ids = []
        for index in range(count):
            response = self._create(roomId=f"room-{index}")
            self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
            ids.append(response.data["bookingId"])
        return ids

    def test_paged_listing(self) -> None:
        created = self._create_many(7)
        newest_first = [str(UUID(i)) for i in reversed(created)]

        first = self.client.get(self.list_url, {"pageNumber": 1, "pageSize": 5})
        second = self.client.get(self.list_url, {"pageNumber": 2, "pageSize": 5})

        self.assertEqual(first.status_code, status.HTTP_200_OK, first.data)
        self.assertEqual(len(first.data["items"]), 5)
        self.assertEqual(first.data["totalCount"], 7)
        self.assertEqual(first.data["totalPages"], 2)
        self.assertEqual(first.data["pageNumber"], 1)
        self.assertEqual(first.data["pageSize"], 5)

        self.assertEqual(second.status_code, status.HTTP_200_OK, second.data)
        self.assertEqual(len(second.data["items"]), 2)
        self.assertEqual(
            [item["id"] for item in first.data["items"] + second.data["items"]],
            newest_first,
        )

    def test_paged_listing_items_are_summaries(self) -> None:
        self._create_many(1)

        response = self.client.get(self.list_url, {"pageNumber": 1})

        self.assertEqual(response.data["pageSize"], 5)
        self.assertEqual(
            set(response.data["items"][0]),
            {"id", "guestName", "guestEmail", "roomId", "checkInDate", "checkOutDate", "status", "totalAmount"},
        )

    def test_page_past_the_end_is_empty(self) -> None:
        self._create_many(2)

        response = self.client.get(self.list_url, {"pageNumber": 3, "pageSize": 5})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["items"], [])
        self.assertEqual(response.data["totalCount"], 2)
        self.assertEqual(response.data["totalPages"], 1)

    def test_huge_page_number_is_an_empty_page(self) -> None:
        self._create_many(1)

        response = self.client.get(self.list_url, {"pageNumber": 10**18, "pageSize": 100})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["items"], [])
        self.assertEqual(response.data["totalCount"], 1)
        self.assertEqual(response.data["pageNumber"], 10**18)

    def test_listing_without_paging_returns_every_booking(self) -> None:
        created = self._create_many(7)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIsInstance(response.data, list)
        self.assertEqual([item["id"] for item in response.data], [str(UUID(i)) for i in reversed(created)])

    def test_invalid_paging_is_rejected(self) -> None:
        cases = [
            ({"pageNumber": 0, "pageSize": 5}, "pageNumber", "Page number must be at least 1"),
            ({"pageNumber": 1, "pageSize": 0}, "pageSize", "Page size must be at least 1"),
            ({"pageNumber": 1, "pageSize": 101}, "pageSize", "Page size must not exceed 100"),
        ]
        for params, field, message in cases:
            with self.subTest(params=params):
                response = self.client.get(self.list_url, params)

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
                self.assertEqual(response.data["errors"], {field: [message]})

    def test_non_numeric_paging_is_rejected(self) -> None:
        response = self.client.get(self.list_url, {"pageSize": "many"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("pageSize", response.data["errors"])

    def test_unexpected_errors_do_not_leak_details(self) -> None:
        with mock.patch.object(DocumentBookingRepository, "get", side_effect=RuntimeError("connection refused: db-1:5432")):
            response = self.client.get(reverse("booking-detail", args=[uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"message": "An unexpected error occurred"})

    def test_booking_created_event_is_published_after_commit(self) -> None:
        with self.assertLogs("apps.bookings.application.event_handlers", level="INFO") as logs:
            with self.captureOnCommitCallbacks(execute=True):
                response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn(str(response.data["bookingId"]), logs.output[0])
        self.assertIn("3 night(s)", logs.output[0])

    def test_unsupported_method(self) -> None:
        response = self.client.delete(reverse("booking-detail", args=[uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertIn("message", response.data)
