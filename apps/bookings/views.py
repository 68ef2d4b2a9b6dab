"""API views for the booking domain."""

from __future__ import annotations

from uuid import UUID

from django.apps import apps  # type: ignore
from django.conf import settings  # type: ignore
from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.reverse import reverse  # type: ignore

from .application.query_handlers import GetAllBookingsQuery, GetBookingQuery, GetPagedBookingsQuery
from .serializers import (
    BookingListItemSerializer,
    BookingListParamsSerializer,
    BookingSerializer,
    CreateBookingResultSerializer,
    CreateBookingSerializer,
    ErrorSerializer,
    PagedBookingsSerializer,
    ValidationErrorSerializer,
)

UUID_PATTERN = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


class BookingViewSet(viewsets.ViewSet):
    """Создание, просмотр и список бронирований.

    Each action turns the request into a message and sends it through the
    bookings message bus; the view only chooses the status code.
    """

    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []
    lookup_value_regex = UUID_PATTERN

    @property
    def bus(self):
        return apps.get_app_config("bookings").bus

    @extend_schema(
        request=CreateBookingSerializer,
        responses={201: CreateBookingResultSerializer, 400: ValidationErrorSerializer},
        summary="Create a new hotel booking",
    )
    def create(self, request):  # type: ignore
        serializer = CreateBookingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.bus.send(serializer.to_command())
        headers = {"Location": reverse("booking-detail", args=[result.booking_id])}
        return Response(
            CreateBookingResultSerializer(result).data,
            status=status.HTTP_201_CREATED,
            headers=headers,
        )

    @extend_schema(
        responses={200: BookingSerializer, 404: ErrorSerializer},
        summary="Get a booking by ID",
    )
    def retrieve(self, request, pk=None):  # type: ignore
        booking_id = UUID(pk)
        booking = self.bus.send(GetBookingQuery(booking_id))
        if booking is None:
            return Response(
                {"message": f"Booking with ID {booking_id} not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        parameters=[
            OpenApiParameter("pageNumber", int, required=False),
            OpenApiParameter("pageSize", int, required=False),
        ],
        responses={200: PagedBookingsSerializer, 400: ValidationErrorSerializer},
        summary="List bookings, newest first",
        description="Without pageNumber and pageSize the response is a plain list of every booking.",
    )
    def list(self, request):  # type: ignore
        params = BookingListParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        paging = params.validated_data

        if not paging:
            bookings = self.bus.send(GetAllBookingsQuery())
            return Response(BookingListItemSerializer(bookings, many=True).data)

        page = self.bus.send(GetPagedBookingsQuery(
            page_number=paging.get("page_number", 1),
            page_size=paging.get("page_size", settings.BOOKINGS_DEFAULT_PAGE_SIZE),
        ))
        return Response(PagedBookingsSerializer(page).data)
