"""Admin registration for booking documents."""

from __future__ import annotations

from django.contrib import admin

from .models import BookingDocument


@admin.register(BookingDocument)
class BookingDocumentAdmin(admin.ModelAdmin):
    """Read-only view of stored documents; bookings are only created through the API."""

    list_display = ("id", "guest_name", "room_id", "status", "created_at")
    search_fields = ("id",)
    readonly_fields = ("id", "data", "created_at")
    date_hierarchy = "created_at"

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False

    @admin.display(description="Guest")
    def guest_name(self, obj: BookingDocument) -> str:
        return obj.data.get("guest_name", "")

    @admin.display(description="Room")
    def room_id(self, obj: BookingDocument) -> str:
        return obj.data.get("room_id", "")

    @admin.display(description="Status")
    def status(self, obj: BookingDocument) -> str:
        return obj.data.get("status", "")
