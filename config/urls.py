"""URL configuration for the hotel booking API.

The `urlpatterns` list routes URLs to views: the Django admin, the booking
API router and the OpenAPI schema generated by drf-spectacular.
"""
from django.contrib import admin  # type: ignore
from django.urls import include, path  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.bookings.urls')),
    # drf-spectacular URLs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
