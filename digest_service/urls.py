"""Root URL configuration for the notification digest service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/digest/", include("core.urls")),
]
