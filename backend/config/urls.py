"""
URL configuration for the backend.

Socket.IO is served next to these routes by the WSGI entry point
(config/wsgi.py), not through Django URL routing.
"""

from django.contrib import admin
from django.urls import path, re_path

from apps.core.views import health_check, not_found
from apps.public.views import status_page

from .api import api

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", api.urls),
    # Unknown API paths answer with the JSON error body, also in DEBUG
    re_path(r"^api/", not_found),
    path("health", health_check, name="health"),
    path("status/<slug:slug>/", status_page, name="status-page"),
]

handler404 = "apps.core.views.not_found"
