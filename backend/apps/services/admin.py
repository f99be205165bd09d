"""Admin configuration for services app."""

from django.contrib import admin

from apps.services.models import Service


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    """Admin for Service model."""

    list_display = ["name", "organization", "status", "order", "updated_at"]
    list_filter = ["status"]
    search_fields = ["name", "organization__name", "organization__slug"]
    raw_id_fields = ["organization"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["organization", "order"]
