"""Admin configuration for incidents app."""

from django.contrib import admin

from apps.incidents.models import Incident, IncidentUpdate


class IncidentUpdateInline(admin.TabularInline):
    model = IncidentUpdate
    extra = 0
    fields = ["status", "message", "created_at"]
    readonly_fields = ["status", "message", "created_at"]
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Incident)
class IncidentAdmin(admin.ModelAdmin):
    """Admin for Incident model."""

    list_display = ["title", "service", "organization", "status", "impact", "created_at", "resolved_at"]
    list_filter = ["status", "impact"]
    search_fields = ["title", "service__name", "organization__name"]
    raw_id_fields = ["organization", "service"]
    readonly_fields = ["id", "created_at", "updated_at", "resolved_at"]
    ordering = ["-created_at"]
    inlines = [IncidentUpdateInline]


@admin.register(IncidentUpdate)
class IncidentUpdateAdmin(admin.ModelAdmin):
    """Admin for IncidentUpdate model. Updates are append-only."""

    list_display = ["incident", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["message", "incident__title"]
    readonly_fields = ["id", "incident", "message", "status", "created_at"]

    def has_change_permission(self, request, obj=None):
        return False
