"""Admin configuration for organizations app."""

from django.contrib import admin

from apps.organizations.models import Member, Organization


class MemberInline(admin.TabularInline):
    model = Member
    extra = 0
    fields = ["external_user_id", "email", "role", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Admin for Organization model."""

    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "slug"]
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [MemberInline]


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    """Admin for Member model."""

    list_display = ["external_user_id", "email", "organization", "role", "created_at"]
    list_filter = ["role"]
    search_fields = ["external_user_id", "email", "organization__name"]
    raw_id_fields = ["organization"]
    readonly_fields = ["id", "created_at", "updated_at"]
