"""Public status app configuration."""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    """Configuration for public status app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.public"
