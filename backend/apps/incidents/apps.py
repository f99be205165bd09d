"""Incidents app configuration."""

from django.apps import AppConfig


class IncidentsConfig(AppConfig):
    """Configuration for incidents app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.incidents"
