"""
Services models - monitored components shown on the status page.
"""

from django.db import models

from apps.core.models import TenantScopedModel, prefixed_id


def generate_service_id() -> str:
    """Generate a prefixed service ID."""
    return prefixed_id("svc")


class Service(TenantScopedModel):
    """
    A monitored component with a displayed operational status.

    status is a convenience field: incident creation and resolution
    overwrite it from the latest incident action only. It is not
    recomputed from the full set of open incidents.
    """

    class Status(models.TextChoices):
        OPERATIONAL = "OPERATIONAL", "Operational"
        DEGRADED_PERFORMANCE = "DEGRADED_PERFORMANCE", "Degraded Performance"
        PARTIAL_OUTAGE = "PARTIAL_OUTAGE", "Partial Outage"
        MAJOR_OUTAGE = "MAJOR_OUTAGE", "Major Outage"
        UNDER_MAINTENANCE = "UNDER_MAINTENANCE", "Under Maintenance"

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_service_id,
        editable=False,
    )
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=32,
        choices=Status.choices,
        default=Status.OPERATIONAL,
        db_index=True,
    )
    order = models.IntegerField(
        default=0,
        help_text="Display position, ascending",
    )

    class Meta:
        ordering = ["order", "-created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.status})"
