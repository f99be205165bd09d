"""
Incidents models - reported disruptions and their update history.
"""

from django.db import models

from apps.core.models import TenantScopedModel, prefixed_id


def generate_incident_id() -> str:
    """Generate a prefixed incident ID."""
    return prefixed_id("inc")


def generate_incident_update_id() -> str:
    """Generate a prefixed incident update ID."""
    return prefixed_id("upd")


class Incident(TenantScopedModel):
    """
    A reported disruption affecting one service.

    organization always equals service.organization; the incident services
    layer derives it from the service on creation.
    Status values are not ordered: any status may follow any other.
    """

    class Status(models.TextChoices):
        INVESTIGATING = "INVESTIGATING", "Investigating"
        IDENTIFIED = "IDENTIFIED", "Identified"
        MONITORING = "MONITORING", "Monitoring"
        RESOLVED = "RESOLVED", "Resolved"

    class Impact(models.TextChoices):
        MINOR = "MINOR", "Minor"
        MAJOR = "MAJOR", "Major"
        CRITICAL = "CRITICAL", "Critical"

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_incident_id,
        editable=False,
    )
    title = models.CharField(max_length=255)
    status = models.CharField(
        max_length=32,
        choices=Status.choices,
        default=Status.INVESTIGATING,
        db_index=True,
    )
    impact = models.CharField(
        max_length=16,
        choices=Impact.choices,
        default=Impact.MINOR,
    )
    service = models.ForeignKey(
        "services.Service",
        on_delete=models.CASCADE,
        related_name="incidents",
    )
    resolved_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Set when the incident moves to RESOLVED",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.title} ({self.status})"

    @property
    def is_resolved(self) -> bool:
        return self.status == self.Status.RESOLVED


class ImmutableRecordError(Exception):
    """Raised when saving changes to an append-only record."""


class IncidentUpdate(models.Model):
    """
    An immutable timestamped note in an incident's history.

    status is a snapshot of the incident status the update announced.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_incident_update_id,
        editable=False,
    )
    incident = models.ForeignKey(
        Incident,
        on_delete=models.CASCADE,
        related_name="updates",
    )
    message = models.TextField()
    status = models.CharField(
        max_length=32,
        choices=Incident.Status.choices,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.incident_id} [{self.status}] {self.message[:40]}"

    def save(self, *args, **kwargs) -> None:
        if not self._state.adding:
            raise ImmutableRecordError("Incident updates are append-only")
        super().save(*args, **kwargs)
