"""
Core models - shared base classes and utilities.
"""

import uuid

from django.db import models


def prefixed_id(prefix: str) -> str:
    """
    Generate a prefixed opaque ID, e.g. 'svc_3f2a9c...' (prefix + 24 hex chars).

    Models wrap this in a module-level default function so migrations can
    reference it:

        def generate_service_id() -> str:
            return prefixed_id("svc")
    """
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


class TimestampedModel(models.Model):
    """
    Abstract base model with created_at/updated_at timestamps.

    All business entities should inherit from this or TenantScopedModel.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class TenantScopedModel(TimestampedModel):
    """
    Abstract base model for all organization-scoped entities.

    Provides:
    - Organization FK (reverse accessor is the plural class name,
      e.g. organization.services, organization.incidents)
    - Timestamps from TimestampedModel

    Usage:
        class Service(TenantScopedModel):
            name = models.CharField(max_length=255)
    """

    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        related_name="%(class)ss",
    )

    class Meta:
        abstract = True
