"""
Organizations models - multi-tenancy foundation.
"""

from django.db import models

from apps.core.models import TimestampedModel, prefixed_id


def generate_organization_id() -> str:
    """Generate a prefixed organization ID."""
    return prefixed_id("org")


def generate_member_id() -> str:
    """Generate a prefixed member ID."""
    return prefixed_id("mbr")


class Organization(TimestampedModel):
    """
    Tenant boundary.

    Owns members, services and incidents; the slug addresses the public
    status page.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_organization_id,
        editable=False,
    )
    name = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="URL-safe identifier, e.g. 'acme-corp'",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class Member(TimestampedModel):
    """
    Org-scoped membership linking an external user to an Organization.

    Users live in the external identity provider; external_user_id is the
    provider's identifier. A user can belong to many organizations.
    """

    class Role(models.TextChoices):
        ADMIN = "ADMIN", "Admin"
        MEMBER = "MEMBER", "Member"

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_member_id,
        editable=False,
    )
    external_user_id = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Identity provider user ID, e.g. 'user_2abc...'",
    )
    email = models.EmailField(blank=True)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="members",
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.MEMBER,
    )

    class Meta:
        ordering = ["-created_at"]
        unique_together = ["external_user_id", "organization"]

    def __str__(self) -> str:
        return f"{self.email or self.external_user_id} @ {self.organization.name} ({self.role})"

    @property
    def is_admin(self) -> bool:
        """Check if member has admin role."""
        return self.role == self.Role.ADMIN
