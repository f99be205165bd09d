"""
Organization and membership management.
"""

from django.db import IntegrityError, transaction
from django.db.models import Count, QuerySet

from apps.core.auth import AuthContext
from apps.core.exceptions import Conflict, ValidationFailed
from apps.core.logging import get_logger
from apps.organizations.models import Member, Organization
from apps.organizations.schemas import OrganizationCreate

logger = get_logger(__name__)


def create_organization(data: OrganizationCreate, auth: AuthContext) -> Organization:
    """
    Create an organization and make the caller its ADMIN member.

    Raises:
        ValidationFailed: If name or slug is missing
        Conflict: If the slug is already taken
    """
    if not data.name or not data.slug:
        raise ValidationFailed("Name and slug are required")

    if Organization.objects.filter(slug=data.slug).exists():
        raise Conflict("Organization slug already exists")

    try:
        with transaction.atomic():
            organization = Organization.objects.create(name=data.name, slug=data.slug)
            Member.objects.create(
                organization=organization,
                external_user_id=auth.user_id,
                email=auth.email,
                role=Member.Role.ADMIN,
            )
    except IntegrityError as e:
        # Lost a race with a concurrent create of the same slug
        raise Conflict("Organization slug already exists") from e

    logger.info(
        "organization_created",
        organization_id=organization.id,
        slug=organization.slug,
        user_id=auth.user_id,
    )
    return organization


def with_counts(queryset: QuerySet[Organization]) -> QuerySet[Organization]:
    """Annotate organizations with service_count and incident_count."""
    return queryset.annotate(
        service_count=Count("services", distinct=True),
        incident_count=Count("incidents", distinct=True),
    )


def list_user_organizations(auth: AuthContext) -> list[Organization]:
    """
    Organizations the caller belongs to, newest first.

    Each carries the caller's role plus service and incident counts.
    """
    memberships = {
        member.organization_id: member.role
        for member in Member.objects.filter(external_user_id=auth.user_id)
    }
    organizations = list(
        with_counts(Organization.objects.filter(id__in=memberships)).order_by("-created_at")
    )
    for organization in organizations:
        organization.role = memberships[organization.id]
    return organizations


def get_organization_detail(organization: Organization) -> Organization:
    """Reload an organization with counts and its members prefetched."""
    return (
        with_counts(Organization.objects.filter(id=organization.id))
        .prefetch_related("members")
        .get()
    )
