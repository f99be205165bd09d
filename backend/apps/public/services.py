"""
Public status aggregation.

Read-only views of an organization's status page, addressed by slug and
served without authentication.
"""

from collections.abc import Iterable
from typing import Any

from django.db.models import F, QuerySet
from django.utils import timezone

from apps.core.exceptions import NotFound, ValidationFailed
from apps.incidents.models import Incident
from apps.incidents.services import updates_prefetch
from apps.organizations.models import Organization
from apps.services.models import Service

ALL_OPERATIONAL = "All Systems Operational"
MAJOR_OUTAGE = "Major Outage"
DEGRADED_PERFORMANCE = "Degraded Performance"
UNDER_MAINTENANCE = "Under Maintenance"

ACTIVE_INCIDENT_UPDATE_LIMIT = 5
HISTORY_DEFAULT_LIMIT = 10
HISTORY_MAX_LIMIT = 100


def compute_overall_status(statuses: Iterable[str]) -> str:
    """
    Summarize service statuses into the page headline.

    The most severe condition wins; no services reads as operational.
    """
    statuses = set(statuses)
    if Service.Status.MAJOR_OUTAGE in statuses:
        return MAJOR_OUTAGE
    if statuses & {Service.Status.PARTIAL_OUTAGE, Service.Status.DEGRADED_PERFORMANCE}:
        return DEGRADED_PERFORMANCE
    if Service.Status.UNDER_MAINTENANCE in statuses:
        return UNDER_MAINTENANCE
    return ALL_OPERATIONAL


def get_organization_by_slug(slug: str) -> Organization:
    organization = Organization.objects.filter(slug=slug).first()
    if organization is None:
        raise NotFound("Status page not found")
    return organization


def get_public_status(slug: str) -> dict[str, Any]:
    """
    Build the status page for an organization.

    Returns the organization summary, overall status, services in display
    order, and unresolved incidents newest first with up to five of their
    most recent updates.

    Raises:
        NotFound: If no organization has this slug
    """
    organization = get_organization_by_slug(slug)

    services = list(Service.objects.filter(organization=organization).order_by("order", "-created_at"))
    active_incidents = list(
        Incident.objects.filter(organization=organization)
        .exclude(status=Incident.Status.RESOLVED)
        .select_related("service")
        .prefetch_related(updates_prefetch(newest_first=True, limit=ACTIVE_INCIDENT_UPDATE_LIMIT))
        .order_by("-created_at")
    )

    return {
        "organization": organization,
        "overall_status": compute_overall_status(service.status for service in services),
        "services": services,
        "active_incidents": active_incidents,
        "last_updated": timezone.now(),
    }


def get_incident_history(slug: str, limit: int = HISTORY_DEFAULT_LIMIT) -> QuerySet[Incident]:
    """
    Resolved incidents, most recently resolved first.

    Incidents resolved through an appended update carry no resolved_at and
    are listed after the stamped ones, newest change first.

    Raises:
        NotFound: If no organization has this slug
        ValidationFailed: If limit is outside 1..100
    """
    if not 1 <= limit <= HISTORY_MAX_LIMIT:
        raise ValidationFailed(
            "Invalid limit", message=f"limit must be between 1 and {HISTORY_MAX_LIMIT}"
        )
    organization = get_organization_by_slug(slug)

    return (
        Incident.objects.filter(organization=organization, status=Incident.Status.RESOLVED)
        .select_related("service")
        .prefetch_related(updates_prefetch(newest_first=True))
        .order_by(F("resolved_at").desc(nulls_last=True), "-updated_at")[:limit]
    )
