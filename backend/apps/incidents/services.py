"""
Incident lifecycle management.

Opening, updating and resolving incidents, and the side effect each of
those has on the owning service's displayed status.

Service status follows the most recent incident action only:
- opening an incident overwrites it from the incident impact
- resolving an incident resets it to OPERATIONAL

Neither step looks at other incidents still open on the same service, so
resolving one of two open incidents shows the service as OPERATIONAL.

The incident write and the service status write are separate statements
without a surrounding transaction. A failure between them leaves the
incident saved and the service status unchanged until the next incident
action or a manual status change.
"""

from typing import Any

from django.db.models import Prefetch, QuerySet
from django.utils import timezone

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.logging import get_logger
from apps.incidents.models import Incident, IncidentUpdate
from apps.incidents.schemas import (
    IncidentCreate,
    IncidentPatch,
    IncidentResponse,
    IncidentUpdateCreate,
    IncidentUpdateResponse,
)
from apps.organizations.models import Organization
from apps.realtime.events import RealtimeEvent
from apps.realtime.notifiers import Notifier
from apps.services.models import Service

logger = get_logger(__name__)

VALID_INCIDENT_STATUSES: list[str] = list(Incident.Status.values)
VALID_IMPACTS: list[str] = list(Incident.Impact.values)

SERVICE_STATUS_BY_IMPACT: dict[str, str] = {
    Incident.Impact.CRITICAL: Service.Status.MAJOR_OUTAGE,
    Incident.Impact.MAJOR: Service.Status.PARTIAL_OUTAGE,
}


def service_status_for_impact(impact: str) -> str:
    """Map incident impact to the service status shown while it is open."""
    return SERVICE_STATUS_BY_IMPACT.get(impact, Service.Status.DEGRADED_PERFORMANCE)


def validate_incident_status(status: Any) -> str:
    if status not in VALID_INCIDENT_STATUSES:
        raise ValidationFailed("Invalid status", validStatuses=VALID_INCIDENT_STATUSES)
    return status


def validate_impact(impact: Any) -> str:
    if impact not in VALID_IMPACTS:
        raise ValidationFailed("Invalid impact", validImpacts=VALID_IMPACTS)
    return impact


def updates_prefetch(newest_first: bool = False, limit: int | None = None) -> Prefetch:
    """
    Prefetch incident updates into `update_list`, which IncidentResponse renders.

    A limit is applied per incident.
    """
    ordering = "-created_at" if newest_first else "created_at"
    queryset = IncidentUpdate.objects.order_by(ordering)
    if limit is not None:
        queryset = queryset[:limit]
    return Prefetch("updates", queryset=queryset, to_attr="update_list")


def serialize_incident(incident: Incident) -> dict[str, Any]:
    """JSON-ready representation used in real-time payloads."""
    return IncidentResponse.from_orm(incident).model_dump(mode="json", by_alias=True)


def list_incidents(organization: Organization, status: str | None = None) -> QuerySet[Incident]:
    """
    List an organization's incidents, newest first, with updates newest first.

    Raises:
        ValidationFailed: If the status filter is not a valid incident status
    """
    queryset = Incident.objects.filter(organization=organization)
    if status:
        validate_incident_status(status)
        queryset = queryset.filter(status=status)
    return (
        queryset.select_related("service")
        .prefetch_related(updates_prefetch(newest_first=True))
        .order_by("-created_at")
    )


def get_incident_or_404(incident_id: str) -> Incident:
    """Fetch an incident with its service, organization and updates (oldest first)."""
    incident = (
        Incident.objects.select_related("service", "organization")
        .prefetch_related(updates_prefetch())
        .filter(id=incident_id)
        .first()
    )
    if incident is None:
        raise NotFound("Incident not found")
    return incident


def create_incident(organization: Organization, data: IncidentCreate, notifier: Notifier) -> Incident:
    """
    Open an incident against one of the organization's services.

    Creates the optional initial update, then overwrites the service status
    from the incident impact.

    Raises:
        ValidationFailed: If title/serviceId are missing or impact/status invalid
        NotFound: If the service does not belong to the organization
    """
    if not data.title or not data.service_id:
        raise ValidationFailed("Title and serviceId are required")

    impact = data.impact or Incident.Impact.MINOR
    status = data.status or Incident.Status.INVESTIGATING
    validate_impact(impact)
    validate_incident_status(status)

    service = Service.objects.filter(id=data.service_id, organization=organization).first()
    if service is None:
        raise NotFound("Service not found")

    incident = Incident.objects.create(
        organization=service.organization,
        service=service,
        title=data.title,
        status=status,
        impact=impact,
        resolved_at=timezone.now() if status == Incident.Status.RESOLVED else None,
    )
    initial_updates = []
    if data.message:
        initial_updates.append(
            IncidentUpdate.objects.create(incident=incident, message=data.message, status=status)
        )
    incident.update_list = initial_updates

    service.status = service_status_for_impact(impact)
    service.save(update_fields=["status", "updated_at"])

    logger.info(
        "incident_created",
        incident_id=incident.id,
        service_id=service.id,
        organization_id=organization.id,
        impact=impact,
        service_status=service.status,
    )
    notifier.broadcast(
        organization.id,
        RealtimeEvent.INCIDENT_CREATED,
        {"incident": serialize_incident(incident)},
    )
    return incident


def update_incident(incident: Incident, data: IncidentPatch, notifier: Notifier) -> Incident:
    """
    Change an incident's status, title or impact.

    Empty values are ignored. Moving to RESOLVED stamps resolved_at and
    resets the service to OPERATIONAL, then broadcasts incident:resolved;
    any other change broadcasts incident:updated.

    Raises:
        ValidationFailed: If status or impact is invalid
    """
    if data.status:
        incident.status = validate_incident_status(data.status)
    if data.title:
        incident.title = data.title
    if data.impact:
        incident.impact = validate_impact(data.impact)

    resolved = data.status == Incident.Status.RESOLVED
    if resolved:
        incident.resolved_at = timezone.now()
    incident.save()

    if resolved:
        service = incident.service
        service.status = Service.Status.OPERATIONAL
        service.save(update_fields=["status", "updated_at"])
        logger.info(
            "incident_resolved",
            incident_id=incident.id,
            service_id=service.id,
            organization_id=incident.organization_id,
        )
        event = RealtimeEvent.INCIDENT_RESOLVED
    else:
        logger.info(
            "incident_updated",
            incident_id=incident.id,
            organization_id=incident.organization_id,
            status=incident.status,
        )
        event = RealtimeEvent.INCIDENT_UPDATED

    notifier.broadcast(incident.organization_id, event, {"incident": serialize_incident(incident)})
    return incident


def add_incident_update(
    incident: Incident, data: IncidentUpdateCreate, notifier: Notifier
) -> IncidentUpdate:
    """
    Append an update to the incident's history.

    The incident status is overwritten with the update's status. Service
    status and resolved_at are left alone.

    Raises:
        ValidationFailed: If message or status is missing, or status is invalid
    """
    if not data.message or not data.status:
        raise ValidationFailed("Message and status are required")
    validate_incident_status(data.status)

    update = IncidentUpdate.objects.create(
        incident=incident,
        message=data.message,
        status=data.status,
    )
    incident.status = data.status
    incident.save(update_fields=["status", "updated_at"])

    logger.info(
        "incident_update_added",
        incident_id=incident.id,
        update_id=update.id,
        organization_id=incident.organization_id,
        status=data.status,
    )
    notifier.broadcast(
        incident.organization_id,
        RealtimeEvent.INCIDENT_UPDATED,
        {
            "incidentId": incident.id,
            "update": IncidentUpdateResponse.from_orm(update).model_dump(mode="json", by_alias=True),
        },
    )
    return update
