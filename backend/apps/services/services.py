"""
Service record management.

CRUD for monitored services. Every mutation broadcasts the new record to
the organization's real-time subscribers through the notifier passed in by
the caller.
"""

from typing import Any

from django.db.models import Count, Q, QuerySet

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.logging import get_logger
from apps.incidents.models import Incident
from apps.incidents.services import updates_prefetch
from apps.organizations.models import Organization
from apps.realtime.events import RealtimeEvent
from apps.realtime.notifiers import Notifier
from apps.services.models import Service
from apps.services.schemas import ServiceCreate, ServicePatch, ServiceResponse, ServiceUpdate

logger = get_logger(__name__)

VALID_STATUSES: list[str] = list(Service.Status.values)


def validate_service_status(status: Any) -> str:
    """
    Return status if it is one of the five service statuses.

    Raises:
        ValidationFailed: listing validStatuses otherwise
    """
    if status not in VALID_STATUSES:
        raise ValidationFailed("Invalid status", validStatuses=VALID_STATUSES)
    return status


def serialize_service(service: Service) -> dict[str, Any]:
    """JSON-ready representation used in real-time payloads."""
    return ServiceResponse.from_orm(service).model_dump(mode="json", by_alias=True)


def get_service_or_404(service_id: str) -> Service:
    """Fetch a service with its organization, or raise NotFound."""
    service = Service.objects.select_related("organization").filter(id=service_id).first()
    if service is None:
        raise NotFound("Service not found")
    return service


def list_services(organization: Organization) -> QuerySet[Service]:
    """
    List an organization's services.

    Ordered by display order ascending, newest first on ties. Each service
    carries open_incident_count (unresolved incidents).
    """
    return (
        Service.objects.filter(organization=organization)
        .annotate(
            open_incident_count=Count(
                "incidents",
                filter=~Q(incidents__status=Incident.Status.RESOLVED),
            )
        )
        .order_by("order", "-created_at")
    )


def get_service_detail(service_id: str) -> Service:
    """
    Fetch a service with its unresolved incidents attached as open_incidents.

    Incidents are newest first; each carries only its most recent update.
    """
    service = get_service_or_404(service_id)
    service.open_incidents = list(
        service.incidents.exclude(status=Incident.Status.RESOLVED)
        .select_related("service")
        .prefetch_related(updates_prefetch(newest_first=True, limit=1))
        .order_by("-created_at")
    )
    return service


def create_service(organization: Organization, data: ServiceCreate, notifier: Notifier) -> Service:
    """
    Create a service in the organization.

    Status defaults to OPERATIONAL and order to 0.

    Raises:
        ValidationFailed: If name is missing or status is not a valid service status
    """
    if not data.name:
        raise ValidationFailed("Service name is required")
    status = data.status or Service.Status.OPERATIONAL
    validate_service_status(status)

    service = Service.objects.create(
        organization=organization,
        name=data.name,
        description=data.description,
        status=status,
        order=data.order if data.order is not None else 0,
    )

    logger.info(
        "service_created",
        service_id=service.id,
        organization_id=organization.id,
        status=service.status,
    )
    notifier.broadcast(
        organization.id,
        RealtimeEvent.SERVICE_CREATED,
        {"service": serialize_service(service)},
    )
    return service


def update_service(service: Service, data: ServiceUpdate, notifier: Notifier) -> Service:
    """
    Replace a service's editable fields (PUT semantics).

    description is cleared when omitted; status and order keep their
    current values when omitted.

    Raises:
        ValidationFailed: If name is missing or status is not a valid service status
    """
    if not data.name:
        raise ValidationFailed("Service name is required")
    if data.status:
        validate_service_status(data.status)

    service.name = data.name
    service.description = data.description or None
    service.status = data.status or service.status
    if data.order is not None:
        service.order = data.order
    service.save()

    logger.info("service_updated", service_id=service.id, organization_id=service.organization_id)
    notifier.broadcast(
        service.organization_id,
        RealtimeEvent.SERVICE_UPDATED,
        {"service": serialize_service(service)},
    )
    return service


def patch_service(service: Service, data: ServicePatch, notifier: Notifier) -> Service:
    """
    Write only the fields present in the request (PATCH semantics).

    An explicit null description clears it; absent fields are untouched.

    Raises:
        ValidationFailed: If a sent field has an invalid value
    """
    changes = data.model_dump(exclude_unset=True)

    if "name" in changes and not changes["name"]:
        raise ValidationFailed("Service name is required")
    if "status" in changes:
        validate_service_status(changes["status"])
    if "order" in changes and changes["order"] is None:
        raise ValidationFailed("Order must be an integer")

    for field, value in changes.items():
        setattr(service, field, value)
    if changes:
        service.save(update_fields=[*changes, "updated_at"])

    logger.info(
        "service_patched",
        service_id=service.id,
        organization_id=service.organization_id,
        fields=sorted(changes),
    )
    notifier.broadcast(
        service.organization_id,
        RealtimeEvent.SERVICE_UPDATED,
        {"service": serialize_service(service)},
    )
    return service


def update_service_status(service: Service, status: str | None, notifier: Notifier) -> Service:
    """
    Change only the service status.

    The broadcast carries the previous and new status alongside the record.

    Raises:
        ValidationFailed: If status is missing or invalid
    """
    if not status:
        raise ValidationFailed("Status is required")
    validate_service_status(status)

    previous_status = service.status
    service.status = status
    service.save(update_fields=["status", "updated_at"])

    logger.info(
        "service_status_changed",
        service_id=service.id,
        organization_id=service.organization_id,
        previous_status=previous_status,
        new_status=status,
    )
    notifier.broadcast(
        service.organization_id,
        RealtimeEvent.SERVICE_UPDATED,
        {
            "service": serialize_service(service),
            "statusChanged": True,
            "previousStatus": previous_status,
            "newStatus": status,
        },
    )
    return service


def delete_service(service: Service, notifier: Notifier) -> None:
    """
    Delete a service.

    Its incidents (and their updates) are removed by the database cascade.
    """
    service_id = service.id
    service_name = service.name
    organization_id = service.organization_id

    service.delete()

    logger.info("service_deleted", service_id=service_id, organization_id=organization_id)
    notifier.broadcast(
        organization_id,
        RealtimeEvent.SERVICE_DELETED,
        {"serviceId": service_id, "serviceName": service_name},
    )
