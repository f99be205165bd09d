"""
Incident API endpoints.
"""

from ninja import Router

from apps.core.authorization import authorize_organization, require_organization_access
from apps.core.schemas import ErrorResponse
from apps.core.security import IdentityAuth, get_auth
from apps.core.types import StatusPageHttpRequest

from .schemas import (
    IncidentCreate,
    IncidentPatch,
    IncidentResponse,
    IncidentUpdateCreate,
    IncidentUpdateResponse,
)
from .services import (
    add_incident_update,
    create_incident,
    get_incident_or_404,
    list_incidents,
    update_incident,
)

router = Router(tags=["incidents"], auth=IdentityAuth())


@router.get(
    "/organizations/{org_id}/incidents",
    response={200: list[IncidentResponse], 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="listIncidents",
    summary="List incidents",
)
def list_incidents_endpoint(request: StatusPageHttpRequest, org_id: str, status: str | None = None):
    """
    List the organization's incidents, newest first.

    Optionally filtered by status. Updates are listed newest first.
    """
    organization = require_organization_access(request, org_id)
    return list_incidents(organization, status=status)


@router.post(
    "/organizations/{org_id}/incidents",
    response={201: IncidentResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="createIncident",
    summary="Open incident",
)
def create_incident_endpoint(request: StatusPageHttpRequest, org_id: str, payload: IncidentCreate):
    """
    Open an incident against one of the organization's services.

    The service status is set from the incident impact.
    """
    organization = require_organization_access(request, org_id)
    return 201, create_incident(organization, payload, request.notifier)


@router.get(
    "/incidents/{incident_id}",
    response={200: IncidentResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="getIncident",
    summary="Get incident",
)
def get_incident_endpoint(request: StatusPageHttpRequest, incident_id: str):
    """Get an incident with its service and full update history, oldest first."""
    incident = get_incident_or_404(incident_id)
    authorize_organization(request, get_auth(request), incident.organization)
    return incident


@router.patch(
    "/incidents/{incident_id}",
    response={200: IncidentResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="updateIncident",
    summary="Update incident",
)
def update_incident_endpoint(request: StatusPageHttpRequest, incident_id: str, payload: IncidentPatch):
    """
    Change status, title or impact.

    Resolving stamps resolvedAt and returns the service to OPERATIONAL.
    """
    incident = get_incident_or_404(incident_id)
    authorize_organization(request, get_auth(request), incident.organization)
    return update_incident(incident, payload, request.notifier)


@router.post(
    "/incidents/{incident_id}/updates",
    response={201: IncidentUpdateResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="addIncidentUpdate",
    summary="Post incident update",
)
def add_incident_update_endpoint(
    request: StatusPageHttpRequest, incident_id: str, payload: IncidentUpdateCreate
):
    incident = get_incident_or_404(incident_id)
    authorize_organization(request, get_auth(request), incident.organization)
    return 201, add_incident_update(incident, payload, request.notifier)
