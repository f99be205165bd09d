"""
Pydantic schemas for incident API endpoints.
"""

from datetime import datetime

from pydantic import Field

from apps.core.schemas import CamelSchema
from apps.services.schemas import ServiceResponse

# =============================================================================
# Request Schemas
# =============================================================================


class IncidentCreate(CamelSchema):
    """
    Request to open an incident.

    title and serviceId are required; they are checked by the service layer
    so the error names both fields.
    """

    title: str | None = None
    service_id: str | None = None
    impact: str | None = Field(default=None, description="Defaults to MINOR")
    status: str | None = Field(default=None, description="Defaults to INVESTIGATING")
    message: str | None = Field(default=None, description="Optional initial update")


class IncidentPatch(CamelSchema):
    """Request to change an incident's status, title or impact."""

    status: str | None = None
    title: str | None = None
    impact: str | None = None


class IncidentUpdateCreate(CamelSchema):
    """Request to append an update to an incident."""

    message: str | None = None
    status: str | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class IncidentUpdateResponse(CamelSchema):
    """One entry of an incident's history."""

    id: str
    message: str
    status: str
    incident_id: str
    created_at: datetime


class IncidentResponse(CamelSchema):
    """
    An incident with its service and updates.

    Callers control which updates are rendered (and their order) by
    prefetching them into `update_list`; otherwise all updates are
    returned oldest first.
    """

    id: str
    title: str
    status: str
    impact: str
    service_id: str
    organization_id: str
    created_at: datetime
    updated_at: datetime
    resolved_at: datetime | None = None
    service: ServiceResponse | None = None
    updates: list[IncidentUpdateResponse] = []

    @staticmethod
    def resolve_updates(obj):
        if hasattr(obj, "update_list"):
            return obj.update_list
        return list(obj.updates.all())


class ServiceWithIncidentsResponse(ServiceResponse):
    """A service with its unresolved incidents, each with its latest update."""

    open_incidents: list[IncidentResponse] = []
