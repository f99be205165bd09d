"""
Pydantic schemas for service API endpoints.
"""

from datetime import datetime

from pydantic import Field

from apps.core.schemas import CamelSchema

# =============================================================================
# Request Schemas
# =============================================================================


class ServiceCreate(CamelSchema):
    """Request to create a service. A missing name is reported by the service layer."""

    name: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None)
    status: str | None = Field(default=None, description="Defaults to OPERATIONAL")
    order: int | None = Field(default=None, description="Display position, defaults to 0")


class ServiceUpdate(CamelSchema):
    """
    Request to replace a service (PUT).

    Omitted description is cleared; omitted status and order keep their
    current values.
    """

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    status: str | None = None
    order: int | None = None


class ServicePatch(CamelSchema):
    """Request to partially update a service (PATCH). Only sent fields are written."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = None
    order: int | None = None


class ServiceStatusUpdate(CamelSchema):
    """Request to change only the service status."""

    status: str | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class ServiceResponse(CamelSchema):
    """A service record."""

    id: str
    name: str
    description: str | None
    status: str
    order: int
    organization_id: str
    created_at: datetime
    updated_at: datetime


class ServiceListItem(ServiceResponse):
    """A service in the organization list, with its open incident count."""

    open_incident_count: int = 0
