"""
Pydantic schemas for the public status API.
"""

from datetime import datetime

from apps.core.schemas import CamelSchema
from apps.incidents.schemas import IncidentResponse
from apps.services.schemas import ServiceResponse


class PublicOrganization(CamelSchema):
    """Organization summary shown on the status page."""

    id: str
    name: str
    slug: str


class PublicStatusResponse(CamelSchema):
    """Everything the public status page renders."""

    organization: PublicOrganization
    overall_status: str
    services: list[ServiceResponse]
    active_incidents: list[IncidentResponse]
    last_updated: datetime
