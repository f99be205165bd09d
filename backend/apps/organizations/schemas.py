"""
Pydantic schemas for organization API endpoints.
"""

from datetime import datetime

from apps.core.schemas import CamelSchema

# =============================================================================
# Request Schemas
# =============================================================================


class OrganizationCreate(CamelSchema):
    """
    Request to create an organization.

    name and slug are checked by the service layer so a missing pair
    produces a single error.
    """

    name: str | None = None
    slug: str | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class MemberResponse(CamelSchema):
    """An organization member."""

    id: str
    external_user_id: str
    email: str
    role: str
    organization_id: str
    created_at: datetime


class OrganizationResponse(CamelSchema):
    """An organization with its members."""

    id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    members: list[MemberResponse] = []

    @staticmethod
    def resolve_members(obj):
        return list(obj.members.all())


class OrganizationDetailResponse(OrganizationResponse):
    """An organization with members and record counts."""

    service_count: int = 0
    incident_count: int = 0


class OrganizationListItem(CamelSchema):
    """One of the caller's organizations, with their role in it."""

    id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    role: str
    service_count: int = 0
    incident_count: int = 0
