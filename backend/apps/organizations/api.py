"""
Organization API endpoints.
"""

from ninja import Router

from apps.core.authorization import require_organization_access
from apps.core.schemas import ErrorResponse
from apps.core.security import IdentityAuth, get_auth
from apps.core.types import StatusPageHttpRequest

from .schemas import (
    OrganizationCreate,
    OrganizationDetailResponse,
    OrganizationListItem,
    OrganizationResponse,
)
from .services import create_organization, get_organization_detail, list_user_organizations

router = Router(tags=["organizations"], auth=IdentityAuth())


@router.post(
    "/organizations",
    response={201: OrganizationResponse, 400: ErrorResponse, 409: ErrorResponse},
    by_alias=True,
    operation_id="createOrganization",
    summary="Create organization",
)
def create_organization_endpoint(
    request: StatusPageHttpRequest, payload: OrganizationCreate
) -> tuple[int, object]:
    """
    Create an organization.

    The caller becomes its ADMIN member.
    """
    organization = create_organization(payload, get_auth(request))
    return 201, organization


@router.get(
    "/organizations",
    response={200: list[OrganizationListItem]},
    by_alias=True,
    operation_id="listOrganizations",
    summary="List my organizations",
)
def list_organizations(request: StatusPageHttpRequest) -> list:
    """List the caller's organizations with their role and record counts."""
    return list_user_organizations(get_auth(request))


@router.get(
    "/organizations/{org_id}",
    response={200: OrganizationDetailResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="getOrganization",
    summary="Get organization",
)
def get_organization(request: StatusPageHttpRequest, org_id: str):
    organization = require_organization_access(request, org_id)
    return get_organization_detail(organization)
