"""
Service API endpoints.

Organization-scoped routes create and list services; record routes act on
a single service after authorizing the caller against its organization.
"""

from ninja import Router

from apps.core.authorization import authorize_organization, require_organization_access
from apps.core.schemas import ErrorResponse
from apps.core.security import IdentityAuth, get_auth
from apps.core.types import StatusPageHttpRequest
from apps.incidents.schemas import ServiceWithIncidentsResponse

from .models import Service
from .schemas import (
    ServiceCreate,
    ServiceListItem,
    ServicePatch,
    ServiceResponse,
    ServiceStatusUpdate,
    ServiceUpdate,
)
from .services import (
    create_service,
    delete_service,
    get_service_detail,
    get_service_or_404,
    list_services,
    patch_service,
    update_service,
    update_service_status,
)

router = Router(tags=["services"], auth=IdentityAuth())


def _get_authorized_service(request: StatusPageHttpRequest, service_id: str) -> Service:
    """Fetch a service and check the caller may act on its organization."""
    service = get_service_or_404(service_id)
    authorize_organization(request, get_auth(request), service.organization)
    return service


# =============================================================================
# Organization-scoped
# =============================================================================


@router.post(
    "/organizations/{org_id}/services",
    response={201: ServiceResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="createService",
    summary="Create service",
)
def create_service_endpoint(request: StatusPageHttpRequest, org_id: str, payload: ServiceCreate):
    organization = require_organization_access(request, org_id)
    return 201, create_service(organization, payload, request.notifier)


@router.get(
    "/organizations/{org_id}/services",
    response={200: list[ServiceListItem], 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="listServices",
    summary="List services",
)
def list_services_endpoint(request: StatusPageHttpRequest, org_id: str):
    """List services by display order, each with its count of unresolved incidents."""
    organization = require_organization_access(request, org_id)
    return list_services(organization)


# =============================================================================
# Single service
# =============================================================================


@router.get(
    "/services/{service_id}",
    response={200: ServiceWithIncidentsResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="getService",
    summary="Get service",
)
def get_service_endpoint(request: StatusPageHttpRequest, service_id: str):
    """Get a service with its unresolved incidents and their latest update."""
    service = get_service_detail(service_id)
    authorize_organization(request, get_auth(request), service.organization)
    return service


@router.put(
    "/services/{service_id}",
    response={200: ServiceResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="updateService",
    summary="Replace service",
)
def update_service_endpoint(request: StatusPageHttpRequest, service_id: str, payload: ServiceUpdate):
    service = _get_authorized_service(request, service_id)
    return update_service(service, payload, request.notifier)


@router.patch(
    "/services/{service_id}",
    response={200: ServiceResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="patchService",
    summary="Update service fields",
)
def patch_service_endpoint(request: StatusPageHttpRequest, service_id: str, payload: ServicePatch):
    """Update only the fields sent in the request body."""
    service = _get_authorized_service(request, service_id)
    return patch_service(service, payload, request.notifier)


@router.patch(
    "/services/{service_id}/status",
    response={200: ServiceResponse, 400: ErrorResponse, 403: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="updateServiceStatus",
    summary="Change service status",
)
def update_service_status_endpoint(
    request: StatusPageHttpRequest, service_id: str, payload: ServiceStatusUpdate
):
    service = _get_authorized_service(request, service_id)
    return update_service_status(service, payload.status, request.notifier)


@router.delete(
    "/services/{service_id}",
    response={204: None, 403: ErrorResponse, 404: ErrorResponse},
    operation_id="deleteService",
    summary="Delete service",
)
def delete_service_endpoint(request: StatusPageHttpRequest, service_id: str):
    """Delete a service together with its incidents."""
    service = _get_authorized_service(request, service_id)
    delete_service(service, request.notifier)
    return 204, None
