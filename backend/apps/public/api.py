"""
Public status API endpoints.

No authentication: the data is what the organization publishes on its
status page.
"""

from django.http import HttpRequest
from ninja import Router

from apps.core.schemas import ErrorResponse
from apps.incidents.schemas import IncidentResponse

from .schemas import PublicStatusResponse
from .services import HISTORY_DEFAULT_LIMIT, get_incident_history, get_public_status

router = Router(tags=["public"])


@router.get(
    "/status/{slug}",
    response={200: PublicStatusResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="getPublicStatus",
    summary="Get public status page",
)
def public_status(request: HttpRequest, slug: str):
    """Get services, overall status and active incidents for a status page."""
    return get_public_status(slug)


@router.get(
    "/status/{slug}/history",
    response={200: list[IncidentResponse], 400: ErrorResponse, 404: ErrorResponse},
    by_alias=True,
    operation_id="getPublicIncidentHistory",
    summary="Get resolved incident history",
)
def public_history(request: HttpRequest, slug: str, limit: int = HISTORY_DEFAULT_LIMIT):
    """List resolved incidents, most recently resolved first (limit 1-100)."""
    return get_incident_history(slug, limit=limit)
