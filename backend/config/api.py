"""
Django Ninja API configuration.

Every error leaves the API as {"error": ..., "message": ...} plus optional
structured extras such as validStatuses.
"""

import traceback

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import AuthenticationError, HttpError, ValidationError

from apps.core.exceptions import StatusPageError
from apps.core.logging import get_logger
from apps.incidents.api import router as incidents_router
from apps.organizations.api import router as organizations_router
from apps.public.api import router as public_router
from apps.services.api import router as services_router

logger = get_logger(__name__)

api = NinjaAPI(
    title="Status Page API",
    version="1.0.0",
    description="Multi-tenant status pages: services, incidents and live updates.",
    openapi_extra={
        "info": {
            "contact": {"name": "API Support"},
        },
        "tags": [
            {"name": "organizations", "description": "Tenants and membership"},
            {"name": "services", "description": "Monitored services and their status"},
            {"name": "incidents", "description": "Incident lifecycle and updates"},
            {"name": "public", "description": "Unauthenticated status page data"},
        ],
        "components": {
            "securitySchemes": {
                "APIKeyHeader": {
                    "type": "apiKey",
                    "in": "header",
                    "name": "X-User-Id",
                    "description": "External user ID asserted by the upstream identity provider.",
                }
            }
        },
    },
)

# Register routers
api.add_router("", organizations_router)
api.add_router("", services_router)
api.add_router("", incidents_router)
api.add_router("/public", public_router)


# =============================================================================
# Exception handlers
# =============================================================================


@api.exception_handler(StatusPageError)
def status_page_error(request: HttpRequest, exc: StatusPageError) -> HttpResponse:
    return api.create_response(request, exc.to_dict(), status=exc.status_code)


@api.exception_handler(ValidationError)
def request_validation_error(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    """Schema validation failures use the same 400 body as domain validation."""
    details = [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg", "")} for error in exc.errors
    ]
    message = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}" for detail in details
    )
    return api.create_response(
        request,
        {"error": "Validation failed", "message": message, "details": details},
        status=400,
    )


@api.exception_handler(HttpError)
def http_error(request: HttpRequest, exc: HttpError) -> HttpResponse:
    """Errors raised by ninja itself, such as a request body that is not valid JSON."""
    return api.create_response(request, {"error": str(exc)}, status=exc.status_code)


@api.exception_handler(AuthenticationError)
def authentication_error(request: HttpRequest, exc: AuthenticationError) -> HttpResponse:
    return api.create_response(request, {"error": "Unauthorized"}, status=401)


@api.exception_handler(DatabaseError)
def database_error(request: HttpRequest, exc: DatabaseError) -> HttpResponse:
    logger.error("database_error", error_type=type(exc).__name__, exc_info=exc)
    return api.create_response(
        request,
        {"error": "Database error", "message": "The request could not be stored"},
        status=400,
    )


@api.exception_handler(Exception)
def unhandled_error(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.error("unhandled_exception", error_type=type(exc).__name__, exc_info=exc)
    body: dict = {"error": "Internal server error"}
    if settings.DEBUG:
        body["message"] = str(exc)
        body["stack"] = "".join(traceback.format_exception(exc))
    return api.create_response(request, body, status=500)
