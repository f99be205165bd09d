"""
Plain Django views living outside the Ninja API.
"""

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.utils import timezone


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness probe for the load balancer."""
    return JsonResponse(
        {
            "status": "ok",
            "timestamp": timezone.now().isoformat(),
            "environment": getattr(settings, "ENVIRONMENT", ""),
        }
    )


def not_found(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    """JSON 404 for unknown paths (wired as handler404)."""
    return JsonResponse({"error": "Not Found", "path": request.path}, status=404)
