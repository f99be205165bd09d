"""
Server-rendered public status page.
"""

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from apps.core.exceptions import NotFound

from .services import get_public_status

TEMPLATE_NAME = "public/status_page.html"
UPDATES_PER_INCIDENT = 3


def status_page(request: HttpRequest, slug: str) -> HttpResponse:
    """Render the status page for an organization slug."""
    try:
        status = get_public_status(slug)
    except NotFound as e:
        return render(request, TEMPLATE_NAME, {"slug": slug, "error": e.error}, status=404)

    for incident in status["active_incidents"]:
        incident.recent_updates = incident.update_list[:UPDATES_PER_INCIDENT]

    return render(request, TEMPLATE_NAME, status)
