"""
Tests for the public status API and HTML page.

These endpoints need no identity.
"""

import pytest
from django.test import Client

from apps.incidents.models import Incident
from tests.incidents.factories import IncidentFactory, IncidentUpdateFactory
from tests.organizations.factories import OrganizationFactory
from tests.services.factories import ServiceFactory


@pytest.mark.django_db
class TestPublicStatusEndpoint:
    """Tests for GET /api/public/status/{slug}."""

    def test_returns_status(self, header_auth: None, api_client: Client) -> None:
        """Should answer without X-User-Id."""
        org = OrganizationFactory.create(name="Acme", slug="acme")
        service = ServiceFactory.create(organization=org, status="PARTIAL_OUTAGE")
        incident = IncidentFactory.create(service=service)

        response = api_client.get("/api/public/status/acme")

        assert response.status_code == 200
        data = response.json()
        assert data["organization"] == {"id": org.id, "name": "Acme", "slug": "acme"}
        assert data["overallStatus"] == "Degraded Performance"
        assert [s["id"] for s in data["services"]] == [service.id]
        assert [i["id"] for i in data["activeIncidents"]] == [incident.id]
        assert data["activeIncidents"][0]["service"]["name"] == service.name
        assert "lastUpdated" in data

    def test_unknown_slug(self, api_client: Client) -> None:
        response = api_client.get("/api/public/status/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Status page not found"}


@pytest.mark.django_db
class TestPublicHistoryEndpoint:
    """Tests for GET /api/public/status/{slug}/history."""

    def test_returns_resolved_incidents(self, header_auth: None, api_client: Client) -> None:
        service = ServiceFactory.create(organization=OrganizationFactory.create(slug="acme"))
        resolved = IncidentFactory.create(service=service, status=Incident.Status.RESOLVED)
        IncidentFactory.create(service=service)

        response = api_client.get("/api/public/status/acme/history", {"limit": 5})

        assert response.status_code == 200
        assert [i["id"] for i in response.json()] == [resolved.id]

    def test_invalid_limit(self, api_client: Client) -> None:
        OrganizationFactory.create(slug="acme")

        response = api_client.get("/api/public/status/acme/history", {"limit": 500})

        assert response.status_code == 400


@pytest.mark.django_db
class TestStatusPageView:
    """Tests for the server-rendered /status/{slug}/ page."""

    def test_renders_services_and_three_updates(self, api_client: Client) -> None:
        org = OrganizationFactory.create(name="Acme Corp", slug="acme")
        service = ServiceFactory.create(organization=org, name="API Server")
        incident = IncidentFactory.create(service=service, title="Elevated errors")
        for n in range(4):
            IncidentUpdateFactory.create(incident=incident, message=f"note-{n}")

        response = api_client.get("/status/acme/")

        assert response.status_code == 200
        content = response.content.decode()
        assert "Acme Corp" in content
        assert "API Server" in content
        assert "Elevated errors" in content
        assert "All Systems Operational" in content
        assert content.count('class="update"') == 3

    def test_unknown_slug(self, api_client: Client) -> None:
        response = api_client.get("/status/missing/")

        assert response.status_code == 404
        assert "Status page not found" in response.content.decode()
