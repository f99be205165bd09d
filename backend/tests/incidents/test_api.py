"""
Tests for incident API endpoints.
"""

import pytest
from django.test import Client

from apps.incidents.models import Incident
from apps.services.models import Service
from tests.conftest import RecordingNotifier
from tests.incidents.factories import IncidentFactory, IncidentUpdateFactory
from tests.organizations.factories import OrganizationFactory
from tests.services.factories import ServiceFactory


@pytest.mark.django_db
class TestCreateIncidentEndpoint:
    """Tests for POST /api/organizations/{org_id}/incidents."""

    def test_creates_incident(self, api_client: Client, notifier: RecordingNotifier) -> None:
        service = ServiceFactory.create()

        response = api_client.post(
            f"/api/organizations/{service.organization_id}/incidents",
            {
                "title": "API down",
                "serviceId": service.id,
                "impact": "MAJOR",
                "message": "Investigating elevated errors",
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "API down"
        assert data["status"] == "INVESTIGATING"
        assert data["impact"] == "MAJOR"
        assert data["resolvedAt"] is None
        assert data["service"]["id"] == service.id
        assert [u["message"] for u in data["updates"]] == ["Investigating elevated errors"]
        service.refresh_from_db()
        assert service.status == Service.Status.PARTIAL_OUTAGE
        assert notifier.events == ["incident:created"]

    def test_missing_title(self, api_client: Client) -> None:
        service = ServiceFactory.create()

        response = api_client.post(
            f"/api/organizations/{service.organization_id}/incidents",
            {"serviceId": service.id},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Title and serviceId are required"}

    def test_service_from_other_organization(self, api_client: Client) -> None:
        org = OrganizationFactory.create()
        foreign = ServiceFactory.create()

        response = api_client.post(
            f"/api/organizations/{org.id}/incidents",
            {"title": "Down", "serviceId": foreign.id},
            content_type="application/json",
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Service not found"

    def test_invalid_impact(self, api_client: Client) -> None:
        service = ServiceFactory.create()

        response = api_client.post(
            f"/api/organizations/{service.organization_id}/incidents",
            {"title": "Down", "serviceId": service.id, "impact": "HUGE"},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["validImpacts"] == ["MINOR", "MAJOR", "CRITICAL"]


@pytest.mark.django_db
class TestListIncidentsEndpoint:
    """Tests for GET /api/organizations/{org_id}/incidents."""

    def test_filters_by_status(self, api_client: Client) -> None:
        service = ServiceFactory.create()
        open_incident = IncidentFactory.create(service=service)
        IncidentFactory.create(service=service, status=Incident.Status.RESOLVED)

        response = api_client.get(
            f"/api/organizations/{service.organization_id}/incidents", {"status": "INVESTIGATING"}
        )

        assert response.status_code == 200
        assert [i["id"] for i in response.json()] == [open_incident.id]

    def test_invalid_status_filter(self, api_client: Client) -> None:
        service = ServiceFactory.create()

        response = api_client.get(
            f"/api/organizations/{service.organization_id}/incidents", {"status": "NOPE"}
        )

        assert response.status_code == 400
        assert "validStatuses" in response.json()


@pytest.mark.django_db
class TestIncidentRecordEndpoints:
    """Tests for /api/incidents/{incident_id} routes."""

    def test_get_with_updates(self, api_client: Client) -> None:
        incident = IncidentFactory.create()
        update = IncidentUpdateFactory.create(incident=incident)

        response = api_client.get(f"/api/incidents/{incident.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["serviceId"] == incident.service_id
        assert data["organizationId"] == incident.organization_id
        assert [u["id"] for u in data["updates"]] == [update.id]
        assert data["updates"][0]["incidentId"] == incident.id

    def test_get_missing(self, api_client: Client) -> None:
        response = api_client.get("/api/incidents/inc_missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Incident not found"}

    def test_patch_resolves(self, api_client: Client, notifier: RecordingNotifier) -> None:
        service = ServiceFactory.create(status=Service.Status.MAJOR_OUTAGE)
        incident = IncidentFactory.create(service=service)

        response = api_client.patch(
            f"/api/incidents/{incident.id}", {"status": "RESOLVED"}, content_type="application/json"
        )

        assert response.status_code == 200
        assert response.json()["resolvedAt"] is not None
        service.refresh_from_db()
        assert service.status == Service.Status.OPERATIONAL
        assert notifier.events == ["incident:resolved"]

    def test_post_update(self, api_client: Client, notifier: RecordingNotifier) -> None:
        incident = IncidentFactory.create()

        response = api_client.post(
            f"/api/incidents/{incident.id}/updates",
            {"message": "Root cause identified", "status": "IDENTIFIED"},
            content_type="application/json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Root cause identified"
        assert data["status"] == "IDENTIFIED"
        assert data["id"].startswith("upd_")
        incident.refresh_from_db()
        assert incident.status == Incident.Status.IDENTIFIED
        assert notifier.last("incident:updated")["incidentId"] == incident.id

    def test_post_update_missing_fields(self, api_client: Client) -> None:
        incident = IncidentFactory.create()

        response = api_client.post(
            f"/api/incidents/{incident.id}/updates", {"message": "hi"}, content_type="application/json"
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Message and status are required"

    def test_non_member_denied(self, enforce_membership: None, api_client: Client) -> None:
        incident = IncidentFactory.create()

        response = api_client.patch(
            f"/api/incidents/{incident.id}", {"status": "RESOLVED"}, content_type="application/json"
        )

        assert response.status_code == 403
        incident.refresh_from_db()
        assert incident.status == Incident.Status.INVESTIGATING
