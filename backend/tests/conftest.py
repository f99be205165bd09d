"""
Shared pytest fixtures for all tests.

This module provides common fixtures used across multiple test modules.
Individual test modules can override these fixtures if needed.

Factories
---------
Import factories directly from their modules:

    from tests.organizations.factories import OrganizationFactory, MemberFactory
    from tests.services.factories import ServiceFactory
    from tests.incidents.factories import IncidentFactory, IncidentUpdateFactory

Example usage:

    @pytest.mark.django_db
    def test_something():
        org = OrganizationFactory.create(slug="acme")
        service = ServiceFactory.create(organization=org)
"""

from collections.abc import Callable
from typing import Any

import pytest
from django.apps import apps
from django.http import HttpRequest
from django.test import Client, RequestFactory

from apps.core.auth import AuthContext
from apps.core.authorization import AllowAllPolicy
from apps.realtime.notifiers import Notifier

TEST_USER_ID = "test_user_123"
TEST_USER_EMAIL = "test@example.com"


class RecordingNotifier(Notifier):
    """
    Notifier that keeps every emitted payload in memory.

    Use in tests to assert on broadcasts without a Socket.IO server.
    """

    backend_name = "recording"

    def __init__(self) -> None:
        self.emitted: list[tuple[str, dict[str, Any], str | None]] = []

    def emit(self, event: str, payload: dict[str, Any], room: str | None = None) -> None:
        self.emitted.append((event, payload, room))

    @property
    def events(self) -> list[str]:
        return [event for event, _, _ in self.emitted]

    def last(self, event: str) -> dict[str, Any]:
        """Payload of the most recent emit of this event."""
        for emitted_event, payload, _ in reversed(self.emitted):
            if emitted_event == event:
                return payload
        raise AssertionError(f"{event} was not emitted; got {self.events}")


@pytest.fixture
def notifier(monkeypatch: pytest.MonkeyPatch) -> RecordingNotifier:
    """
    Recording notifier installed as the app-wide notifier.

    NotifierMiddleware reads the notifier when the middleware chain loads,
    which the test client does on its first request, so request this
    fixture before making calls with api_client.
    """
    recording = RecordingNotifier()
    monkeypatch.setattr(apps.get_app_config("realtime"), "notifier", recording)
    return recording


@pytest.fixture
def request_factory() -> RequestFactory:
    """
    Django request factory for unit testing views.

    Use this when you need to test view functions directly without going through
    the full HTTP stack.
    """
    return RequestFactory()


@pytest.fixture
def api_client(notifier: RecordingNotifier) -> Client:
    """
    Django test client for full HTTP request/response cycle tests.

    Requests act as TEST_USER_ID (AUTH_FIXED_USER_ID in test settings) and
    broadcasts go to the recording notifier.

    Example:
        def test_health(api_client):
            response = api_client.get("/health")
            assert response.status_code == 200
    """
    return Client()


@pytest.fixture
def header_auth(settings: Any) -> None:
    """Disable the fixed identity so callers must send X-User-Id."""
    settings.AUTH_FIXED_USER_ID = ""
    settings.AUTH_FIXED_USER_EMAIL = ""


@pytest.fixture
def enforce_membership(settings: Any) -> None:
    """Select MembershipPolicy for requests made after this fixture runs."""
    settings.ENFORCE_MEMBERSHIP = True


@pytest.fixture
def authenticated_request(request_factory: RequestFactory) -> Callable[..., HttpRequest]:
    """
    Factory fixture for requests carrying an AuthContext and access policy.

    Useful for calling authorization helpers directly.

    Example:
        def test_helper(authenticated_request):
            request = authenticated_request(user_id="user_1")
            require_organization_access(request, org.id)
    """

    def _make_request(
        user_id: str = TEST_USER_ID,
        email: str = TEST_USER_EMAIL,
        policy: Any = None,
        path: str = "/",
    ) -> HttpRequest:
        request = request_factory.get(path)
        request.auth = AuthContext(user_id=user_id, email=email)  # type: ignore[attr-defined]
        request.access_policy = policy or AllowAllPolicy()  # type: ignore[attr-defined]
        return request

    return _make_request
