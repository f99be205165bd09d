"""
Tests for organization service functions.
"""

import pytest

from apps.core.auth import AuthContext
from apps.core.exceptions import Conflict, ValidationFailed
from apps.organizations.models import Member, Organization
from apps.organizations.schemas import OrganizationCreate
from apps.organizations.services import (
    create_organization,
    get_organization_detail,
    list_user_organizations,
)
from tests.incidents.factories import IncidentFactory
from tests.organizations.factories import MemberFactory, OrganizationFactory
from tests.services.factories import ServiceFactory

AUTH = AuthContext(user_id="user_1", email="owner@example.com")


@pytest.mark.django_db
class TestCreateOrganization:
    """Tests for create_organization."""

    def test_creates_organization_with_admin_member(self) -> None:
        """Should make the caller an ADMIN member of the new organization."""
        org = create_organization(OrganizationCreate(name="Acme", slug="acme"), AUTH)

        member = Member.objects.get(organization=org)
        assert org.name == "Acme"
        assert org.slug == "acme"
        assert member.external_user_id == "user_1"
        assert member.email == "owner@example.com"
        assert member.role == Member.Role.ADMIN

    @pytest.mark.parametrize("payload", [{"name": "Acme"}, {"slug": "acme"}, {"name": "", "slug": ""}])
    def test_requires_name_and_slug(self, payload: dict) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            create_organization(OrganizationCreate(**payload), AUTH)

        assert exc_info.value.error == "Name and slug are required"
        assert not Organization.objects.exists()

    def test_duplicate_slug_conflicts(self) -> None:
        """Should raise Conflict without creating a member when the slug is taken."""
        OrganizationFactory.create(slug="acme")

        with pytest.raises(Conflict) as exc_info:
            create_organization(OrganizationCreate(name="Acme 2", slug="acme"), AUTH)

        assert exc_info.value.status_code == 409
        assert exc_info.value.error == "Organization slug already exists"
        assert not Member.objects.filter(external_user_id="user_1").exists()


@pytest.mark.django_db
class TestListUserOrganizations:
    """Tests for list_user_organizations."""

    def test_returns_only_callers_organizations_with_role(self) -> None:
        mine = MemberFactory.create(external_user_id="user_1", role=Member.Role.ADMIN)
        MemberFactory.create(external_user_id="someone_else")

        organizations = list_user_organizations(AUTH)

        assert [org.id for org in organizations] == [mine.organization_id]
        assert organizations[0].role == Member.Role.ADMIN

    def test_includes_service_and_incident_counts(self) -> None:
        member = MemberFactory.create(external_user_id="user_1")
        service = ServiceFactory.create(organization=member.organization)
        ServiceFactory.create(organization=member.organization)
        IncidentFactory.create(service=service)

        [organization] = list_user_organizations(AUTH)

        assert organization.service_count == 2
        assert organization.incident_count == 1

    def test_no_memberships(self) -> None:
        assert list_user_organizations(AUTH) == []


@pytest.mark.django_db
class TestGetOrganizationDetail:
    """Tests for get_organization_detail."""

    def test_loads_counts(self) -> None:
        org = OrganizationFactory.create()
        ServiceFactory.create(organization=org)

        detail = get_organization_detail(org)

        assert detail.id == org.id
        assert detail.service_count == 1
        assert detail.incident_count == 0
