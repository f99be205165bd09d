"""
Organization access policies.

A policy decides whether the caller may act on an organization's resources.
The active policy is chosen by the ENFORCE_MEMBERSHIP setting and attached
to each request by AccessPolicyMiddleware; endpoints call
authorize_organization() instead of checking membership inline.

AllowAllPolicy: never denies (local development, demos)
MembershipPolicy: requires a Member row linking caller and organization
"""

from abc import ABC, abstractmethod

from django.conf import settings
from django.http import HttpRequest

from apps.core.auth import AuthContext
from apps.core.exceptions import AccessDenied, NotFound
from apps.core.logging import get_logger
from apps.core.security import get_auth
from apps.organizations.models import Member, Organization

logger = get_logger(__name__)


class OrganizationAccessPolicy(ABC):
    """Abstract base class for organization authorization strategies."""

    @abstractmethod
    def authorize(self, auth: AuthContext, organization: Organization) -> Member | None:
        """
        Check that the caller may act on the organization.

        Returns:
            The caller's Member row, or None when the policy allows access
            without one.

        Raises:
            AccessDenied: If the caller is not allowed.
        """

    def find_member(self, auth: AuthContext, organization: Organization) -> Member | None:
        return Member.objects.filter(
            external_user_id=auth.user_id,
            organization=organization,
        ).first()


class AllowAllPolicy(OrganizationAccessPolicy):
    """Grant access to every caller, returning the membership when one exists."""

    def authorize(self, auth: AuthContext, organization: Organization) -> Member | None:
        member = self.find_member(auth, organization)
        if member is None:
            logger.debug(
                "organization_access_granted_without_membership",
                organization_id=organization.id,
                user_id=auth.user_id,
            )
        return member


class MembershipPolicy(OrganizationAccessPolicy):
    """Grant access only to members of the organization."""

    def authorize(self, auth: AuthContext, organization: Organization) -> Member:
        member = self.find_member(auth, organization)
        if member is None:
            logger.warning(
                "organization_access_denied",
                organization_id=organization.id,
                user_id=auth.user_id,
            )
            raise AccessDenied(message="You are not a member of this organization")
        return member


def get_access_policy() -> OrganizationAccessPolicy:
    """
    Get the configured access policy.

    Uses ENFORCE_MEMBERSHIP setting: True selects MembershipPolicy.
    """
    if getattr(settings, "ENFORCE_MEMBERSHIP", True):
        return MembershipPolicy()
    return AllowAllPolicy()


def authorize_organization(
    request: HttpRequest, auth: AuthContext, organization: Organization
) -> Member | None:
    """Run the request's access policy for the organization."""
    policy: OrganizationAccessPolicy = getattr(request, "access_policy", None) or get_access_policy()
    return policy.authorize(auth, organization)


def require_organization_access(request: HttpRequest, organization_id: str) -> Organization:
    """
    Fetch the organization and authorize the caller against it.

    Raises:
        NotFound: If the organization does not exist
        AccessDenied: If the access policy rejects the caller
    """
    organization = Organization.objects.filter(id=organization_id).first()
    if organization is None:
        raise NotFound("Organization not found")
    authorize_organization(request, get_auth(request), organization)
    return organization
