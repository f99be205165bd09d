"""
Factories for organizations app models.

Used in tests to create test data.
"""

from typing import Any

import factory
from factory.django import DjangoModelFactory

from apps.organizations.models import Member, Organization


class OrganizationFactory(DjangoModelFactory[Organization]):
    """Factory for Organization model."""

    class Meta:
        model = Organization

    name = factory.Sequence(lambda n: f"Organization {n}")
    slug = factory.Sequence(lambda n: f"org-{n}")


class MemberFactory(DjangoModelFactory[Member]):
    """Factory for Member model."""

    class Meta:
        model = Member

    organization: Any = factory.SubFactory(OrganizationFactory)
    external_user_id = factory.Sequence(lambda n: f"user_{n}")
    email = factory.Faker("email")
    role = Member.Role.MEMBER
