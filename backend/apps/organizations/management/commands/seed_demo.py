"""
Management command to seed a demo organization with services.

Safe to run repeatedly: existing records are reused, never duplicated.
Example: ./manage.py seed_demo --user-id test_user_123
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.organizations.models import Member, Organization
from apps.services.models import Service

DEMO_SERVICES = [
    ("API Server", "Main application API", Service.Status.OPERATIONAL, 1),
    ("Web Application", "Frontend web app", Service.Status.OPERATIONAL, 2),
    ("Database", "PostgreSQL database", Service.Status.DEGRADED_PERFORMANCE, 3),
]


class Command(BaseCommand):
    help = "Create the Acme Corp demo organization, its admin member and three services"

    def add_arguments(self, parser):
        parser.add_argument(
            "--user-id",
            default="test_user_123",
            help="External user ID of the admin member (default: test_user_123)",
        )
        parser.add_argument(
            "--email",
            default="test@example.com",
            help="Email of the admin member (default: test@example.com)",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        organization, created = Organization.objects.get_or_create(
            slug="acme-corp",
            defaults={"name": "Acme Corp"},
        )
        verb = "Created" if created else "Found existing"
        self.stdout.write(self.style.SUCCESS(f"{verb} organization {organization.slug} ({organization.id})"))

        Member.objects.get_or_create(
            organization=organization,
            external_user_id=options["user_id"],
            defaults={"email": options["email"], "role": Member.Role.ADMIN},
        )

        for name, description, status, order in DEMO_SERVICES:
            service, created = Service.objects.get_or_create(
                organization=organization,
                name=name,
                defaults={"description": description, "status": status, "order": order},
            )
            if created:
                self.stdout.write(f"  - {service.name} ({service.id}) - {service.status}")

        self.stdout.write(self.style.SUCCESS(f"Organization ID: {organization.id}"))
