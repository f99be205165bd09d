import django.db.models.deletion
from django.db import migrations, models

import apps.incidents.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
        ("services", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Incident",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.CharField(
                        default=apps.incidents.models.generate_incident_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("INVESTIGATING", "Investigating"),
                            ("IDENTIFIED", "Identified"),
                            ("MONITORING", "Monitoring"),
                            ("RESOLVED", "Resolved"),
                        ],
                        db_index=True,
                        default="INVESTIGATING",
                        max_length=32,
                    ),
                ),
                (
                    "impact",
                    models.CharField(
                        choices=[("MINOR", "Minor"), ("MAJOR", "Major"), ("CRITICAL", "Critical")],
                        default="MINOR",
                        max_length=16,
                    ),
                ),
                (
                    "resolved_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="Set when the incident moves to RESOLVED",
                        null=True,
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="incidents",
                        to="organizations.organization",
                    ),
                ),
                (
                    "service",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="incidents",
                        to="services.service",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="IncidentUpdate",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=apps.incidents.models.generate_incident_update_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("message", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("INVESTIGATING", "Investigating"),
                            ("IDENTIFIED", "Identified"),
                            ("MONITORING", "Monitoring"),
                            ("RESOLVED", "Resolved"),
                        ],
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "incident",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="updates",
                        to="incidents.incident",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
    ]
