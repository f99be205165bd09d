import django.db.models.deletion
from django.db import migrations, models

import apps.services.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Service",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.CharField(
                        default=apps.services.models.generate_service_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("OPERATIONAL", "Operational"),
                            ("DEGRADED_PERFORMANCE", "Degraded Performance"),
                            ("PARTIAL_OUTAGE", "Partial Outage"),
                            ("MAJOR_OUTAGE", "Major Outage"),
                            ("UNDER_MAINTENANCE", "Under Maintenance"),
                        ],
                        db_index=True,
                        default="OPERATIONAL",
                        max_length=32,
                    ),
                ),
                (
                    "order",
                    models.IntegerField(default=0, help_text="Display position, ascending"),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="services",
                        to="organizations.organization",
                    ),
                ),
            ],
            options={
                "ordering": ["order", "-created_at"],
            },
        ),
    ]
