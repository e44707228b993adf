from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("cleanup", "Cleanup"),
                            ("tree_planting", "Tree Planting"),
                            ("education", "Education"),
                            ("construction", "Construction"),
                            ("food_distribution", "Food Distribution"),
                            ("healthcare", "Healthcare"),
                            ("disaster_relief", "Disaster Relief"),
                            ("community_service", "Community Service"),
                        ],
                        max_length=32,
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                ("latitude", models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True)),
                ("date_time", models.DateTimeField()),
                ("duration", models.PositiveIntegerField(blank=True, help_text="Hours", null=True)),
                ("max_volunteers", models.PositiveIntegerField(blank=True, null=True)),
                ("image_url", models.CharField(blank=True, max_length=1024, null=True)),
                ("requirements", models.TextField(blank=True, help_text="What volunteers should bring", null=True)),
                ("provided", models.TextField(blank=True, help_text="What the organizer provides", null=True)),
                ("contact_person", models.CharField(blank=True, max_length=255, null=True)),
                ("contact_phone", models.CharField(blank=True, max_length=32, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organizer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="organized_projects",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["is_active", "created_at"], name="project_active_created_idx"),
                    models.Index(fields=["organizer", "is_active"], name="project_org_active_idx"),
                    models.Index(fields=["category"], name="project_category_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Rsvp",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "status",
                    models.CharField(
                        choices=[("confirmed", "Confirmed"), ("cancelled", "Cancelled")],
                        default="confirmed",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rsvps",
                        to="projects.project",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rsvps",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["project", "created_at"], name="rsvp_project_created_idx"),
                    models.Index(fields=["user", "created_at"], name="rsvp_user_created_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("project", "user"), name="rsvp_unique_project_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="messages",
                        to="projects.project",
                    ),
                ),
                (
                    "sender",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="project_messages",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["project", "created_at"], name="message_project_created_idx"),
                ],
            },
        ),
    ]
