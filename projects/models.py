from django.db import models
from django.conf import settings
import uuid


class Project(models.Model):
    """
    A volunteering project posted by an organizer.
    Deleting a project only flips is_active; rows are never removed so
    RSVPs, messages and notifications keep pointing at something.
    """
    CATEGORY_CLEANUP = "cleanup"
    CATEGORY_TREE_PLANTING = "tree_planting"
    CATEGORY_EDUCATION = "education"
    CATEGORY_CONSTRUCTION = "construction"
    CATEGORY_FOOD_DISTRIBUTION = "food_distribution"
    CATEGORY_HEALTHCARE = "healthcare"
    CATEGORY_DISASTER_RELIEF = "disaster_relief"
    CATEGORY_COMMUNITY_SERVICE = "community_service"

    CATEGORY_CHOICES = [
        (CATEGORY_CLEANUP, "Cleanup"),
        (CATEGORY_TREE_PLANTING, "Tree Planting"),
        (CATEGORY_EDUCATION, "Education"),
        (CATEGORY_CONSTRUCTION, "Construction"),
        (CATEGORY_FOOD_DISTRIBUTION, "Food Distribution"),
        (CATEGORY_HEALTHCARE, "Healthcare"),
        (CATEGORY_DISASTER_RELIEF, "Disaster Relief"),
        (CATEGORY_COMMUNITY_SERVICE, "Community Service"),
    ]

    # Query-string value meaning "no category filter"
    CATEGORY_ALL = "all"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES)
    location = models.CharField(max_length=255)
    latitude = models.DecimalField(max_digits=10, decimal_places=8, blank=True, null=True)
    longitude = models.DecimalField(max_digits=11, decimal_places=8, blank=True, null=True)
    date_time = models.DateTimeField()
    duration = models.PositiveIntegerField(blank=True, null=True, help_text="Hours")
    max_volunteers = models.PositiveIntegerField(blank=True, null=True)

    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="organized_projects",
    )
    image_url = models.CharField(max_length=1024, blank=True, null=True)
    requirements = models.TextField(blank=True, null=True, help_text="What volunteers should bring")
    provided = models.TextField(blank=True, null=True, help_text="What the organizer provides")
    contact_person = models.CharField(max_length=255, blank=True, null=True)
    contact_phone = models.CharField(max_length=32, blank=True, null=True)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["is_active", "created_at"], name="project_active_created_idx"),
            models.Index(fields=["organizer", "is_active"], name="project_org_active_idx"),
            models.Index(fields=["category"], name="project_category_idx"),
        ]

    def __str__(self):
        return self.title


class Rsvp(models.Model):
    STATUS_CONFIRMED = "confirmed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="rsvps")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="rsvps")
    # Cancelling deletes the row, so this is always "confirmed" today
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_CONFIRMED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["project", "user"], name="rsvp_unique_project_user"),
        ]
        indexes = [
            models.Index(fields=["project", "created_at"], name="rsvp_project_created_idx"),
            models.Index(fields=["user", "created_at"], name="rsvp_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.user} -> {self.project.title} ({self.status})"


class Message(models.Model):
    """
    Project chat line. Append-only: there is no edit or delete path.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="project_messages",
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["project", "created_at"], name="message_project_created_idx"),
        ]

    def __str__(self):
        return f"{self.sender} @ {self.project.title}: {self.content[:40]}"
