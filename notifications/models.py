# notifications/models.py
import uuid

from django.db import models
from django.conf import settings


class Notification(models.Model):
    TYPE_RSVP_CONFIRMATION = "rsvp_confirmation"
    TYPE_PROJECT_UPDATE = "project_update"
    TYPE_SYSTEM = "system"

    TYPE_CHOICES = [
        (TYPE_RSVP_CONFIRMATION, "RSVP Confirmation"),
        (TYPE_PROJECT_UPDATE, "Project Update"),
        (TYPE_SYSTEM, "System"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    type = models.CharField(max_length=50, choices=TYPE_CHOICES)
    title = models.CharField(max_length=255)
    message = models.TextField()
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    # Optional linking to project
    related_project = models.ForeignKey(
        "projects.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "is_read"], name="notif_user_read_idx"),
            models.Index(fields=["type"], name="notif_type_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.type} - {self.title}"
