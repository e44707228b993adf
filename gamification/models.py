import uuid

from django.db import models
from django.conf import settings


class UserBadge(models.Model):
    """
    Award record. Append-only: badges are granted, never edited or revoked.
    The same badge may be granted more than once.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="badges",
    )
    badge_type = models.CharField(max_length=50, help_text="e.g. first_project, ten_rsvps")
    badge_name = models.CharField(max_length=100)
    earned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "-earned_at"], name="badge_user_earned_idx"),
        ]

    def __str__(self):
        return f"{self.user}: {self.badge_name}"
