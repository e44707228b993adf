# users/models.py
import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


def generate_user_id():
    return str(uuid.uuid4())


class User(AbstractUser):
    """
    A volunteer or organizer.

    The primary key is the identity provider's subject id, so the row is
    created (or refreshed) the first time a signed-in user hits the API.
    """
    id = models.CharField(primary_key=True, max_length=255, default=generate_user_id, editable=False)
    email = models.EmailField(unique=True, blank=True, null=True)

    bio = models.TextField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    profile_image_url = models.CharField(max_length=1024, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @property
    def display_name(self):
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or self.username

    def save(self, *args, **kwargs):
        # '' would collide on the unique index; store missing emails as NULL
        if not self.email:
            self.email = None
        super().save(*args, **kwargs)

    def __str__(self):
        return self.display_name
