from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from core.storage import storage
from notifications.models import Notification

User = get_user_model()


class NotificationAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(id="notify-me", username="notify-me")
        self.other = User.objects.create_user(id="not-me", username="not-me")

        self.first = storage.create_notification(
            "notify-me", "Welcome", "Thanks for joining", Notification.TYPE_SYSTEM
        )
        self.second = storage.create_notification(
            "notify-me", "New Volunteer Joined", "Ravi joined your project", Notification.TYPE_RSVP_CONFIRMATION
        )
        self.foreign = storage.create_notification(
            "not-me", "Hidden", "Not yours", Notification.TYPE_SYSTEM
        )

        self.client.force_authenticate(user=self.user)
        self.list_url = reverse("notification-list")

    def read_url(self, notification):
        return reverse("notification-read", kwargs={"notification_id": notification.pk})

    def test_list_only_own_notifications(self):
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, 200)
        ids = {n["id"] for n in response.data}
        self.assertEqual(ids, {str(self.first.pk), str(self.second.pk)})
        self.assertTrue(all(n["user_id"] == "notify-me" for n in response.data))

    def test_mark_read_and_unread_filter(self):
        response = self.client.patch(self.read_url(self.first))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "Notification marked as read")

        # Second call is a no-op
        response = self.client.patch(self.read_url(self.first))
        self.assertEqual(response.status_code, 200)

        response = self.client.get(self.list_url, {"unread": "true"})
        self.assertEqual([n["id"] for n in response.data], [str(self.second.pk)])

    def test_cannot_mark_someone_elses_notification(self):
        response = self.client.patch(self.read_url(self.foreign))

        self.assertEqual(response.status_code, 200)
        self.foreign.refresh_from_db()
        self.assertFalse(self.foreign.is_read)

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.get(self.list_url).status_code, 401)
