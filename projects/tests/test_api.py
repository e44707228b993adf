from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from notifications.models import Notification
from projects.models import Message, Project

User = get_user_model()


class ProjectAPITestCase(TestCase):
    def setUp(self):
        # Throttle counters live in the cache
        cache.clear()
        self.client = APIClient()

        self.organizer = User.objects.create_user(
            id="organizer-1",
            username="organizer",
            first_name="Asha",
            password="pass",
        )
        self.volunteer = User.objects.create_user(id="volunteer-1", username="volunteer", password="pass")
        self.late = User.objects.create_user(id="volunteer-2", username="late", password="pass")

        self.client.force_authenticate(user=self.organizer)
        self.list_url = reverse("project-list-create")

    def payload(self, **overrides):
        data = {
            "title": "Beach Cleanup",
            "description": "Clear plastic from the shoreline",
            "category": "cleanup",
            "location": "Juhu Beach, Mumbai",
            "date_time": (timezone.now() + timezone.timedelta(days=3)).isoformat(),
            "max_volunteers": 1,
        }
        data.update(overrides)
        return data

    def create_project(self, **overrides):
        response = self.client.post(self.list_url, self.payload(**overrides), format="json")
        self.assertEqual(
            response.status_code,
            201,
            f"Status: {response.status_code}, Content: {getattr(response, 'data', response.content)}",
        )
        return response.data

    def url(self, name, project_id):
        return reverse(name, kwargs={"project_id": project_id})

    def test_create_sets_organizer(self):
        data = self.create_project(organizer_id=self.volunteer.pk)

        self.assertEqual(data["organizer_id"], self.organizer.pk)
        self.assertTrue(data["is_active"])
        self.assertEqual(Project.objects.get(pk=data["id"]).organizer, self.organizer)

    def test_create_invalid_payload_returns_field_errors(self):
        response = self.client.post(self.list_url, {"title": ""}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.data["success"])
        self.assertIn("title", response.data["errors"])
        self.assertIn("date_time", response.data["errors"])

    def test_create_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.post(self.list_url, self.payload(), format="json")
        self.assertEqual(response.status_code, 401)

    def test_list_is_public_and_filtered(self):
        self.create_project()
        self.create_project(title="Tree Drive", category="tree_planting", description="Saplings")

        self.client.force_authenticate(user=None)
        response = self.client.get(self.list_url, {"category": "cleanup"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["title"] for p in response.data], ["Beach Cleanup"])
        self.assertEqual(response.data[0]["rsvp_count"], 0)
        self.assertEqual(response.data[0]["organizer"]["id"], self.organizer.pk)

        response = self.client.get(self.list_url, {"search": "SAPLING"})
        self.assertEqual([p["title"] for p in response.data], ["Tree Drive"])

        response = self.client.get(self.list_url, {"userId": self.volunteer.pk})
        self.assertEqual(response.data, [])

    def test_rsvp_flow_status_codes(self):
        project = self.create_project()
        rsvp_url = self.url("project-rsvp", project["id"])

        self.client.force_authenticate(user=self.volunteer)
        response = self.client.post(rsvp_url)
        self.assertEqual(response.status_code, 201, response.data)
        self.assertEqual(response.data["user_id"], self.volunteer.pk)
        self.assertEqual(response.data["status"], "confirmed")

        response = self.client.post(rsvp_url)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["message"], "Already registered for this project")

        self.client.force_authenticate(user=self.late)
        response = self.client.post(rsvp_url)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "Project is at full capacity")

        self.client.force_authenticate(user=self.volunteer)
        response = self.client.delete(rsvp_url)
        self.assertEqual(response.status_code, 200)
        response = self.client.delete(rsvp_url)
        self.assertEqual(response.status_code, 200)

        self.client.force_authenticate(user=self.late)
        response = self.client.post(rsvp_url)
        self.assertEqual(response.status_code, 201)

        detail = self.client.get(self.url("project-detail", project["id"]))
        self.assertEqual(detail.data["rsvp_count"], 1)
        self.assertEqual(detail.data["spots_left"], 0)
        self.assertEqual([r["user_id"] for r in detail.data["rsvps"]], [self.late.pk])

    def test_rsvp_notifies_organizer(self):
        project = self.create_project()

        self.client.force_authenticate(user=self.volunteer)
        self.client.post(self.url("project-rsvp", project["id"]))

        notification = Notification.objects.get(user=self.organizer)
        self.assertEqual(notification.type, "rsvp_confirmation")
        self.assertEqual(str(notification.related_project_id), project["id"])

    def test_rsvp_unknown_project_is_404(self):
        response = self.client.post(
            self.url("project-rsvp", "00000000-0000-0000-0000-000000000000")
        )
        self.assertEqual(response.status_code, 404)

    def test_rsvp_list_is_public(self):
        project = self.create_project(max_volunteers=5)
        self.client.force_authenticate(user=self.volunteer)
        self.client.post(self.url("project-rsvp", project["id"]))

        self.client.force_authenticate(user=None)
        response = self.client.get(self.url("project-rsvps", project["id"]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data[0]["user"]["id"], self.volunteer.pk)

    def test_update_by_other_user_is_403(self):
        project = self.create_project()
        detail_url = self.url("project-detail", project["id"])

        self.client.force_authenticate(user=self.volunteer)
        response = self.client.patch(detail_url, {"title": "Mine now"}, format="json")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(Project.objects.get(pk=project["id"]).title, "Beach Cleanup")

    def test_update_by_organizer(self):
        project = self.create_project()
        detail_url = self.url("project-detail", project["id"])

        response = self.client.patch(detail_url, {"max_volunteers": 10}, format="json")

        self.assertEqual(response.status_code, 200, response.data)
        self.assertEqual(response.data["max_volunteers"], 10)
        self.assertEqual(response.data["title"], "Beach Cleanup")

    def test_update_rejects_zero_capacity(self):
        project = self.create_project()
        response = self.client.patch(
            self.url("project-detail", project["id"]), {"max_volunteers": 0}, format="json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("max_volunteers", response.data["errors"])

    def test_soft_delete_hides_from_list_but_detail_still_readable(self):
        project = self.create_project()
        detail_url = self.url("project-detail", project["id"])

        self.client.force_authenticate(user=self.volunteer)
        self.assertEqual(self.client.delete(detail_url).status_code, 403)

        self.client.force_authenticate(user=self.organizer)
        response = self.client.delete(detail_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "Project deleted successfully")

        self.assertEqual(self.client.get(self.list_url).data, [])

        detail = self.client.get(detail_url)
        self.assertEqual(detail.status_code, 200)
        self.assertFalse(detail.data["is_active"])

        # Inactive projects can no longer be joined or edited
        self.client.force_authenticate(user=self.volunteer)
        self.assertEqual(self.client.post(self.url("project-rsvp", project["id"])).status_code, 404)
        self.client.force_authenticate(user=self.organizer)
        self.assertEqual(self.client.patch(detail_url, {"title": "x"}, format="json").status_code, 404)

    def test_unknown_project_detail_is_404(self):
        response = self.client.get(self.url("project-detail", "00000000-0000-0000-0000-000000000000"))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "Project not found")


class ProjectMessagesAPITestCase(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.organizer = User.objects.create_user(id="chat-org", username="chat-org", first_name="Ravi")
        self.stranger = User.objects.create_user(id="chat-stranger", username="chat-stranger")
        self.project = Project.objects.create(
            title="Food Drive",
            description="Pack ration kits",
            category=Project.CATEGORY_FOOD_DISTRIBUTION,
            location="Dadar",
            date_time=timezone.now() + timezone.timedelta(days=1),
            organizer=self.organizer,
        )
        self.url = reverse("project-messages", kwargs={"project_id": self.project.pk})

    def test_post_and_read_history(self):
        self.client.force_authenticate(user=self.organizer)
        response = self.client.post(self.url, {"content": "Meet at gate 2"}, format="json")
        self.assertEqual(response.status_code, 201, response.data)
        self.assertEqual(response.data["sender"]["display_name"], "Ravi")

        # Posting is not limited to attendees
        self.client.force_authenticate(user=self.stranger)
        response = self.client.post(self.url, {"content": "Can I bring friends?"}, format="json")
        self.assertEqual(response.status_code, 201)

        self.client.force_authenticate(user=None)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [m["content"] for m in response.data],
            ["Meet at gate 2", "Can I bring friends?"],
        )

    def test_blank_message_is_400(self):
        self.client.force_authenticate(user=self.organizer)
        response = self.client.post(self.url, {"content": "   "}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("content", response.data["errors"])
        self.assertFalse(Message.objects.exists())

    def test_anonymous_post_is_401(self):
        response = self.client.post(self.url, {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_post_to_unknown_project_is_404(self):
        self.client.force_authenticate(user=self.organizer)
        url = reverse("project-messages", kwargs={"project_id": "00000000-0000-0000-0000-000000000000"})
        response = self.client.post(url, {"content": "hello?"}, format="json")
        self.assertEqual(response.status_code, 404)
