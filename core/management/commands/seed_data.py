from django.core.management.base import BaseCommand
from django.utils import timezone

from core.storage import storage
from projects.models import Project
from projects.services import ProjectService


class Command(BaseCommand):
    help = "Seeds the database with sample volunteers, projects, RSVPs and badges"

    def handle(self, *args, **options):
        self.stdout.write("🌱 Seeding data...")

        # 1. Ensure Users
        asha = storage.upsert_user({
            "id": "seed-asha",
            "email": "asha@example.com",
            "first_name": "Asha",
            "last_name": "Verma",
            "location": "Pune",
        })
        ravi = storage.upsert_user({
            "id": "seed-ravi",
            "email": "ravi@example.com",
            "first_name": "Ravi",
            "last_name": "Iyer",
            "location": "Mumbai",
        })
        meera = storage.upsert_user({
            "id": "seed-meera",
            "email": "meera@example.com",
            "first_name": "Meera",
            "last_name": "Shah",
            "location": "Pune",
        })

        # 2. Projects (skip titles that already exist so reruns stay clean)
        projects_data = [
            {
                "title": "Beach Cleanup Drive",
                "description": "Help clear plastic and debris from the shoreline before monsoon.",
                "category": Project.CATEGORY_CLEANUP,
                "location": "Juhu Beach, Mumbai",
                "date_time": timezone.now() + timezone.timedelta(days=3),
                "duration": 3,
                "max_volunteers": 25,
                "requirements": "Gloves, water bottle, hat",
                "provided": "Trash bags, snacks",
            },
            {
                "title": "Neighbourhood Tree Planting",
                "description": "Plant native saplings along the river walk.",
                "category": Project.CATEGORY_TREE_PLANTING,
                "location": "Mula River Walk, Pune",
                "date_time": timezone.now() + timezone.timedelta(days=7),
                "duration": 4,
                "max_volunteers": 15,
            },
            {
                "title": "Weekend Reading Circle",
                "description": "Read with children at the community library.",
                "category": Project.CATEGORY_EDUCATION,
                "location": "Kothrud Public Library, Pune",
                "date_time": timezone.now() + timezone.timedelta(days=5),
                "duration": 2,
            },
        ]

        organizers = [asha, ravi, asha]
        created = []
        for organizer, data in zip(organizers, projects_data):
            if Project.objects.filter(title=data["title"], is_active=True).exists():
                self.stdout.write(f"Project exists: {data['title']}")
                continue
            project = ProjectService.create(data, organizer_id=organizer.pk)
            created.append(project)
            self.stdout.write(f"Created project: {project.title}")

        # 3. RSVPs
        for project in created:
            for volunteer in (ravi, meera):
                if volunteer.pk == project.organizer_id:
                    continue
                ProjectService.join(project.id, volunteer.pk)

        # 4. Badges
        if not storage.list_user_badges(asha.pk):
            storage.award_badge(asha.pk, "first_project", "First Project")
        if not storage.list_user_badges(meera.pk):
            storage.award_badge(meera.pk, "first_rsvp", "First Volunteer Shift")

        self.stdout.write(self.style.SUCCESS("✅ Seed complete."))
