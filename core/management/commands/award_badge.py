from django.core.management.base import BaseCommand, CommandError

from core.storage import storage


class Command(BaseCommand):
    help = "Awards a badge to a user (badges are append-only; repeats are allowed)"

    def add_arguments(self, parser):
        parser.add_argument("user_id")
        parser.add_argument("badge_type", help="Machine name, e.g. first_project")
        parser.add_argument("badge_name", help="Display name, e.g. 'First Project'")

    def handle(self, *args, **options):
        user_id = options["user_id"]
        if storage.get_user(user_id) is None:
            raise CommandError(f"User {user_id} does not exist")

        badge = storage.award_badge(user_id, options["badge_type"], options["badge_name"])
        self.stdout.write(self.style.SUCCESS(f"Awarded '{badge.badge_name}' to {user_id}"))
