# core/storage.py
"""
Data access layer.

Every read and write the services need goes through ``storage``. Methods
return model instances (or lists of them) with the related rows the API
renders already attached; derived counts are annotated on each call and
never cached. ORM failures surface as ``StoreError`` /
``ConstraintViolation`` so callers never see driver exceptions.
"""
import functools
import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, Prefetch, Q
from django.utils import timezone

from core.errors import ConstraintViolation, NotFound, StoreError, ValidationError
from gamification.models import UserBadge
from notifications.models import Notification
from projects.models import Message, Project, Rsvp

logger = logging.getLogger("shramdaan.storage")

User = get_user_model()

USER_MUTABLE_FIELDS = ("email", "first_name", "last_name", "bio", "location", "profile_image_url")

# Owned by the identity provider; every other profile field is user-editable
IDENTITY_OWNED_FIELDS = ("email",)

PROJECT_SORTS = {
    "newest": ("-created_at",),
    "date": ("date_time", "-created_at"),
    "popular": ("-rsvp_count", "-created_at"),
}


def _db_call(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError as exc:
            logger.warning(f"{func.__name__}: constraint violation: {exc}")
            raise ConstraintViolation(str(exc)) from exc
        except DatabaseError as exc:
            logger.error(f"{func.__name__}: database error: {exc}")
            raise StoreError(str(exc)) from exc
    return wrapper


def _db_write(func):
    """
    Like _db_call, but the write runs in its own savepoint so a failed
    insert does not poison an enclosing transaction.
    """
    @functools.wraps(func)
    def atomic_func(*args, **kwargs):
        with transaction.atomic():
            return func(*args, **kwargs)
    return _db_call(atomic_func)


def _projects_with_details():
    return (
        Project.objects
        .select_related("organizer")
        .annotate(rsvp_count=Count("rsvps", distinct=True))
        .prefetch_related(
            Prefetch(
                "rsvps",
                queryset=Rsvp.objects.select_related("user").order_by("created_at"),
            )
        )
    )


class DatabaseStorage:

    # ----------------------------------------------------------------
    # Users
    # ----------------------------------------------------------------
    @_db_call
    def get_user(self, user_id):
        return User.objects.filter(pk=user_id).first()

    @_db_write
    def upsert_user(self, identity):
        """
        Insert the user, or overwrite the supplied profile fields of an
        existing row with the same id. Repeating the call with the same
        identity leaves the row as it was (apart from updated_at).
        """
        user_id = identity["id"]
        fields = {key: identity[key] for key in USER_MUTABLE_FIELDS if key in identity}

        user, created = User.objects.select_for_update().get_or_create(
            pk=user_id,
            defaults={"username": identity.get("username") or str(user_id)[:150], **fields},
        )
        if created:
            logger.info(f"User created on first sign-in: {user_id}")
            return user

        for key, value in fields.items():
            setattr(user, key, value)
        # auto_now bumps updated_at even when nothing else changed
        user.save(update_fields=[*fields.keys(), "updated_at"])
        return user

    @_db_write
    def sync_identity(self, identity):
        """
        Sign-in path. A new id is inserted as in upsert_user. For an existing
        row, provider-owned fields follow the claims, and the other profile
        fields are only filled while still empty so edits made through the
        profile API stay. Nothing is written when nothing changed.
        """
        user = User.objects.select_for_update().filter(pk=identity["id"]).first()
        if user is None:
            return self.upsert_user(identity)

        changed = []
        for key in USER_MUTABLE_FIELDS:
            value = identity.get(key)
            if not value:
                continue
            current = getattr(user, key)
            if current == value:
                continue
            if key in IDENTITY_OWNED_FIELDS or not current:
                setattr(user, key, value)
                changed.append(key)

        if changed:
            user.save(update_fields=[*changed, "updated_at"])
        return user

    @_db_write
    def update_user(self, user_id, updates):
        user = User.objects.select_for_update().filter(pk=user_id).first()
        if user is None:
            raise NotFound("User not found")
        fields = {key: value for key, value in updates.items() if key in USER_MUTABLE_FIELDS}
        for key, value in fields.items():
            setattr(user, key, value)
        user.save(update_fields=[*fields.keys(), "updated_at"])
        return user

    @_db_call
    def get_user_with_stats(self, user_id):
        """
        User plus organized_projects_count / rsvps_count / badges_count
        annotations and ``badge_list`` (newest first), or None.
        """
        return (
            User.objects
            .filter(pk=user_id)
            .annotate(
                organized_projects_count=Count("organized_projects", distinct=True),
                rsvps_count=Count("rsvps", distinct=True),
                badges_count=Count("badges", distinct=True),
            )
            .prefetch_related(
                Prefetch(
                    "badges",
                    queryset=UserBadge.objects.order_by("-earned_at"),
                    to_attr="badge_list",
                )
            )
            .first()
        )

    # ----------------------------------------------------------------
    # Projects
    # ----------------------------------------------------------------
    @_db_call
    def list_projects(self, category=None, search=None, organizer_id=None, sort=None):
        qs = _projects_with_details().filter(is_active=True)

        if category and category != Project.CATEGORY_ALL:
            qs = qs.filter(category=category)

        if search:
            qs = qs.filter(
                Q(title__icontains=search)
                | Q(description__icontains=search)
                | Q(location__icontains=search)
            )

        if organizer_id:
            qs = qs.filter(organizer_id=organizer_id)

        ordering = PROJECT_SORTS.get(sort or "newest", PROJECT_SORTS["newest"])
        return list(qs.order_by(*ordering))

    @_db_call
    def get_project_details(self, project_id):
        # Inactive projects are still returned; callers decide what to hide
        return _projects_with_details().filter(pk=project_id).first()

    @_db_call
    def get_project(self, project_id):
        return Project.objects.filter(pk=project_id).first()

    @_db_call
    def lock_project(self, project_id):
        """
        Fetch the project with a row lock. Only meaningful inside an
        enclosing transaction.atomic() block.
        """
        return Project.objects.select_for_update().filter(pk=project_id).first()

    @_db_call
    def get_user_projects(self, user_id):
        return list(
            Project.objects
            .filter(organizer_id=user_id, is_active=True)
            .order_by("-created_at")
        )

    @_db_write
    def create_project(self, data):
        return Project.objects.create(**data)

    @_db_write
    def update_project(self, project_id, updates):
        project = Project.objects.select_for_update().filter(pk=project_id).first()
        if project is None:
            raise NotFound("Project not found")

        for key, value in updates.items():
            setattr(project, key, value)
        project.save()
        return project

    @_db_write
    def soft_delete_project(self, project_id):
        Project.objects.filter(pk=project_id).update(is_active=False, updated_at=timezone.now())

    # ----------------------------------------------------------------
    # RSVPs
    # ----------------------------------------------------------------
    @_db_call
    def get_rsvp(self, project_id, user_id):
        return Rsvp.objects.filter(project_id=project_id, user_id=user_id).first()

    @_db_call
    def count_confirmed_rsvps(self, project_id):
        return Rsvp.objects.filter(project_id=project_id, status=Rsvp.STATUS_CONFIRMED).count()

    @_db_write
    def create_rsvp(self, project_id, user_id):
        # Capacity and duplicate rules belong to the caller
        return Rsvp.objects.create(project_id=project_id, user_id=user_id)

    @_db_write
    def delete_rsvp(self, project_id, user_id):
        deleted, _ = Rsvp.objects.filter(project_id=project_id, user_id=user_id).delete()
        return deleted

    @_db_call
    def list_project_rsvps(self, project_id):
        return list(
            Rsvp.objects
            .filter(project_id=project_id)
            .select_related("user")
            .order_by("created_at")
        )

    @_db_call
    def list_user_rsvps(self, user_id):
        return list(
            Rsvp.objects
            .filter(user_id=user_id)
            .select_related("project", "project__organizer")
            .order_by("-created_at")
        )

    # ----------------------------------------------------------------
    # Messages
    # ----------------------------------------------------------------
    @_db_call
    def list_messages(self, project_id):
        return list(
            Message.objects
            .filter(project_id=project_id)
            .select_related("sender")
            .order_by("created_at")
        )

    @_db_write
    def create_message(self, project_id, sender_id, content):
        if not content:
            raise ValidationError(errors={"content": ["Message content cannot be empty."]})
        return Message.objects.create(project_id=project_id, sender_id=sender_id, content=content)

    # ----------------------------------------------------------------
    # Notifications
    # ----------------------------------------------------------------
    @_db_call
    def list_notifications(self, user_id, unread_only=False):
        qs = Notification.objects.filter(user_id=user_id)
        if unread_only:
            qs = qs.filter(is_read=False)
        return list(qs.order_by("-created_at"))

    @_db_write
    def create_notification(self, user_id, title, message, type, related_project_id=None):
        return Notification.objects.create(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            related_project_id=related_project_id,
        )

    @_db_write
    def mark_notification_read(self, notification_id, user_id=None):
        """
        Idempotent. When user_id is given, other users' notifications are
        treated as absent.
        """
        qs = Notification.objects.filter(pk=notification_id, is_read=False)
        if user_id is not None:
            qs = qs.filter(user_id=user_id)
        return qs.update(is_read=True)

    # ----------------------------------------------------------------
    # Badges
    # ----------------------------------------------------------------
    @_db_call
    def list_user_badges(self, user_id):
        return list(UserBadge.objects.filter(user_id=user_id).order_by("-earned_at"))

    @_db_write
    def award_badge(self, user_id, badge_type, badge_name):
        return UserBadge.objects.create(user_id=user_id, badge_type=badge_type, badge_name=badge_name)


storage = DatabaseStorage()
