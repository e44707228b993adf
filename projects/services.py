# projects/services.py
"""
Project / RSVP lifecycle and project chat.

Views call these and let the exception handler turn the typed errors
into responses. Storage access always goes through core.storage.
"""
import logging

from django.db import transaction

from core.errors import (
    CapacityExceeded,
    Conflict,
    ConstraintViolation,
    Forbidden,
    NotFound,
    StoreError,
    ValidationError,
)
from core.sanitizers import sanitize_text
from core.storage import storage
from notifications.models import Notification
from projects.serializers import ProjectWriteSerializer

logger = logging.getLogger("shramdaan.projects")

MAX_MESSAGE_LENGTH = 4000


def _validated(serializer):
    if not serializer.is_valid():
        raise ValidationError(errors=serializer.errors)
    return serializer.validated_data


class ProjectService:

    @staticmethod
    def create(data, organizer_id):
        """
        Validate a full project payload and persist it with the caller as
        organizer. Client-supplied organizer / is_active values are ignored.
        """
        validated = dict(_validated(ProjectWriteSerializer(data=data)))
        validated["organizer_id"] = organizer_id
        validated["is_active"] = True

        project = storage.create_project(validated)
        logger.info(f"Project created: id={project.id}, organizer={organizer_id}")
        return project

    @classmethod
    def update(cls, project_id, updates, caller_id):
        project = storage.get_project(project_id)
        if project is None or not project.is_active:
            raise NotFound("Project not found")
        if project.organizer_id != caller_id:
            raise Forbidden("Only the organizer can edit this project.")

        validated = dict(_validated(ProjectWriteSerializer(project, data=updates, partial=True)))
        updated = storage.update_project(project_id, validated)

        if validated:
            cls._notify_attendees_of_update(updated)
        return updated

    @staticmethod
    def delete(project_id, caller_id):
        project = storage.get_project(project_id)
        if project is None:
            raise NotFound("Project not found")
        if project.organizer_id != caller_id:
            raise Forbidden("Only the organizer can delete this project.")

        storage.soft_delete_project(project_id)
        logger.info(f"Project soft-deleted: id={project_id}, by={caller_id}")

    @classmethod
    def join(cls, project_id, user_id):
        """
        RSVP user_id to the project.

        Duplicate and capacity checks run under a row lock on the project
        inside the same transaction as the insert, and the unique
        (project, user) constraint backs up the duplicate check.
        """
        with transaction.atomic():
            project = storage.lock_project(project_id)
            if project is None or not project.is_active:
                raise NotFound("Project not found")

            if storage.get_rsvp(project_id, user_id) is not None:
                raise Conflict()

            if project.max_volunteers is not None:
                confirmed = storage.count_confirmed_rsvps(project_id)
                if confirmed >= project.max_volunteers:
                    logger.warning(
                        f"RSVP rejected: project {project_id} is full "
                        f"({confirmed}/{project.max_volunteers})"
                    )
                    raise CapacityExceeded()

            try:
                rsvp = storage.create_rsvp(project_id, user_id)
            except ConstraintViolation as exc:
                raise Conflict() from exc

        logger.info(f"RSVP created: user={user_id}, project={project_id}")

        cls._notify_organizer_of_rsvp(project, user_id)
        return rsvp

    @staticmethod
    def cancel(project_id, user_id):
        deleted = storage.delete_rsvp(project_id, user_id)
        if deleted:
            logger.info(f"RSVP cancelled: user={user_id}, project={project_id}")

    # ----------------------------------------------------------------
    # Best-effort side effects: failures are logged, never raised
    # ----------------------------------------------------------------
    @staticmethod
    def _notify_organizer_of_rsvp(project, user_id):
        try:
            volunteer = storage.get_user(user_id)
            who = volunteer.display_name if volunteer else "Someone"
            storage.create_notification(
                user_id=project.organizer_id,
                title="New Volunteer Joined",
                message=f"{who} joined your project: {project.title}",
                type=Notification.TYPE_RSVP_CONFIRMATION,
                related_project_id=project.id,
            )
        except StoreError as e:
            logger.warning(f"Failed to notify organizer for project {project.id}: {e}")

    @staticmethod
    def _notify_attendees_of_update(project):
        try:
            attendees = storage.list_project_rsvps(project.id)
        except StoreError as e:
            logger.warning(f"Failed to load attendees for project {project.id}: {e}")
            return

        for rsvp in attendees:
            if rsvp.user_id == project.organizer_id:
                continue
            try:
                storage.create_notification(
                    user_id=rsvp.user_id,
                    title="Project Updated",
                    message=f"Details changed for {project.title}",
                    type=Notification.TYPE_PROJECT_UPDATE,
                    related_project_id=project.id,
                )
            except StoreError as e:
                logger.warning(f"Failed to notify {rsvp.user_id} of update to {project.id}: {e}")


class MessageService:

    @staticmethod
    def post(project_id, sender_id, content):
        """
        Any signed-in user may post to any existing project's chat.
        """
        if not isinstance(content, str):
            raise ValidationError(errors={"content": ["This field is required."]})

        content = sanitize_text(content, max_length=MAX_MESSAGE_LENGTH)
        if not content:
            raise ValidationError(errors={"content": ["Message content cannot be empty."]})

        if storage.get_project(project_id) is None:
            raise NotFound("Project not found")

        return storage.create_message(project_id, sender_id, content)

    @staticmethod
    def list(project_id):
        return storage.list_messages(project_id)
