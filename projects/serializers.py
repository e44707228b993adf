from rest_framework import serializers

from core.sanitizers import (
    sanitize_description,
    sanitize_phone,
    sanitize_text,
    sanitize_title,
)
from users.serializers import UserSummarySerializer
from .models import Message, Project, Rsvp


# -----------------------------------------
# PROJECT (write): create and partial update
# -----------------------------------------
class ProjectWriteSerializer(serializers.ModelSerializer):
    """
    Input schema for projects. organizer and is_active are not accepted
    from clients; the service sets them.
    """
    duration = serializers.IntegerField(min_value=1, max_value=24 * 30, required=False, allow_null=True)
    max_volunteers = serializers.IntegerField(min_value=1, max_value=100000, required=False, allow_null=True)

    class Meta:
        model = Project
        fields = [
            "title",
            "description",
            "category",
            "location",
            "latitude",
            "longitude",
            "date_time",
            "duration",
            "max_volunteers",
            "image_url",
            "requirements",
            "provided",
            "contact_person",
            "contact_phone",
        ]

    def _required_text(self, value, cleaned):
        if not cleaned:
            raise serializers.ValidationError("This field may not be blank.")
        return cleaned

    def validate_title(self, value):
        return self._required_text(value, sanitize_title(value))

    def validate_description(self, value):
        return self._required_text(value, sanitize_description(value))

    def validate_location(self, value):
        return self._required_text(value, sanitize_text(value, max_length=255))

    def validate_requirements(self, value):
        return sanitize_text(value, max_length=5000) if value is not None else None

    def validate_provided(self, value):
        return sanitize_text(value, max_length=5000) if value is not None else None

    def validate_contact_person(self, value):
        return sanitize_text(value, max_length=255) if value is not None else None

    def validate_contact_phone(self, value):
        return sanitize_phone(value) if value is not None else None

    def validate_latitude(self, value):
        if value is not None and not -90 <= value <= 90:
            raise serializers.ValidationError("Latitude must be between -90 and 90.")
        return value

    def validate_longitude(self, value):
        if value is not None and not -180 <= value <= 180:
            raise serializers.ValidationError("Longitude must be between -180 and 180.")
        return value


# -----------------------------------------
# PROJECT (read)
# -----------------------------------------
class ProjectSerializer(serializers.ModelSerializer):
    organizer_id = serializers.CharField(read_only=True)

    class Meta:
        model = Project
        fields = [
            "id",
            "title",
            "description",
            "category",
            "location",
            "latitude",
            "longitude",
            "date_time",
            "duration",
            "max_volunteers",
            "organizer_id",
            "image_url",
            "requirements",
            "provided",
            "contact_person",
            "contact_phone",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RsvpSerializer(serializers.ModelSerializer):
    project_id = serializers.UUIDField(read_only=True)
    user_id = serializers.CharField(read_only=True)

    class Meta:
        model = Rsvp
        fields = ["id", "project_id", "user_id", "status", "created_at"]


class RsvpWithUserSerializer(RsvpSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta(RsvpSerializer.Meta):
        fields = RsvpSerializer.Meta.fields + ["user"]


class RsvpWithProjectSerializer(RsvpSerializer):
    project = ProjectSerializer(read_only=True)

    class Meta(RsvpSerializer.Meta):
        fields = RsvpSerializer.Meta.fields + ["project"]


class ProjectDetailSerializer(ProjectSerializer):
    """
    With-details view: organizer, attendee list and attendee count.
    Expects instances from storage.list_projects / get_project_details.
    """
    organizer = UserSummarySerializer(read_only=True)
    rsvps = RsvpWithUserSerializer(many=True, read_only=True)
    rsvp_count = serializers.IntegerField(read_only=True)
    spots_left = serializers.SerializerMethodField()

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ["organizer", "rsvps", "rsvp_count", "spots_left"]
        read_only_fields = fields

    def get_spots_left(self, obj):
        if obj.max_volunteers is None:
            return None
        return max(0, obj.max_volunteers - obj.rsvp_count)


class MessageSerializer(serializers.ModelSerializer):
    project_id = serializers.UUIDField(read_only=True)
    sender_id = serializers.CharField(read_only=True)
    sender = UserSummarySerializer(read_only=True)

    class Meta:
        model = Message
        fields = ["id", "project_id", "sender_id", "sender", "content", "created_at"]
