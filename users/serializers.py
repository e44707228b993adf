from rest_framework import serializers

from core.sanitizers import sanitize_text
from gamification.serializers import UserBadgeSerializer
from .models import User


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Identity block embedded in projects, RSVPs and messages.
    """
    class Meta:
        model = User
        fields = [
            'id',
            'first_name',
            'last_name',
            'display_name',
            'profile_image_url',
        ]


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'first_name',
            'last_name',
            'display_name',
            'bio',
            'location',
            'profile_image_url',
            'created_at',
            'updated_at',
        ]


class UpdateProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['first_name', 'last_name', 'bio', 'location', 'profile_image_url']

    def validate_first_name(self, value):
        return sanitize_text(value, max_length=150)

    def validate_last_name(self, value):
        return sanitize_text(value, max_length=150)

    def validate_bio(self, value):
        return sanitize_text(value, max_length=2000)

    def validate_location(self, value):
        return sanitize_text(value, max_length=255)


class UserWithStatsSerializer(UserSerializer):
    """
    Expects the annotated instance returned by storage.get_user_with_stats.
    """
    counts = serializers.SerializerMethodField()
    badges = UserBadgeSerializer(source='badge_list', many=True, read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['counts', 'badges']

    def get_counts(self, obj):
        return {
            'organized_projects': obj.organized_projects_count,
            'rsvps': obj.rsvps_count,
            'badges': obj.badges_count,
        }
