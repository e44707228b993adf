from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)
    related_project_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Notification
        fields = [
            'id',
            'user_id',
            'type',
            'title',
            'message',
            'is_read',
            'related_project_id',
            'created_at',
        ]
