from rest_framework import serializers
from .models import UserBadge


class UserBadgeSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)

    class Meta:
        model = UserBadge
        fields = ['id', 'user_id', 'badge_type', 'badge_name', 'earned_at']
