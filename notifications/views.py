from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from core.storage import storage
from .serializers import NotificationSerializer


class MyNotificationsView(APIView):
    """
    GET /api/notifications/
    GET /api/notifications/?unread=true
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        unread_only = request.query_params.get("unread", "")
        notifications = storage.list_notifications(
            request.user.pk,
            unread_only=unread_only.lower() in ("1", "true", "yes"),
        )
        serializer = NotificationSerializer(notifications, many=True)
        return Response(serializer.data)


class MarkNotificationReadView(APIView):
    """
    PATCH /api/notifications/<id>/read/

    Idempotent: already-read, missing or someone else's notification
    all answer 200 without changing anything.
    """
    permission_classes = [IsAuthenticated]

    def patch(self, request, notification_id):
        storage.mark_notification_read(notification_id, user_id=request.user.pk)
        return Response({"message": "Notification marked as read"})
