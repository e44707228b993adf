from django.urls import path
from .views import MyNotificationsView, MarkNotificationReadView

urlpatterns = [
    path("", MyNotificationsView.as_view(), name="notification-list"),
    path("<uuid:notification_id>/read/", MarkNotificationReadView.as_view(), name="notification-read"),
]
