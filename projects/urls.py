from django.urls import path
from .views import (
    ProjectListCreateView,
    ProjectDetailView,
    ProjectRsvpView,
    ProjectRsvpListView,
    ProjectMessagesView,
)

urlpatterns = [
    path("", ProjectListCreateView.as_view(), name="project-list-create"),
    path("<uuid:project_id>/", ProjectDetailView.as_view(), name="project-detail"),
    path("<uuid:project_id>/rsvp/", ProjectRsvpView.as_view(), name="project-rsvp"),
    path("<uuid:project_id>/rsvps/", ProjectRsvpListView.as_view(), name="project-rsvps"),
    path("<uuid:project_id>/messages/", ProjectMessagesView.as_view(), name="project-messages"),
]
