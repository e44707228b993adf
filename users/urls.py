# users/urls.py

from django.urls import path
from .views import ProfileView, MyBadgesView, MyRsvpsView, MyProjectsView

urlpatterns = [
    path("profile/", ProfileView.as_view(), name="user-profile"),
    path("badges/", MyBadgesView.as_view(), name="user-badges"),
    path("rsvps/", MyRsvpsView.as_view(), name="user-rsvps"),
    path("projects/", MyProjectsView.as_view(), name="user-projects"),
]
