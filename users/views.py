# users/views.py - caller-scoped profile API

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from core.errors import NotFound
from core.storage import storage
from gamification.serializers import UserBadgeSerializer
from projects.serializers import ProjectSerializer, RsvpWithProjectSerializer
from .serializers import UpdateProfileSerializer, UserWithStatsSerializer


def _profile_response(user_id):
    user = storage.get_user_with_stats(user_id)
    if user is None:
        raise NotFound("User not found")
    return Response(UserWithStatsSerializer(user).data)


class CurrentUserView(APIView):
    """
    GET /api/auth/user/
    Signed-in user with counts and badges.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return _profile_response(request.user.pk)


class ProfileView(APIView):
    """
    GET   /api/user/profile/   caller's profile, counts and badges
    PATCH /api/user/profile/   edit first/last name, bio, location, avatar
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return _profile_response(request.user.pk)

    def patch(self, request):
        serializer = UpdateProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        storage.update_user(request.user.pk, serializer.validated_data)
        return _profile_response(request.user.pk)


class MyBadgesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        badges = storage.list_user_badges(request.user.pk)
        return Response(UserBadgeSerializer(badges, many=True).data)


class MyRsvpsView(APIView):
    """
    GET /api/user/rsvps/
    RSVP history, newest first, each with its project.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        rsvps = storage.list_user_rsvps(request.user.pk)
        return Response(RsvpWithProjectSerializer(rsvps, many=True).data)


class MyProjectsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        projects = storage.get_user_projects(request.user.pk)
        return Response(ProjectSerializer(projects, many=True).data)
