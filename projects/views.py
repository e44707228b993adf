from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework import status

from core.errors import NotFound
from core.storage import storage
from .serializers import (
    MessageSerializer,
    ProjectDetailSerializer,
    ProjectSerializer,
    RsvpSerializer,
    RsvpWithUserSerializer,
)
from .services import MessageService, ProjectService
from .throttles import WriteScopedRateThrottle


class ProjectListCreateView(APIView):
    """
    GET  /api/projects/?category=&search=&userId=&sort=
    POST /api/projects/
    """
    permission_classes = [IsAuthenticatedOrReadOnly]
    throttle_classes = [WriteScopedRateThrottle]
    throttle_scope = "project-create"

    def get(self, request):
        params = request.query_params
        projects = storage.list_projects(
            category=params.get("category"),
            search=params.get("search", "").strip() or None,
            organizer_id=params.get("userId") or params.get("user_id"),
            sort=params.get("sort"),
        )
        return Response(ProjectDetailSerializer(projects, many=True).data)

    def post(self, request):
        project = ProjectService.create(request.data, organizer_id=request.user.pk)
        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailView(APIView):
    """
    GET    /api/projects/<id>/   (soft-deleted projects stay readable here)
    PATCH  /api/projects/<id>/   organizer only
    DELETE /api/projects/<id>/   organizer only, soft delete
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, project_id):
        project = storage.get_project_details(project_id)
        if project is None:
            raise NotFound("Project not found")
        return Response(ProjectDetailSerializer(project).data)

    def patch(self, request, project_id):
        project = ProjectService.update(project_id, request.data, caller_id=request.user.pk)
        return Response(ProjectSerializer(project).data)

    def delete(self, request, project_id):
        ProjectService.delete(project_id, caller_id=request.user.pk)
        return Response({"message": "Project deleted successfully"})


class ProjectRsvpView(APIView):
    """
    POST   /api/projects/<id>/rsvp/   join
    DELETE /api/projects/<id>/rsvp/   cancel (always succeeds)
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, project_id):
        rsvp = ProjectService.join(project_id, request.user.pk)
        return Response(RsvpSerializer(rsvp).data, status=status.HTTP_201_CREATED)

    def delete(self, request, project_id):
        ProjectService.cancel(project_id, request.user.pk)
        return Response({"message": "RSVP cancelled successfully"})


class ProjectRsvpListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, project_id):
        rsvps = storage.list_project_rsvps(project_id)
        return Response(RsvpWithUserSerializer(rsvps, many=True).data)


class ProjectMessagesView(APIView):
    """
    GET  /api/projects/<id>/messages/   full history, oldest first
    POST /api/projects/<id>/messages/   body: {"content": "..."}
    """
    permission_classes = [IsAuthenticatedOrReadOnly]
    throttle_classes = [WriteScopedRateThrottle]
    throttle_scope = "message-post"

    def get(self, request, project_id):
        messages = MessageService.list(project_id)
        return Response(MessageSerializer(messages, many=True).data)

    def post(self, request, project_id):
        message = MessageService.post(project_id, request.user.pk, request.data.get("content"))
        message.sender = request.user
        return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)
