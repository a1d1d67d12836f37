from __future__ import annotations

from django.http import HttpResponse
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView

SERVER_RUNNING_TEXT = "Server is running"
PROJECTS_ACK_MESSAGE = "Projects route is working!"


def home(request):
    return HttpResponse(SERVER_RUNNING_TEXT, content_type="text/plain")


class ProjectsView(APIView):
    """Static acknowledgement for the projects route."""

    @extend_schema(
        responses=inline_serializer(
            name="ProjectsAck",
            fields={"message": serializers.CharField()},
        ),
    )
    def get(self, request):
        return Response({"message": PROJECTS_ACK_MESSAGE})
