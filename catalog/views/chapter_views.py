"""
Chapter Views

Administrator endpoints for the chapters of a course, plus the consumer
endpoint that resolves a chapter's playback id against the user's purchases.

Author: Course Platform Team
Version: 1.0.0
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.identity import resolve_user_id
from core.permissions import IsAuthenticatedUser, IsPlatformAdmin

from ..serializers import (
    ChapterAccessSerializer,
    ChapterReorderSerializer,
    ChapterSerializer,
    ChapterVideoSerializer,
    DescriptionSerializer,
    PublicChapterSerializer,
    TitleSerializer,
)
from ..services import ChapterService, PublicationService, VideoAssetService


class AdminChapterListView(APIView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request, course_id):
        chapters = ChapterService().list_chapters(course_id)
        return Response(ChapterSerializer(chapters, many=True).data)

    def post(self, request, course_id):
        serializer = TitleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        chapter = ChapterService().register_chapter(
            course_id, serializer.validated_data["title"]
        )
        return Response(ChapterSerializer(chapter).data, status=status.HTTP_201_CREATED)


class ChapterReorderView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id):
        serializer = ChapterReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = ChapterService()
        service.reorder_chapters(course_id, serializer.validated_data["list"])
        chapters = service.list_chapters(course_id)
        return Response(ChapterSerializer(chapters, many=True).data)


class AdminChapterDetailView(APIView):
    permission_classes = [IsPlatformAdmin]

    def delete(self, request, course_id, chapter_id):
        chapter = PublicationService().delete_chapter(course_id, chapter_id)
        return Response(PublicChapterSerializer(chapter).data)


class ChapterFieldUpdateView(APIView):
    """Base view for single-field chapter edits."""

    permission_classes = [IsPlatformAdmin]
    serializer_class = None

    def put(self, request, course_id, chapter_id):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        chapter = ChapterService().update_chapter(
            course_id, chapter_id, serializer.validated_data
        )
        return Response(ChapterSerializer(chapter).data)


class ChapterTitleView(ChapterFieldUpdateView):
    serializer_class = TitleSerializer


class ChapterDescriptionView(ChapterFieldUpdateView):
    serializer_class = DescriptionSerializer


class ChapterAccessView(ChapterFieldUpdateView):
    serializer_class = ChapterAccessSerializer


class ChapterVideoView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id, chapter_id):
        serializer = ChapterVideoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        chapter = VideoAssetService().set_chapter_video(
            course_id, chapter_id, serializer.validated_data["video_url"]
        )
        return Response(ChapterSerializer(chapter).data)


class ChapterPublishView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id, chapter_id):
        chapter = PublicationService().publish_chapter(course_id, chapter_id)
        return Response(ChapterSerializer(chapter).data)


class ChapterUnpublishView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id, chapter_id):
        chapter = PublicationService().unpublish_chapter(course_id, chapter_id)
        return Response(ChapterSerializer(chapter).data)


# --- Consumer View ---


class ChapterViewerView(APIView):
    """
    GET /api/courses/<course_id>/chapters/<chapter_id>/

    Response:
    {
        "chapter": {"id": "...", "title": "...", "description": "...",
                    "position": 1, "free_flag": false},
        "purchased": false,
        "playback_id": null
    }

    `playback_id` is only set for free chapters or purchased courses.
    """

    permission_classes = [IsAuthenticatedUser]

    def get(self, request, course_id, chapter_id):
        access = ChapterService().get_chapter_for_viewer(
            course_id, chapter_id, resolve_user_id(request)
        )
        return Response(
            {
                "chapter": PublicChapterSerializer(access.chapter).data,
                "purchased": access.purchased,
                "playback_id": access.playback_id,
            }
        )
