"""
Course Views

Endpoints for browsing published courses and for the administrator's course
management (registration, field edits, publication transitions, deletion).

Consumers:
- GET  /api/courses/                      - published, non-deleted courses
- GET  /api/courses/<id>/                 - course with its published chapters

Administrator:
- GET/POST   /api/admin/courses/
- GET/DELETE /api/admin/courses/<id>/     - DELETE removes the course for good
- PUT        /api/admin/courses/<id>/{title,description,thumbnail,category,price}/
- PUT        /api/admin/courses/<id>/{publish,unpublish,delete}/

Author: Course Platform Team
Version: 1.0.0
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.identity import resolve_user_id
from core.permissions import IsAuthenticatedUser, IsPlatformAdmin

from ..serializers import (
    CourseCategorySerializer,
    CourseDetailSerializer,
    CourseSerializer,
    DescriptionSerializer,
    PriceSerializer,
    PublicCourseDetailSerializer,
    PublicCourseSerializer,
    ThumbnailSerializer,
    TitleSerializer,
)
from ..services import CourseService, PublicationService

# --- Consumer Views ---


class CourseListView(APIView):
    permission_classes = [IsAuthenticatedUser]

    def get(self, request):
        courses = CourseService().list_visible_courses()
        return Response(PublicCourseSerializer(courses, many=True).data)


class CourseDetailView(APIView):
    permission_classes = [IsAuthenticatedUser]

    def get(self, request, course_id):
        course = CourseService().get_visible_course(course_id)
        return Response(PublicCourseDetailSerializer(course).data)


# --- Administrator Views ---


class AdminCourseListView(APIView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        courses = CourseService().list_courses_for_admin()
        return Response(CourseSerializer(courses, many=True).data)

    def post(self, request):
        serializer = TitleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = CourseService().register_course(
            serializer.validated_data["title"], resolve_user_id(request)
        )
        return Response(CourseSerializer(course).data, status=status.HTTP_201_CREATED)


class AdminCourseDetailView(APIView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request, course_id):
        course = CourseService().get_course_for_admin(course_id)
        return Response(CourseDetailSerializer(course).data)

    def delete(self, request, course_id):
        course = PublicationService().hard_delete_course(course_id)
        return Response(CourseSerializer(course).data)


class CourseFieldUpdateView(APIView):
    """
    Base view for single-field course edits.

    Subclasses set `serializer_class`; its validated data is passed to
    CourseService.update_course unchanged.
    """

    permission_classes = [IsPlatformAdmin]
    serializer_class = None

    def put(self, request, course_id):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = CourseService().update_course(course_id, serializer.validated_data)
        return Response(CourseSerializer(course).data)


class CourseTitleView(CourseFieldUpdateView):
    serializer_class = TitleSerializer


class CourseDescriptionView(CourseFieldUpdateView):
    serializer_class = DescriptionSerializer


class CourseThumbnailView(CourseFieldUpdateView):
    serializer_class = ThumbnailSerializer


class CourseCategoryView(CourseFieldUpdateView):
    serializer_class = CourseCategorySerializer


class CoursePriceView(CourseFieldUpdateView):
    serializer_class = PriceSerializer


class CoursePublishView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id):
        course = PublicationService().publish_course(course_id)
        return Response(CourseSerializer(course).data)


class CourseUnpublishView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id):
        course = PublicationService().unpublish_course(course_id)
        return Response(CourseSerializer(course).data)


class CourseSoftDeleteView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, course_id):
        course = PublicationService().soft_delete_course(course_id)
        return Response(CourseSerializer(course).data)
