"""
Catalog URL Configuration

URL Structure (below /api/):
- courses/...                 : consumer endpoints (authenticated users)
- categories/                 : category list (authenticated users)
- admin/courses/...           : course and chapter management (administrator)
- admin/categories/...        : category management (administrator)

Author: Course Platform Team
Version: 1.0.0
"""

from typing import List

from django.urls import URLPattern, path

from . import views

app_name = "catalog"

course_patterns: List[URLPattern] = [
    path("courses/", views.CourseListView.as_view(), name="course-list"),
    path("courses/<str:course_id>/", views.CourseDetailView.as_view(), name="course-detail"),
    path(
        "courses/<str:course_id>/chapters/<str:chapter_id>/",
        views.ChapterViewerView.as_view(),
        name="chapter-viewer",
    ),
]

admin_course_patterns: List[URLPattern] = [
    path("admin/courses/", views.AdminCourseListView.as_view(), name="admin-course-list"),
    path(
        "admin/courses/<str:course_id>/",
        views.AdminCourseDetailView.as_view(),
        name="admin-course-detail",
    ),
    path(
        "admin/courses/<str:course_id>/title/",
        views.CourseTitleView.as_view(),
        name="admin-course-title",
    ),
    path(
        "admin/courses/<str:course_id>/description/",
        views.CourseDescriptionView.as_view(),
        name="admin-course-description",
    ),
    path(
        "admin/courses/<str:course_id>/thumbnail/",
        views.CourseThumbnailView.as_view(),
        name="admin-course-thumbnail",
    ),
    path(
        "admin/courses/<str:course_id>/category/",
        views.CourseCategoryView.as_view(),
        name="admin-course-category",
    ),
    path(
        "admin/courses/<str:course_id>/price/",
        views.CoursePriceView.as_view(),
        name="admin-course-price",
    ),
    path(
        "admin/courses/<str:course_id>/publish/",
        views.CoursePublishView.as_view(),
        name="admin-course-publish",
    ),
    path(
        "admin/courses/<str:course_id>/unpublish/",
        views.CourseUnpublishView.as_view(),
        name="admin-course-unpublish",
    ),
    path(
        "admin/courses/<str:course_id>/delete/",
        views.CourseSoftDeleteView.as_view(),
        name="admin-course-soft-delete",
    ),
]

admin_chapter_patterns: List[URLPattern] = [
    path(
        "admin/courses/<str:course_id>/chapters/",
        views.AdminChapterListView.as_view(),
        name="admin-chapter-list",
    ),
    # Must precede the <chapter_id> routes
    path(
        "admin/courses/<str:course_id>/chapters/reorder/",
        views.ChapterReorderView.as_view(),
        name="admin-chapter-reorder",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/",
        views.AdminChapterDetailView.as_view(),
        name="admin-chapter-detail",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/title/",
        views.ChapterTitleView.as_view(),
        name="admin-chapter-title",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/description/",
        views.ChapterDescriptionView.as_view(),
        name="admin-chapter-description",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/access/",
        views.ChapterAccessView.as_view(),
        name="admin-chapter-access",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/video/",
        views.ChapterVideoView.as_view(),
        name="admin-chapter-video",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/publish/",
        views.ChapterPublishView.as_view(),
        name="admin-chapter-publish",
    ),
    path(
        "admin/courses/<str:course_id>/chapters/<str:chapter_id>/unpublish/",
        views.ChapterUnpublishView.as_view(),
        name="admin-chapter-unpublish",
    ),
]

category_patterns: List[URLPattern] = [
    path("categories/", views.CategoryListView.as_view(), name="category-list"),
    path(
        "admin/categories/",
        views.AdminCategoryCreateView.as_view(),
        name="admin-category-create",
    ),
    path(
        "admin/categories/<str:category_id>/",
        views.AdminCategoryDetailView.as_view(),
        name="admin-category-detail",
    ),
]

urlpatterns: List[URLPattern] = (
    course_patterns + admin_course_patterns + admin_chapter_patterns + category_patterns
)
