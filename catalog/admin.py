"""
Catalog Django Admin Configuration

Django admin (jazzmin theme) registrations for the catalog models. The admin
is a read-mostly support tool: publication flags are shown but should be
changed through the API so the publication rules are applied.

Author: Course Platform Team
Version: 1.0.0
"""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .models import Category, Chapter, Course, VideoAsset


class ChapterInline(admin.TabularInline):
    """Inline admin for course chapter overview."""

    model = Chapter
    extra = 0
    fields = ("title", "position", "free_flag", "publish_flag")
    readonly_fields = ("publish_flag",)
    ordering = ("position",)
    show_change_link = True


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "id")
    search_fields = ("name",)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    """Administration interface for courses."""

    list_display = (
        "title",
        "category",
        "price",
        "publish_flag",
        "delete_flag",
        "updated_at",
    )
    list_filter = ("publish_flag", "delete_flag", "category")
    search_fields = ("title", "description", "id")
    readonly_fields = ("id", "user_id", "publish_flag", "delete_flag", "created_at", "updated_at")
    inlines = [ChapterInline]

    fieldsets = (
        (_("Basic Information"), {"fields": ("id", "title", "description", "category")}),
        (_("Sales"), {"fields": ("image_url", "price")}),
        (
            _("Status"),
            {
                "fields": ("publish_flag", "delete_flag", "user_id", "created_at", "updated_at"),
                "description": _("Use the publish endpoints to change the status"),
            },
        ),
    )

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        """Optimize queryset for better performance."""
        return super().get_queryset(request).select_related("category")


@admin.register(Chapter)
class ChapterAdmin(admin.ModelAdmin):
    list_display = ("title", "course", "position", "free_flag", "publish_flag")
    list_filter = ("publish_flag", "free_flag")
    search_fields = ("title", "description", "course__title")
    ordering = ("course", "position")
    readonly_fields = ("id", "publish_flag", "created_at", "updated_at")

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).select_related("course")


@admin.register(VideoAsset)
class VideoAssetAdmin(admin.ModelAdmin):
    list_display = ("chapter", "asset_id", "playback_id", "created_at")
    search_fields = ("asset_id", "playback_id", "chapter__title")
    readonly_fields = ("chapter", "asset_id", "playback_id", "created_at")
