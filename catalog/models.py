"""
Course Catalog Models

This module defines the catalog side of the course platform: categories,
courses, their ordered chapters and the Mux video asset linked to each
chapter.

Models:
- Category: Organizational categories for courses
- Course: Priced catalog entry owning its chapters
- Chapter: Ordered unit of content within a course
- VideoAsset: Mux asset/playback identifiers of a chapter (1:1)

Publication rules:
- A course may be published only while it has at least one published chapter
  and title, description, thumbnail, category and price are all set.
- A chapter may be published only while title, description and video URL are
  set and a video asset exists.
The rules are enforced by catalog.services.publication_service; the models
only answer "what is missing".

Author: Course Platform Team
Version: 1.0.0
"""

import uuid
from typing import List

from django.db import models
from django.db.models import Max, QuerySet
from django.utils.translation import gettext_lazy as _


def generate_id() -> str:
    """Opaque identifier used as primary key for catalog rows."""
    return uuid.uuid4().hex


class Category(models.Model):
    """
    Organizational category for courses.

    Names are unique by convention only; the data layer does not enforce it.
    """

    id = models.CharField(
        primary_key=True, max_length=64, default=generate_id, editable=False
    )
    name = models.CharField(
        max_length=100,
        verbose_name=_("Category Name"),
    )

    def __str__(self) -> str:
        return self.name

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["name"]
        db_table = "catalog_category"


class CourseQuerySet(QuerySet):
    def visible(self) -> "CourseQuerySet":
        """Courses shown to non-admin consumers."""
        return self.filter(publish_flag=True, delete_flag=False)


class Course(models.Model):
    """
    Priced catalog entry.

    Attributes:
        title: Course title (required on creation)
        description: Long description
        image_url: Thumbnail URL
        price: Price in the smallest currency unit, unset until configured
        user_id: Id of the administrator who created the course
        category: Optional category
        publish_flag: Visible to consumers
        delete_flag: Soft-delete marker, forces publish_flag off
    """

    id = models.CharField(
        primary_key=True, max_length=64, default=generate_id, editable=False
    )
    title = models.CharField(max_length=100, verbose_name=_("Title"))
    description = models.TextField(
        max_length=1000, blank=True, default="", verbose_name=_("Description")
    )
    image_url = models.CharField(
        max_length=500, blank=True, default="", verbose_name=_("Thumbnail URL")
    )
    price = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name=_("Price"),
        help_text=_("Price in the smallest currency unit"),
    )
    user_id = models.CharField(max_length=255, verbose_name=_("Owner"))
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="courses",
        verbose_name=_("Category"),
    )
    publish_flag = models.BooleanField(default=False, verbose_name=_("Published"))
    delete_flag = models.BooleanField(default=False, verbose_name=_("Deleted"))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CourseQuerySet.as_manager()

    def __str__(self) -> str:
        return self.title

    class Meta:
        verbose_name = _("Course")
        verbose_name_plural = _("Courses")
        ordering = ["-updated_at"]
        db_table = "catalog_course"

    def missing_publish_fields(self) -> List[str]:
        """Names of the fields that must be filled in before publishing."""
        missing = []
        if not self.title:
            missing.append("title")
        if not self.description:
            missing.append("description")
        if not self.image_url:
            missing.append("image_url")
        if self.category_id is None:
            missing.append("category")
        if self.price is None:
            missing.append("price")
        return missing

    @property
    def published_chapter_count(self) -> int:
        return self.chapters.published().count()


class ChapterQuerySet(QuerySet):
    def published(self) -> "ChapterQuerySet":
        return self.filter(publish_flag=True)

    def next_position(self, course_id: str) -> int:
        """Position for a chapter appended to ``course_id`` (1 for the first)."""
        current = self.filter(course_id=course_id).aggregate(m=Max("position"))["m"]
        return (current or 0) + 1


class Chapter(models.Model):
    """
    Ordered unit of content within a course.

    Attributes:
        course: Owning course
        title: Chapter title
        description: Chapter description
        video_url: Source URL of the chapter video
        position: 1-based display order inside the course
        free_flag: Watchable without purchasing the course
        publish_flag: Visible to consumers
    """

    id = models.CharField(
        primary_key=True, max_length=64, default=generate_id, editable=False
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="chapters",
        verbose_name=_("Course"),
    )
    title = models.CharField(max_length=100, verbose_name=_("Title"))
    description = models.TextField(
        max_length=1000, blank=True, default="", verbose_name=_("Description")
    )
    video_url = models.CharField(
        max_length=500, blank=True, default="", verbose_name=_("Video URL")
    )
    position = models.PositiveIntegerField(verbose_name=_("Position"))
    free_flag = models.BooleanField(default=False, verbose_name=_("Free Preview"))
    publish_flag = models.BooleanField(default=False, verbose_name=_("Published"))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ChapterQuerySet.as_manager()

    def __str__(self) -> str:
        return f"{self.course.title} - {self.title}"

    class Meta:
        verbose_name = _("Chapter")
        verbose_name_plural = _("Chapters")
        ordering = ["position"]
        db_table = "catalog_chapter"

    def missing_publish_fields(self) -> List[str]:
        return [
            name
            for name in ("title", "description", "video_url")
            if not getattr(self, name)
        ]

    @property
    def has_video_asset(self) -> bool:
        return VideoAsset.objects.filter(chapter_id=self.pk).exists()


class VideoAsset(models.Model):
    """Mux asset backing a chapter video."""

    chapter = models.OneToOneField(
        Chapter,
        on_delete=models.CASCADE,
        related_name="video_asset",
        verbose_name=_("Chapter"),
    )
    asset_id = models.CharField(max_length=255, verbose_name=_("Mux Asset ID"))
    playback_id = models.CharField(
        max_length=255, blank=True, default="", verbose_name=_("Mux Playback ID")
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.chapter_id}: {self.asset_id}"

    class Meta:
        verbose_name = _("Video Asset")
        verbose_name_plural = _("Video Assets")
        db_table = "catalog_video_asset"
