"""
Course Service

Catalog reads and field edits for courses. State transitions live in
PublicationService; every edit here is followed by a consistency check so a
published course that loses a required field is unpublished.
"""

import logging
from typing import Any, Dict, Optional

from django.db.models import QuerySet

from ..models import Course
from .lookups import get_category, get_course, get_visible_course
from .publication_service import PublicationService

logger = logging.getLogger(__name__)

EDITABLE_COURSE_FIELDS = ("title", "description", "image_url", "category_id", "price")


class CourseService:
    def __init__(self, publication: Optional[PublicationService] = None) -> None:
        self.publication = publication or PublicationService()

    def list_visible_courses(self) -> QuerySet:
        return Course.objects.visible().select_related("category")

    def get_visible_course(self, course_id: str) -> Course:
        return get_visible_course(course_id)

    def list_courses_for_admin(self) -> QuerySet:
        return Course.objects.select_related("category").order_by("-updated_at")

    def get_course_for_admin(self, course_id: str) -> Course:
        return get_course(course_id)

    def register_course(self, title: str, user_id: str) -> Course:
        course = Course.objects.create(title=title, user_id=user_id)
        logger.info("Registered course %s by user %s", course.pk, user_id)
        return course

    def update_course(self, course_id: str, values: Dict[str, Any]) -> Course:
        """
        Update editable fields of a course.

        Args:
            course_id: Course id
            values: Subset of title, description, image_url, category_id, price

        Raises:
            CourseNotFound: unknown course
            CategoryNotFound: ``category_id`` does not reference a category
        """
        course = get_course(course_id)
        updates = {k: v for k, v in values.items() if k in EDITABLE_COURSE_FIELDS}

        if updates.get("category_id") is not None:
            get_category(updates["category_id"])

        for field, value in updates.items():
            setattr(course, field, value)
        course.save(update_fields=[*updates.keys(), "updated_at"])
        logger.info("Updated course %s fields %s", course.pk, sorted(updates))

        self.publication.enforce_course_consistency(course)
        return course
