"""
Chapter Service

Registration, ordering, field edits and viewer access for chapters.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from core.exceptions import ChapterNotFound
from core.stripe_integration.models import Purchase

from ..models import Chapter, VideoAsset
from .lookups import get_chapter, get_course, get_visible_course
from .publication_service import PublicationService

logger = logging.getLogger(__name__)

EDITABLE_CHAPTER_FIELDS = ("title", "description", "free_flag")


@dataclass
class ChapterAccess:
    """A chapter as seen by a consumer, with their access rights resolved."""

    chapter: Chapter
    purchased: bool
    playback_id: Optional[str]

    @property
    def can_watch(self) -> bool:
        return self.playback_id is not None


class ChapterService:
    def __init__(self, publication: Optional[PublicationService] = None) -> None:
        self.publication = publication or PublicationService()

    def list_chapters(self, course_id: str) -> List[Chapter]:
        course = get_course(course_id)
        return list(course.chapters.order_by("position"))

    def register_chapter(self, course_id: str, title: str) -> Chapter:
        """Append a chapter at the end of the course (positions start at 1)."""
        course = get_course(course_id)
        chapter = Chapter.objects.create(
            course=course,
            title=title,
            position=Chapter.objects.next_position(course.pk),
        )
        logger.info("Registered chapter %s at position %s", chapter.pk, chapter.position)
        return chapter

    def reorder_chapters(self, course_id: str, items: Iterable[Dict[str, Any]]) -> None:
        """
        Overwrite chapter positions from ``[{"id": ..., "position": ...}]``.

        Positions are taken as given: duplicates and gaps are not rejected.
        """
        course = get_course(course_id)
        items = list(items)
        known = set(
            Chapter.objects.filter(
                course=course, pk__in=[item["id"] for item in items]
            ).values_list("pk", flat=True)
        )
        unknown = [item["id"] for item in items if item["id"] not in known]
        if unknown:
            raise ChapterNotFound(details={"chapter_ids": unknown})

        with transaction.atomic():
            for item in items:
                Chapter.objects.filter(pk=item["id"], course=course).update(
                    position=item["position"]
                )
        logger.info("Reordered %s chapters of course %s", len(items), course.pk)

    def update_chapter(
        self, course_id: str, chapter_id: str, values: Dict[str, Any]
    ) -> Chapter:
        course = get_course(course_id)
        chapter = get_chapter(course, chapter_id)
        updates = {k: v for k, v in values.items() if k in EDITABLE_CHAPTER_FIELDS}

        for field, value in updates.items():
            setattr(chapter, field, value)
        chapter.save(update_fields=[*updates.keys(), "updated_at"])

        self.publication.enforce_chapter_consistency(chapter)
        return chapter

    def get_chapter_for_viewer(
        self, course_id: str, chapter_id: str, user_id: str
    ) -> ChapterAccess:
        """
        Resolve a published chapter of a visible course for ``user_id``.

        The playback id is only handed out for free chapters or when the user
        has purchased the course.
        """
        course = get_visible_course(course_id)
        chapter = Chapter.objects.published().filter(pk=chapter_id, course=course).first()
        if chapter is None:
            raise ChapterNotFound()

        purchased = Purchase.objects.exists_for(course.pk, user_id)
        playback_id = None
        if chapter.free_flag or purchased:
            playback_id = (
                VideoAsset.objects.filter(chapter=chapter)
                .values_list("playback_id", flat=True)
                .first()
            )
        return ChapterAccess(chapter=chapter, purchased=purchased, playback_id=playback_id)
