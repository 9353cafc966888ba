"""
Video Asset Service

Coordinates the Mux asset lifecycle with the local VideoAsset rows.

Replacing a chapter video always deletes the previous remote asset and its
local link before the new asset is created, so a chapter never has more than
one VideoAsset. The remote and local steps are not atomic: if the remote
create succeeds and the local insert fails, the new Mux asset is orphaned.
Provider failures abort the operation before any further local write. When
the old asset is already gone and the create fails, a published chapter is
demoted (and its course, if it was the last published chapter).

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from typing import Iterable, Optional

from core.exceptions import VideoProviderError
from core.mux_integration import MuxClient

from ..models import Chapter, VideoAsset
from .lookups import get_chapter, get_course

logger = logging.getLogger(__name__)


class VideoAssetService:
    def __init__(self, client: Optional[MuxClient] = None) -> None:
        self.client = client or MuxClient()

    def set_chapter_video(self, course_id: str, chapter_id: str, video_url: str) -> Chapter:
        """
        Point a chapter at a new source video.

        Args:
            course_id: Parent course id
            chapter_id: Chapter id
            video_url: Source URL ingested by Mux

        Returns:
            The updated chapter

        Raises:
            CourseNotFound, ChapterNotFound: unknown ids
            VideoProviderError: Mux rejected the delete or create call
        """
        course = get_course(course_id)
        chapter = get_chapter(course, chapter_id)

        removed = self.remove_chapter_asset(chapter)

        try:
            asset = self.client.create_asset(video_url)
            VideoAsset.objects.create(
                chapter=chapter,
                asset_id=asset.asset_id,
                playback_id=asset.playback_id,
            )
        except VideoProviderError:
            if removed:
                logger.error("Chapter %s lost its video asset, demoting", chapter.pk)
                self._demote_chapter(chapter)
            raise

        chapter.video_url = video_url
        chapter.save(update_fields=["video_url", "updated_at"])
        logger.info("Chapter %s now uses Mux asset %s", chapter.pk, asset.asset_id)
        return chapter

    def _demote_chapter(self, chapter: Chapter) -> None:
        # Imported here: PublicationService depends on this module.
        from .publication_service import PublicationService

        PublicationService(video_assets=self).enforce_chapter_consistency(chapter)

    def remove_chapter_asset(self, chapter: Chapter) -> bool:
        """
        Delete the chapter's remote asset and local link, if there is one.

        Returns:
            True if an asset was removed, False if the chapter had none
        """
        link = VideoAsset.objects.filter(chapter=chapter).first()
        if link is None:
            return False
        self.client.delete_asset(link.asset_id)
        link.delete()
        return True

    def delete_remote_assets(self, links: Iterable[VideoAsset]) -> int:
        """Delete the remote side of ``links``; local rows are left to the caller."""
        count = 0
        for link in links:
            self.client.delete_asset(link.asset_id)
            count += 1
        return count
