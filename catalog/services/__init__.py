"""
Catalog Services

Business logic for the course catalog, kept out of the API views:
- PublicationService: publish/unpublish/delete state machine
- VideoAssetService: Mux asset lifecycle for chapter videos
- CourseService, ChapterService, CategoryService: reads and field edits
"""

from .category_service import CategoryService
from .chapter_service import ChapterAccess, ChapterService
from .course_service import CourseService
from .publication_service import PublicationService
from .video_asset_service import VideoAssetService

__all__ = [
    "CategoryService",
    "ChapterAccess",
    "ChapterService",
    "CourseService",
    "PublicationService",
    "VideoAssetService",
]
