from django.test import TestCase

from core.exceptions import ChapterNotFound, CourseNotFound, VideoProviderError
from core.stripe_integration.models import Purchase
from catalog.models import Chapter, VideoAsset
from catalog.services import (
    ChapterService,
    CourseService,
    PublicationService,
    VideoAssetService,
)

from .helpers import make_chapter, make_course, make_published_course, mock_mux_client


class ChapterServiceTestCase(TestCase):
    def setUp(self):
        self.mux = mock_mux_client()
        self.video_assets = VideoAssetService(client=self.mux)
        self.publication = PublicationService(video_assets=self.video_assets)
        self.service = ChapterService(publication=self.publication)


class ChapterRegistrationTests(ChapterServiceTestCase):
    def test_positions_are_assigned_in_order(self):
        course = make_course()

        chapters = [self.service.register_chapter(course.pk, f"Part {i}") for i in range(3)]

        self.assertEqual([c.position for c in chapters], [1, 2, 3])
        self.assertTrue(all(not c.publish_flag for c in chapters))

    def test_register_chapter_for_unknown_course(self):
        with self.assertRaises(CourseNotFound):
            self.service.register_chapter("missing", "Intro")

    def test_position_continues_after_highest(self):
        course = make_course()
        make_chapter(course, position=7)

        chapter = self.service.register_chapter(course.pk, "Next")

        self.assertEqual(chapter.position, 8)


class ChapterReorderTests(ChapterServiceTestCase):
    def test_reorder_overwrites_positions(self):
        course = make_course()
        first, second, third = [self.service.register_chapter(course.pk, t) for t in "abc"]

        self.service.reorder_chapters(
            course.pk,
            [
                {"id": first.pk, "position": 3},
                {"id": second.pk, "position": 1},
                {"id": third.pk, "position": 2},
            ],
        )

        ordered = [c.pk for c in self.service.list_chapters(course.pk)]
        self.assertEqual(ordered, [second.pk, third.pk, first.pk])

    def test_reorder_with_unknown_chapter_changes_nothing(self):
        course = make_course()
        chapter = self.service.register_chapter(course.pk, "a")
        foreign = make_chapter(make_course())

        with self.assertRaises(ChapterNotFound):
            self.service.reorder_chapters(
                course.pk,
                [{"id": chapter.pk, "position": 5}, {"id": foreign.pk, "position": 1}],
            )

        chapter.refresh_from_db()
        self.assertEqual(chapter.position, 1)


class ChapterVideoTests(ChapterServiceTestCase):
    def test_first_video_creates_asset(self):
        course = make_course()
        chapter = make_chapter(course, with_asset=False, video_url="")

        result = self.video_assets.set_chapter_video(
            course.pk, chapter.pk, "https://cdn.example.com/a.mp4"
        )

        self.assertEqual(result.video_url, "https://cdn.example.com/a.mp4")
        asset = VideoAsset.objects.get(chapter=chapter)
        self.assertEqual(asset.asset_id, "new-asset-1")
        self.assertEqual(asset.playback_id, "new-play-1")
        self.mux.delete_asset.assert_not_called()

    def test_replacing_video_deletes_old_asset_before_creating_new(self):
        course = make_course()
        chapter = make_chapter(course, with_asset=False)

        self.video_assets.set_chapter_video(course.pk, chapter.pk, "https://cdn.example.com/a.mp4")
        self.video_assets.set_chapter_video(course.pk, chapter.pk, "https://cdn.example.com/b.mp4")

        self.assertEqual(VideoAsset.objects.filter(chapter=chapter).count(), 1)
        self.assertEqual(VideoAsset.objects.get(chapter=chapter).asset_id, "new-asset-2")
        call_names = [name for name, _, _ in self.mux.mock_calls]
        self.assertEqual(call_names, ["create_asset", "delete_asset", "create_asset"])
        self.mux.delete_asset.assert_called_once_with("new-asset-1")

    def test_failed_remote_delete_keeps_existing_asset(self):
        course = make_course()
        chapter = make_chapter(course)
        old_asset_id = chapter.video_asset.asset_id
        self.mux.delete_asset.side_effect = VideoProviderError()

        with self.assertRaises(VideoProviderError):
            self.video_assets.set_chapter_video(
                course.pk, chapter.pk, "https://cdn.example.com/b.mp4"
            )

        self.mux.create_asset.assert_not_called()
        self.assertEqual(VideoAsset.objects.get(chapter=chapter).asset_id, old_asset_id)

    def test_failed_remote_create_demotes_chapter_and_course(self):
        course = make_published_course(chapters=1)
        chapter = course.chapters.get()
        self.mux.create_asset.side_effect = VideoProviderError()

        with self.assertRaises(VideoProviderError):
            self.video_assets.set_chapter_video(
                course.pk, chapter.pk, "https://cdn.example.com/b.mp4"
            )

        chapter.refresh_from_db()
        course.refresh_from_db()
        self.assertFalse(VideoAsset.objects.filter(chapter=chapter).exists())
        self.assertFalse(chapter.publish_flag)
        self.assertFalse(course.publish_flag)

    def test_failed_remote_create_keeps_course_with_other_published_chapter(self):
        course = make_published_course(chapters=2)
        chapter = course.chapters.order_by("position").first()
        self.mux.create_asset.side_effect = VideoProviderError()

        with self.assertRaises(VideoProviderError):
            self.video_assets.set_chapter_video(
                course.pk, chapter.pk, "https://cdn.example.com/b.mp4"
            )

        chapter.refresh_from_db()
        course.refresh_from_db()
        self.assertFalse(chapter.publish_flag)
        self.assertTrue(course.publish_flag)


class ChapterEditTests(ChapterServiceTestCase):
    def test_emptying_description_demotes_published_chapter_and_course(self):
        course = make_published_course(chapters=1)
        chapter = course.chapters.get()

        result = self.service.update_chapter(course.pk, chapter.pk, {"description": ""})

        self.assertFalse(result.publish_flag)
        course.refresh_from_db()
        self.assertFalse(course.publish_flag)

    def test_access_flag_edit_keeps_publication(self):
        course = make_published_course(chapters=1)
        chapter = course.chapters.get()

        result = self.service.update_chapter(course.pk, chapter.pk, {"free_flag": True})

        self.assertTrue(result.free_flag)
        self.assertTrue(result.publish_flag)

    def test_course_edit_that_breaks_requirements_unpublishes(self):
        course = make_published_course()

        result = CourseService(publication=self.publication).update_course(
            course.pk, {"image_url": ""}
        )

        self.assertFalse(result.publish_flag)


class ChapterViewerTests(ChapterServiceTestCase):
    def setUp(self):
        super().setUp()
        self.course = make_published_course(chapters=2)
        self.paid, self.free = list(self.course.chapters.order_by("position"))
        Chapter.objects.filter(pk=self.free.pk).update(free_flag=True)

    def test_paid_chapter_hides_playback_without_purchase(self):
        access = self.service.get_chapter_for_viewer(self.course.pk, self.paid.pk, "42")

        self.assertFalse(access.purchased)
        self.assertIsNone(access.playback_id)
        self.assertFalse(access.can_watch)

    def test_free_chapter_exposes_playback(self):
        access = self.service.get_chapter_for_viewer(self.course.pk, self.free.pk, "42")

        self.assertEqual(access.playback_id, self.free.video_asset.playback_id)

    def test_purchase_unlocks_paid_chapter(self):
        Purchase.objects.create(course_id=self.course.pk, user_id="42")

        access = self.service.get_chapter_for_viewer(self.course.pk, self.paid.pk, "42")

        self.assertTrue(access.purchased)
        self.assertEqual(access.playback_id, self.paid.video_asset.playback_id)

    def test_unpublished_chapter_is_not_found(self):
        Chapter.objects.filter(pk=self.paid.pk).update(publish_flag=False)

        with self.assertRaises(ChapterNotFound):
            self.service.get_chapter_for_viewer(self.course.pk, self.paid.pk, "42")
