"""Shared fixtures for the catalog tests."""

from unittest import mock

from core.mux_integration import MuxAsset, MuxClient

from catalog.models import Category, Chapter, Course, VideoAsset


def make_category(name="Programming"):
    return Category.objects.create(name=name)


def make_course(category=None, **overrides):
    """A course with every field needed for publishing filled in."""
    values = {
        "title": "Django for Beginners",
        "description": "Build a web app step by step.",
        "image_url": "https://cdn.example.com/django.png",
        "price": 4800,
        "user_id": "9001",
        "category": category or make_category(),
    }
    values.update(overrides)
    return Course.objects.create(**values)


def make_chapter(course, position=None, with_asset=True, **overrides):
    values = {
        "course": course,
        "title": f"Chapter {position or Chapter.objects.next_position(course.pk)}",
        "description": "Chapter description",
        "video_url": "https://cdn.example.com/video.mp4",
        "position": position or Chapter.objects.next_position(course.pk),
    }
    values.update(overrides)
    chapter = Chapter.objects.create(**values)
    if with_asset:
        VideoAsset.objects.create(
            chapter=chapter,
            asset_id=f"asset-{chapter.pk[:8]}",
            playback_id=f"playback-{chapter.pk[:8]}",
        )
    return chapter


def make_published_course(chapters=1, **overrides):
    course = make_course(**overrides)
    for _ in range(chapters):
        make_chapter(course, publish_flag=True)
    course.publish_flag = True
    course.save()
    return course


def mock_mux_client():
    """MuxClient double that hands out sequential asset ids."""
    client = mock.create_autospec(MuxClient, instance=True)
    counter = {"n": 0}

    def create_asset(source_url):
        counter["n"] += 1
        return MuxAsset(asset_id=f"new-asset-{counter['n']}", playback_id=f"new-play-{counter['n']}")

    client.create_asset.side_effect = create_asset
    return client
