"""Existence checks shared by the catalog services."""

from core.exceptions import CategoryNotFound, ChapterNotFound, CourseNotFound

from ..models import Category, Chapter, Course


def get_course(course_id: str) -> Course:
    course = Course.objects.filter(pk=course_id).first()
    if course is None:
        raise CourseNotFound()
    return course


def get_visible_course(course_id: str) -> Course:
    """Published, non-deleted course as seen by consumers."""
    course = Course.objects.visible().filter(pk=course_id).first()
    if course is None:
        raise CourseNotFound()
    return course


def get_chapter(course: Course, chapter_id: str) -> Chapter:
    chapter = Chapter.objects.filter(pk=chapter_id, course=course).first()
    if chapter is None:
        raise ChapterNotFound()
    return chapter


def get_category(category_id: str) -> Category:
    category = Category.objects.filter(pk=category_id).first()
    if category is None:
        raise CategoryNotFound()
    return category
