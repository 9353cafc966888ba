import logging

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from ..models import Category, Course
from .lookups import get_category

logger = logging.getLogger(__name__)


class CategoryService:
    def list_categories(self) -> QuerySet:
        return Category.objects.order_by("name")

    def register_category(self, name: str) -> Category:
        return Category.objects.create(name=name)

    def rename_category(self, category_id: str, name: str) -> Category:
        category = get_category(category_id)
        category.name = name
        category.save(update_fields=["name"])
        return category

    def delete_category(self, category_id: str) -> Category:
        """
        Delete a category.

        Courses referencing it lose their category (SET NULL), so published
        ones are unpublished in the same transaction.
        """
        category = get_category(category_id)
        with transaction.atomic():
            demoted = Course.objects.filter(category=category, publish_flag=True).update(
                publish_flag=False, updated_at=timezone.now()
            )
            category.delete()
        category.pk = category_id
        if demoted:
            logger.info("Deleting category %s unpublished %s courses", category_id, demoted)
        return category
