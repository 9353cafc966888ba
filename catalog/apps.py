"""
Catalog Application Configuration

Django application configuration for the course catalog (courses, chapters,
categories and video asset links).

Author: Course Platform Team
Version: 1.0.0
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """
    Configuration class for the catalog Django application.

    Attributes:
        default_auto_field: Default primary key field type for models
        name: Application name for Django registration
        verbose_name: Human-readable application name for admin interface
    """

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "catalog"
    verbose_name: str = "Course Catalog"
