"""
Catalog Views Package

API views for courses, chapters and categories. Views only validate the
request body, call a catalog service and serialize the result; domain errors
propagate to the platform exception handler.

Author: Course Platform Team
Version: 1.0.0
"""

from .category_views import *
from .chapter_views import *
from .course_views import *
