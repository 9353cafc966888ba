"""
Catalog Application

Courses, chapters, categories and the Mux video assets attached to chapters,
together with the publication rules that decide what consumers can see.

Author: Course Platform Team
Version: 1.0.0
"""
