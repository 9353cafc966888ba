"""
URL configuration for the course platform backend.

- /admin/                : Django admin (jazzmin theme)
- /api/token/...         : Simple JWT token endpoints
- /api/...               : catalog and payment endpoints
"""

from django.contrib import admin
from django.urls import include, path
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/token/verify/", TokenVerifyView.as_view(), name="token_verify"),
    path("api/", include("catalog.urls")),
    path("api/", include("core.stripe_integration.urls")),
]
