from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import NotAuthenticated
from rest_framework.permissions import BasePermission

from .config import get_platform_config
from .identity import resolve_user_id

MSG_NOT_AUTHENTICATED = _("Not authenticated.")
MSG_NOT_ADMIN = _("Administrator privileges required.")


class IsAuthenticatedUser(BasePermission):
    """Allows access to any request carrying a valid session."""

    def has_permission(self, request, view):
        if resolve_user_id(request) is None:
            raise NotAuthenticated(MSG_NOT_AUTHENTICATED)
        return True


class IsPlatformAdmin(BasePermission):
    """Allows access only to the configured administrator account."""

    message = MSG_NOT_ADMIN

    def has_permission(self, request, view):
        user_id = resolve_user_id(request)
        if user_id is None:
            raise NotAuthenticated(MSG_NOT_AUTHENTICATED)
        admin_user_id = get_platform_config().admin_user_id
        return bool(admin_user_id) and user_id == admin_user_id
