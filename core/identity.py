"""
Identity helpers.

The identity provider is Django's auth user model behind Simple JWT. The rest
of the platform only needs an opaque user id per request and, for payment
customer creation, the user's email address.
"""

from typing import Optional

from django.contrib.auth import get_user_model
from rest_framework.request import Request


def resolve_user_id(request: Request) -> Optional[str]:
    """Return the authenticated user's id as a string, or None."""
    user = getattr(request, "user", None)
    if not user or not user.is_authenticated:
        return None
    return str(user.pk)


def get_user_email(user_id: str) -> str:
    User = get_user_model()
    email = (
        User.objects.filter(pk=user_id).values_list("email", flat=True).first()
    )
    return email or ""
