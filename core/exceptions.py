"""
Course Platform Exceptions

This module provides the closed set of domain errors raised by the course
platform services, together with the single place where they are turned into
HTTP responses (the DRF exception handler configured in settings).

Hierarchy:
- PlatformError
  - NotFoundError: CourseNotFound, ChapterNotFound, CategoryNotFound,
    VideoAssetNotFound
  - PreconditionFailedError: RequiredFieldsEmpty, CourseDeleted
  - ConflictError: PurchaseAlreadyExists
  - WebhookError: WebhookSignatureInvalid, WebhookMetadataMissing
  - ExternalProviderError: VideoProviderError, PaymentProviderError

Every error carries a localized, user-facing message. Internal details
(provider responses, stack traces) are logged but never sent to clients.

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Iterable, Optional

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class PlatformError(Exception):
    """
    Base exception class for all course platform errors.

    Attributes:
        message (str): Human-readable, localized error message
        status_code (int): HTTP status code used when mapped to a response
        error_code (str): Stable machine-readable identifier
        details (Dict[str, Any]): Additional context for logs and clients
    """

    default_message = _("An unexpected error occurred.")
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "platform_error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.details = details or {}
        super().__init__(str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "message": str(self.message),
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details,
            "exception_type": self.__class__.__name__,
        }


# --- NotFound family ---


class NotFoundError(PlatformError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"


class CourseNotFound(NotFoundError):
    default_message = _("The course does not exist.")
    error_code = "course_not_found"


class ChapterNotFound(NotFoundError):
    default_message = _("The chapter does not exist.")
    error_code = "chapter_not_found"


class CategoryNotFound(NotFoundError):
    default_message = _("The category does not exist.")
    error_code = "category_not_found"


class VideoAssetNotFound(NotFoundError):
    default_message = _("The chapter has no video asset.")
    error_code = "video_asset_not_found"


# --- PreconditionFailed family ---


class PreconditionFailedError(PlatformError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "precondition_failed"


class RequiredFieldsEmpty(PreconditionFailedError):
    """
    Raised when a course or chapter is published while incomplete.

    The missing field names are exposed in ``details["missing_fields"]``.
    """

    default_message = _("Required fields are empty.")
    error_code = "required_fields_empty"

    def __init__(self, missing_fields: Iterable[str] = (), message: Optional[str] = None):
        missing = list(missing_fields)
        super().__init__(message=message, details={"missing_fields": missing})
        self.missing_fields = missing


class CourseDeleted(PreconditionFailedError):
    default_message = _("The course has been deleted.")
    error_code = "course_deleted"


# --- Conflict family ---


class ConflictError(PlatformError):
    # Kept at 400 for client compatibility with the existing frontend.
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "conflict"


class PurchaseAlreadyExists(ConflictError):
    default_message = _("You have already purchased this course.")
    error_code = "purchase_already_exists"


# --- Webhook errors ---


class WebhookError(PlatformError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "webhook_error"


class WebhookSignatureInvalid(WebhookError):
    default_message = _("Webhook signature verification failed.")
    error_code = "webhook_signature_invalid"


class WebhookMetadataMissing(WebhookError):
    default_message = _("Webhook event is missing purchase metadata.")
    error_code = "webhook_metadata_missing"


# --- External providers ---


class ExternalProviderError(PlatformError):
    default_message = _("An external service failed. Please try again later.")
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "external_provider_error"


class VideoProviderError(ExternalProviderError):
    default_message = _("The video service failed. Please try again later.")
    error_code = "video_provider_error"


class PaymentProviderError(ExternalProviderError):
    default_message = _("The payment service failed. Please try again later.")
    error_code = "payment_provider_error"


GENERIC_ERROR_MESSAGE = _("An unexpected error occurred.")


def platform_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Map any exception raised inside an API view to an ``{"error": ...}`` payload.

    - PlatformError subclasses use their own status code and message.
    - DRF exceptions (authentication, permission, validation, 404, 405)
      keep their status code; validation errors also carry ``details``.
    - Anything else is logged with traceback and returned as a generic 500.
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, PlatformError):
        if exc.status_code >= 500:
            logger.error("%s failed: %s", view_name, exc.to_dict(), exc_info=exc)
        else:
            logger.info("%s rejected request: %s", view_name, exc.error_code)
        return Response({"error": str(exc.message)}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, ValidationError):
            response.data = {
                "error": str(_("Invalid request.")),
                "details": response.data,
            }
        else:
            detail = getattr(exc, "detail", None)
            response.data = {"error": str(detail) if detail is not None else str(exc)}
        return response

    logger.exception("Unhandled error in %s", view_name, exc_info=exc)
    return Response(
        {"error": str(GENERIC_ERROR_MESSAGE)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
