"""
Stripe Webhook Processing
=========================

Verifies and dispatches Stripe events posted to the webhook endpoint.

Handled event types:
- `checkout.session.completed` → record the purchase of the course named in
  the session metadata

Every other event type is acknowledged without side effects.

Safety:
- Signature verification fails closed; nothing is written for an
  unverified request.
- Purchase recording is idempotent: a redelivered event finds the existing
  row via `get_or_create` on (course, user).
- Errors are raised, not swallowed. The view answers non-2xx so Stripe
  redelivers after transient failures.

Author: Course Platform Team
Version: 1.0.0
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from django.db import transaction

from ..exceptions import WebhookMetadataMissing
from .gateway import StripeGateway
from .models import Purchase

logger = logging.getLogger(__name__)


def _extract_data_object(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return the event's `data.object` payload (or `{}` if absent)."""
    data = event.get("data")
    if isinstance(data, dict) and isinstance(data.get("object"), dict):
        return data["object"]
    return {}


class StripeWebhookProcessor:
    def __init__(self, gateway: Optional[StripeGateway] = None) -> None:
        self.gateway = gateway or StripeGateway()
        self.handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {
            "checkout.session.completed": self._handle_checkout_session_completed,
        }

    def handle(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """
        Verify and dispatch one webhook delivery.

        Returns:
            The acknowledgement body, ``{"received": True}``

        Raises:
            WebhookSignatureInvalid: verification failed
            WebhookMetadataMissing: completed session without purchase metadata
        """
        event = self.gateway.construct_event(payload, signature)
        event_type = event.get("type")
        logger.info("[webhook] %s (event_id=%s)", event_type, event.get("id"))

        handler = self.handlers.get(event_type)
        if handler is None:
            logger.debug("Unhandled event type: %s", event_type)
        else:
            handler(_extract_data_object(event))
        return {"received": True}

    def _handle_checkout_session_completed(self, session: Dict[str, Any]) -> None:
        metadata = session.get("metadata") or {}
        course_id = metadata.get("courseId")
        user_id = metadata.get("userId")
        session_id = session.get("id")

        if not course_id or not user_id:
            logger.error(
                "checkout.session.completed %s without courseId/userId metadata", session_id
            )
            raise WebhookMetadataMissing(details={"session_id": session_id})

        with transaction.atomic():
            purchase, created = Purchase.objects.get_or_create(
                course_id=course_id,
                user_id=user_id,
                defaults={"checkout_session_id": session_id},
            )

        if created:
            logger.info(
                "Purchase recorded: user %s, course %s (session=%s)",
                user_id,
                course_id,
                session_id,
            )
        else:
            logger.info(
                "Purchase already recorded for user %s and course %s (session=%s)",
                user_id,
                course_id,
                session_id,
            )
