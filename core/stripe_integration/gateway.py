"""
Stripe Gateway

The only module that talks to the Stripe API. It exposes the three calls the
purchase pipeline needs (create customer, create checkout session, verify a
webhook) with explicit credentials from PlatformConfig, and converts SDK
errors into the platform's PaymentProviderError / WebhookSignatureInvalid.

Dependencies
------------
- stripe (official Python SDK)

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import stripe

from ..config import PlatformConfig, get_platform_config
from ..exceptions import PaymentProviderError, WebhookSignatureInvalid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str


class StripeGateway:
    # Maximum age of a webhook signature timestamp, in seconds
    WEBHOOK_TOLERANCE = 300

    def __init__(self, config: Optional[PlatformConfig] = None) -> None:
        self.config = config or get_platform_config()

    def _request_options(self) -> Dict[str, Any]:
        return {
            "api_key": self.config.stripe_secret_key,
            "stripe_version": self.config.stripe_api_version,
        }

    def create_customer(self, email: str, user_id: str) -> str:
        """Create a Stripe customer and return its id (``cus_...``)."""
        try:
            customer = stripe.Customer.create(
                email=email or None,
                metadata={"userId": user_id},
                **self._request_options(),
            )
        except stripe.StripeError as e:
            logger.error("Stripe customer creation failed for user %s: %s", user_id, e)
            raise PaymentProviderError(
                details={"operation": "create_customer", "stripe_error": str(e)}
            ) from e
        logger.info("Created Stripe customer %s for user %s", customer.id, user_id)
        return customer.id

    def create_checkout_session(
        self,
        *,
        customer_id: str,
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
        metadata: Dict[str, str],
    ) -> CheckoutSession:
        try:
            session = stripe.checkout.Session.create(
                mode="payment",
                customer=customer_id,
                line_items=line_items,
                success_url=success_url,
                cancel_url=cancel_url,
                metadata=metadata,
                **self._request_options(),
            )
        except stripe.StripeError as e:
            logger.error("Stripe checkout session creation failed: %s", e)
            raise PaymentProviderError(
                message=getattr(e, "user_message", None) or None,
                details={"operation": "create_checkout_session", "stripe_error": str(e)},
            ) from e
        return CheckoutSession(id=session.id, url=session.url)

    def construct_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """
        Verify ``signature`` against the raw ``payload`` and parse the event.

        Fails closed: a missing secret, a missing or invalid header, a stale
        timestamp or an unparsable body all raise WebhookSignatureInvalid.

        Returns:
            The stripe.Event (a dict subclass: ``{"id", "type", "data": {"object"}}``)
        """
        secret = self.config.stripe_webhook_secret
        if not secret:
            logger.error("STRIPE_WEBHOOK_SECRET is not configured; rejecting webhook")
            raise WebhookSignatureInvalid()
        if not signature:
            logger.warning("Webhook request without Stripe-Signature header")
            raise WebhookSignatureInvalid()

        try:
            event = stripe.Webhook.construct_event(
                payload,
                signature,
                secret,
                tolerance=self.WEBHOOK_TOLERANCE,
                api_key=self.config.stripe_secret_key,
            )
        except (stripe.SignatureVerificationError, ValueError) as e:
            logger.warning("Webhook signature verification failed: %s", e)
            raise WebhookSignatureInvalid() from e

        if not isinstance(event, dict) or "type" not in event:
            logger.warning("Webhook payload is not a Stripe event")
            raise WebhookSignatureInvalid()
        return event
