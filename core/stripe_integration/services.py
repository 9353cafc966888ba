"""
Checkout Services

Purchase initiation for courses.

Flow
----
1. Load the published course (CourseNotFound otherwise).
2. Refuse if the user already owns it (PurchaseAlreadyExists). This is a
   check-then-act guard: two concurrent checkouts can both pass it and open
   two Stripe sessions; the Purchase unique constraint still limits the
   ledger to one row.
3. Resolve (or lazily create) the user's Stripe customer.
4. Build one line item from the course title, description and price. The
   price is already in the smallest currency unit.
5. Open a Checkout Session tagged with ``{"courseId", "userId"}`` metadata so
   the webhook can record the purchase later.

No purchase row is written here; payment completion is only known once
``checkout.session.completed`` arrives (see webhooks.py).

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional

from django.db import IntegrityError

from catalog.models import Course
from catalog.services.lookups import get_visible_course

from ..config import PlatformConfig, get_platform_config
from ..exceptions import PurchaseAlreadyExists, RequiredFieldsEmpty
from .gateway import StripeGateway
from .models import PaymentCustomer, Purchase

logger = logging.getLogger(__name__)


class PaymentCustomerResolver:
    """Maps platform users to Stripe customers, creating them on first use."""

    def __init__(self, gateway: StripeGateway) -> None:
        self.gateway = gateway

    def resolve(self, user_id: str, email: str) -> PaymentCustomer:
        customer = PaymentCustomer.objects.filter(user_id=user_id).first()
        if customer is not None:
            return customer

        stripe_customer_id = self.gateway.create_customer(email=email, user_id=user_id)
        try:
            return PaymentCustomer.objects.create(
                user_id=user_id, stripe_customer_id=stripe_customer_id
            )
        except IntegrityError:
            # A concurrent checkout registered the user first; keep that mapping.
            logger.warning(
                "Payment customer for user %s created concurrently; orphaned Stripe customer %s",
                user_id,
                stripe_customer_id,
            )
            return PaymentCustomer.objects.get(user_id=user_id)


class CheckoutService:
    def __init__(
        self,
        gateway: Optional[StripeGateway] = None,
        config: Optional[PlatformConfig] = None,
        customer_resolver: Optional[PaymentCustomerResolver] = None,
    ) -> None:
        self.config = config or get_platform_config()
        self.gateway = gateway or StripeGateway(self.config)
        self.customer_resolver = customer_resolver or PaymentCustomerResolver(self.gateway)

    def checkout(self, course_id: str, user_id: str, user_email: str) -> str:
        """
        Start a Stripe Checkout for ``course_id``.

        Returns:
            The hosted checkout URL the client must redirect to

        Raises:
            CourseNotFound: course missing, unpublished or deleted
            PurchaseAlreadyExists: the user already owns the course
            PaymentProviderError: Stripe rejected a call
        """
        course = get_visible_course(course_id)

        if Purchase.objects.exists_for(course.pk, user_id):
            raise PurchaseAlreadyExists()
        if course.price is None:
            raise RequiredFieldsEmpty(["price"])

        customer = self.customer_resolver.resolve(user_id, user_email)
        session = self.gateway.create_checkout_session(
            customer_id=customer.stripe_customer_id,
            line_items=self.build_line_items(course),
            success_url=f"{self.config.frontend_url}/courses/{course.pk}?success=1",
            cancel_url=f"{self.config.frontend_url}/courses/{course.pk}?canceled=1",
            metadata={"courseId": str(course.pk), "userId": str(user_id)},
        )
        logger.info(
            "Checkout session %s opened for course %s by user %s",
            session.id,
            course.pk,
            user_id,
        )
        return session.url

    def build_line_items(self, course: Course) -> List[Dict[str, Any]]:
        product_data: Dict[str, Any] = {"name": course.title}
        if course.description:
            product_data["description"] = course.description
        return [
            {
                "quantity": 1,
                "price_data": {
                    "currency": self.config.currency,
                    "product_data": product_data,
                    "unit_amount": course.price,
                },
            }
        ]
