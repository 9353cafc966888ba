"""
Stripe Integration Models

Local billing records kept next to Stripe:
- PaymentCustomer: maps a platform user to their Stripe customer
- Purchase: ledger of completed course purchases, written by the webhook

Purchases reference courses by id only, so the ledger survives a hard delete
of the course. At most one purchase exists per (course, user), enforced by a
database constraint.

Author: Course Platform Team
Version: 1.0.0
"""

import uuid

from django.db import models
from django.db.models import QuerySet
from django.utils.translation import gettext_lazy as _


class PaymentCustomer(models.Model):
    user_id = models.CharField(max_length=255, unique=True, verbose_name=_("User"))
    stripe_customer_id = models.CharField(
        max_length=255, unique=True, verbose_name=_("Stripe Customer ID")
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.stripe_customer_id}"

    class Meta:
        verbose_name = _("Payment Customer")
        verbose_name_plural = _("Payment Customers")
        db_table = "billing_payment_customer"


class PurchaseQuerySet(QuerySet):
    def exists_for(self, course_id: str, user_id: str) -> bool:
        return self.filter(course_id=course_id, user_id=user_id).exists()


class Purchase(models.Model):
    """
    A completed course purchase.

    Attributes:
        course_id: Purchased course
        user_id: Buyer
        checkout_session_id: Stripe Checkout Session that paid for it
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    course_id = models.CharField(max_length=64, db_index=True, verbose_name=_("Course"))
    user_id = models.CharField(max_length=255, db_index=True, verbose_name=_("User"))
    checkout_session_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        unique=True,
        verbose_name=_("Checkout Session ID"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PurchaseQuerySet.as_manager()

    def __str__(self) -> str:
        return f"{self.user_id} bought {self.course_id}"

    class Meta:
        verbose_name = _("Purchase")
        verbose_name_plural = _("Purchases")
        ordering = ["-created_at"]
        db_table = "billing_purchase"
        constraints = [
            models.UniqueConstraint(
                fields=["course_id", "user_id"], name="unique_purchase_per_course_user"
            )
        ]
