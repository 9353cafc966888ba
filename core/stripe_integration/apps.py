"""
Stripe Integration AppConfig
============================

Django application configuration for `core.stripe_integration`, which owns
the payment customer mapping and the purchase ledger.

Operational notes
-----------------
- `apps.py` is executed on every process start; avoid DB/network calls here.
- Webhook events are processed synchronously in the view (see webhooks.py),
  so no signal receivers are registered.

Author: Course Platform Team
Version: 1.0.0
"""

from django.apps import AppConfig


class StripeIntegrationConfig(AppConfig):
    """
    App configuration for the `core.stripe_integration` package.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "core.stripe_integration"
    label = "stripe_integration"
    verbose_name = "Stripe Integration"
