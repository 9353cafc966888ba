"""
Stripe Integration Package
==========================

This package centralizes all Stripe-related logic for the course platform.

Current Scope
-------------
- Maps platform users to Stripe Customers (created lazily on first checkout).
- Opens Checkout Sessions for one-off course purchases.
- Verifies webhook deliveries and records purchases on
  `checkout.session.completed`.

Design Rationale
----------------
- Core placement: billing lives in `core/` so the catalog only asks
  "has this user purchased this course?" through the Purchase model.
- Purchases are the local source of truth for course access; Stripe
  objects are never mirrored beyond the customer id.

Structure
---------
- apps.py         → App configuration (`StripeIntegrationConfig`)
- models.py       → PaymentCustomer, Purchase
- gateway.py      → Stripe SDK calls
- services.py     → Checkout flow
- webhooks.py     → Event verification and dispatch
- views.py        → API endpoints
- urls.py         → Routes

Author: Course Platform Team
Version: 1.0.0
"""
