"""
Stripe Integration Views (core.stripe_integration)
==================================================

REST endpoints of the purchase pipeline.

Endpoints
---------

1. CheckoutView
   - URL: /api/courses/<course_id>/checkout/
   - Method: POST
   - Auth: Required
   - Purpose:
       Opens a Stripe Checkout Session for a published course and returns
       the hosted page URL: {"url": "https://checkout.stripe.com/..."}.

2. StripeWebhookView
   - URL: /api/webhook/
   - Method: POST
   - Auth: None (Stripe-Signature header is verified instead)
   - Purpose:
       Receives Stripe events. `checkout.session.completed` records the
       purchase; other events are acknowledged with {"received": true}.

Security
--------
- The webhook reads the raw request body; the signature covers the exact
  bytes Stripe sent, so the body must not be parsed before verification.
- Card data is handled exclusively by Stripe; the backend only stores
  customer ids and purchase rows.

Dependencies
------------
- Django REST Framework (API endpoints)
- stripe (official Python SDK, via gateway.py)

Author: Course Platform Team
Version: 1.0.0
"""

from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ..identity import get_user_email, resolve_user_id
from ..permissions import IsAuthenticatedUser
from .services import CheckoutService
from .webhooks import StripeWebhookProcessor


class CheckoutView(APIView):
    permission_classes = [IsAuthenticatedUser]

    def post(self, request, course_id):
        user_id = resolve_user_id(request)
        email = getattr(request.user, "email", "") or get_user_email(user_id)
        url = CheckoutService().checkout(course_id, user_id, email)
        return Response({"url": url}, status=status.HTTP_200_OK)


@method_decorator(csrf_exempt, name="dispatch")
class StripeWebhookView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        # request.body must be read before request.data touches the stream
        payload = request.body
        signature = request.META.get("HTTP_STRIPE_SIGNATURE")
        result = StripeWebhookProcessor().handle(payload, signature)
        return Response(result, status=status.HTTP_200_OK)
