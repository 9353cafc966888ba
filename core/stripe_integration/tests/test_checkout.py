from unittest import mock

import stripe
from django.contrib.auth.models import User
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from catalog.tests.helpers import make_course, make_published_course
from core.exceptions import (
    CourseNotFound,
    PaymentProviderError,
    PurchaseAlreadyExists,
)
from core.stripe_integration.gateway import CheckoutSession, StripeGateway
from core.stripe_integration.models import PaymentCustomer, Purchase
from core.stripe_integration.services import CheckoutService
from core.stripe_integration.webhooks import StripeWebhookProcessor
from core.tests.helpers import make_config

from .helpers import WEBHOOK_SECRET, checkout_completed_event, sign_payload

SESSION_URL = "https://checkout.stripe.com/c/pay/cs_test_1"


def mock_gateway():
    gateway = mock.create_autospec(StripeGateway, instance=True)
    gateway.create_customer.return_value = "cus_test_1"
    gateway.create_checkout_session.return_value = CheckoutSession(id="cs_test_1", url=SESSION_URL)
    return gateway


class CheckoutServiceTests(TestCase):
    def setUp(self):
        self.gateway = mock_gateway()
        self.service = CheckoutService(
            gateway=self.gateway,
            config=make_config(frontend_url="https://courses.example.com"),
        )
        self.course = make_published_course(price=4800, description="Learn Django")

    def test_checkout_returns_session_url(self):
        url = self.service.checkout(self.course.pk, "u1", "u1@example.com")

        self.assertEqual(url, SESSION_URL)
        kwargs = self.gateway.create_checkout_session.call_args.kwargs
        self.assertEqual(kwargs["customer_id"], "cus_test_1")
        self.assertEqual(kwargs["metadata"], {"courseId": self.course.pk, "userId": "u1"})
        self.assertEqual(
            kwargs["success_url"], f"https://courses.example.com/courses/{self.course.pk}?success=1"
        )
        self.assertEqual(
            kwargs["cancel_url"], f"https://courses.example.com/courses/{self.course.pk}?canceled=1"
        )
        self.assertEqual(
            kwargs["line_items"],
            [
                {
                    "quantity": 1,
                    "price_data": {
                        "currency": "jpy",
                        "product_data": {
                            "name": self.course.title,
                            "description": "Learn Django",
                        },
                        "unit_amount": 4800,
                    },
                }
            ],
        )

    def test_checkout_does_not_record_purchase(self):
        self.service.checkout(self.course.pk, "u1", "u1@example.com")

        self.assertFalse(Purchase.objects.exists())

    def test_customer_is_created_once(self):
        self.service.checkout(self.course.pk, "u1", "u1@example.com")
        self.service.checkout(self.course.pk, "u1", "u1@example.com")

        self.gateway.create_customer.assert_called_once_with(email="u1@example.com", user_id="u1")
        self.assertEqual(PaymentCustomer.objects.get(user_id="u1").stripe_customer_id, "cus_test_1")

    def test_checkout_after_purchase_is_rejected(self):
        self.service.checkout(self.course.pk, "u1", "u1@example.com")
        Purchase.objects.create(course_id=self.course.pk, user_id="u1", checkout_session_id="cs_test_1")
        self.gateway.create_checkout_session.reset_mock()

        with self.assertRaises(PurchaseAlreadyExists):
            self.service.checkout(self.course.pk, "u1", "u1@example.com")

        self.gateway.create_checkout_session.assert_not_called()

    def test_checkout_after_webhook_completion_is_rejected(self):
        self.service.checkout(self.course.pk, "u1", "u1@example.com")
        payload = checkout_completed_event(course_id=self.course.pk, user_id="u1")
        processor = StripeWebhookProcessor(
            gateway=StripeGateway(config=make_config(stripe_webhook_secret=WEBHOOK_SECRET))
        )
        processor.handle(payload.encode("utf-8"), sign_payload(payload))

        with self.assertRaises(PurchaseAlreadyExists):
            self.service.checkout(self.course.pk, "u1", "u1@example.com")

        self.gateway.create_checkout_session.assert_called_once()

    def test_draft_course_cannot_be_bought(self):
        draft = make_course()

        with self.assertRaises(CourseNotFound):
            self.service.checkout(draft.pk, "u1", "u1@example.com")

        self.gateway.create_customer.assert_not_called()

    def test_description_is_omitted_when_empty(self):
        course = make_published_course(description="")

        self.service.checkout(course.pk, "u1", "u1@example.com")

        product = self.gateway.create_checkout_session.call_args.kwargs["line_items"][0]["price_data"]["product_data"]
        self.assertNotIn("description", product)


class StripeGatewayTests(TestCase):
    def setUp(self):
        self.gateway = StripeGateway(config=make_config(stripe_secret_key="sk_test_abc"))

    @mock.patch("stripe.Customer.create")
    def test_create_customer_uses_configured_key(self, create):
        create.return_value = mock.Mock(id="cus_1")

        customer_id = self.gateway.create_customer(email="a@example.com", user_id="u1")

        self.assertEqual(customer_id, "cus_1")
        kwargs = create.call_args.kwargs
        self.assertEqual(kwargs["api_key"], "sk_test_abc")
        self.assertEqual(kwargs["metadata"], {"userId": "u1"})

    @mock.patch("stripe.checkout.Session.create")
    def test_stripe_errors_become_payment_provider_errors(self, create):
        create.side_effect = stripe.StripeError("card declined")

        with self.assertRaises(PaymentProviderError):
            self.gateway.create_checkout_session(
                customer_id="cus_1",
                line_items=[],
                success_url="https://x/s",
                cancel_url="https://x/c",
                metadata={},
            )

        self.assertEqual(create.call_args.kwargs["mode"], "payment")


class CheckoutApiTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(
            username="Max", password="Musterpassword", email="max@example.com"
        )

    def setUp(self):
        self.gateway = mock_gateway()
        patcher = mock.patch(
            "core.stripe_integration.services.StripeGateway", return_value=self.gateway
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        self.course = make_published_course()

    def test_checkout_requires_authentication(self):
        response = self.client.post(f"/api/courses/{self.course.pk}/checkout/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.gateway.create_checkout_session.assert_not_called()

    def test_checkout_returns_url(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(f"/api/courses/{self.course.pk}/checkout/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"url": SESSION_URL})
        self.gateway.create_customer.assert_called_once_with(
            email="max@example.com", user_id=str(self.user.pk)
        )

    def test_checkout_of_purchased_course(self):
        Purchase.objects.create(course_id=self.course.pk, user_id=str(self.user.pk))
        self.client.force_authenticate(user=self.user)

        response = self.client.post(f"/api/courses/{self.course.pk}/checkout/")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"error": "You have already purchased this course."})

    def test_checkout_unknown_course(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post("/api/courses/missing/checkout/")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_payment_provider_failure_returns_502(self):
        self.gateway.create_checkout_session.side_effect = PaymentProviderError()
        self.client.force_authenticate(user=self.user)

        response = self.client.post(f"/api/courses/{self.course.pk}/checkout/")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    @override_settings(STRIPE_WEBHOOK_SECRET=WEBHOOK_SECRET)
    def test_second_checkout_after_completed_webhook_is_rejected(self):
        self.client.force_authenticate(user=self.user)
        first = self.client.post(f"/api/courses/{self.course.pk}/checkout/")
        payload = checkout_completed_event(course_id=self.course.pk, user_id=str(self.user.pk))

        webhook = self.client.post(
            "/api/webhook/",
            data=payload,
            content_type="application/json",
            HTTP_STRIPE_SIGNATURE=sign_payload(payload),
        )
        second = self.client.post(f"/api/courses/{self.course.pk}/checkout/")

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(webhook.status_code, status.HTTP_200_OK)
        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(second.json(), {"error": "You have already purchased this course."})
        self.gateway.create_checkout_session.assert_called_once()
