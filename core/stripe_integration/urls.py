from django.urls import path
from .views import CheckoutView, StripeWebhookView

app_name = "stripe_integration"

urlpatterns = [
    path("courses/<str:course_id>/checkout/", CheckoutView.as_view(), name="course-checkout"),
    path("webhook/", StripeWebhookView.as_view(), name="stripe-webhook"),
]
