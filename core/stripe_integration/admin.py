from django.contrib import admin

from .models import PaymentCustomer, Purchase


@admin.register(PaymentCustomer)
class PaymentCustomerAdmin(admin.ModelAdmin):
    list_display = ("user_id", "stripe_customer_id", "created_at")
    search_fields = ("user_id", "stripe_customer_id")
    readonly_fields = ("created_at", "updated_at")


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    """Purchases are written by the Stripe webhook only."""

    list_display = ("course_id", "user_id", "checkout_session_id", "created_at")
    search_fields = ("course_id", "user_id", "checkout_session_id")
    readonly_fields = ("id", "course_id", "user_id", "checkout_session_id", "created_at", "updated_at")

    def has_add_permission(self, request):
        return False
