import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PaymentCustomer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("user_id", models.CharField(max_length=255, unique=True, verbose_name="User")),
                (
                    "stripe_customer_id",
                    models.CharField(
                        max_length=255, unique=True, verbose_name="Stripe Customer ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Payment Customer",
                "verbose_name_plural": "Payment Customers",
                "db_table": "billing_payment_customer",
            },
        ),
        migrations.CreateModel(
            name="Purchase",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "course_id",
                    models.CharField(db_index=True, max_length=64, verbose_name="Course"),
                ),
                (
                    "user_id",
                    models.CharField(db_index=True, max_length=255, verbose_name="User"),
                ),
                (
                    "checkout_session_id",
                    models.CharField(
                        blank=True,
                        max_length=255,
                        null=True,
                        unique=True,
                        verbose_name="Checkout Session ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Purchase",
                "verbose_name_plural": "Purchases",
                "db_table": "billing_purchase",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="purchase",
            constraint=models.UniqueConstraint(
                fields=("course_id", "user_id"), name="unique_purchase_per_course_user"
            ),
        ),
    ]
