import uuid
from decimal import Decimal

import django.core.validators
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Coupon",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "code",
                    models.CharField(
                        max_length=50,
                        unique=True,
                        validators=[
                            django.core.validators.MinLengthValidator(3),
                            django.core.validators.RegexValidator(
                                "^[A-Z0-9_-]+$", "Code may only contain A-Z, 0-9, '_' and '-'"
                            ),
                        ],
                    ),
                ),
                ("name", models.CharField(max_length=120)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "type",
                    models.CharField(
                        choices=[("percentage", "Percentage"), ("fixed", "Fixed amount")],
                        default="percentage",
                        max_length=16,
                    ),
                ),
                ("value", models.DecimalField(decimal_places=2, max_digits=12)),
                ("min_purchase_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("max_discount_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                (
                    "applicable_to",
                    models.CharField(
                        choices=[
                            ("all", "All products"),
                            ("products", "Selected products"),
                            ("categories", "Selected categories"),
                        ],
                        default="all",
                        max_length=16,
                    ),
                ),
                ("usage_limit", models.PositiveIntegerField(blank=True, null=True)),
                ("usage_limit_per_user", models.PositiveIntegerField(blank=True, default=1, null=True)),
                ("used_count", models.PositiveIntegerField(default=0)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("is_active", models.BooleanField(default=True)),
                ("first_time_only", models.BooleanField(default=False)),
                ("stackable", models.BooleanField(default=False)),
                (
                    "total_discount_given",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14),
                ),
                ("total_orders", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "applicable_categories",
                    models.ManyToManyField(blank=True, related_name="coupons", to="products.category"),
                ),
                (
                    "applicable_products",
                    models.ManyToManyField(blank=True, related_name="coupons", to="products.product"),
                ),
                (
                    "exclude_products",
                    models.ManyToManyField(
                        blank=True, related_name="excluded_from_coupons", to="products.product"
                    ),
                ),
                (
                    "user_specific",
                    models.ManyToManyField(
                        blank=True, related_name="private_coupons", to=settings.AUTH_USER_MODEL
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
