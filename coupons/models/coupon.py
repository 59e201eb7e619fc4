# coupons/models/coupon.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models


class Coupon(models.Model):
    """
    Discount code.

    Usage accounting:
    - used_count / total_orders / total_discount_given are bumped by
      coupons.services.record_usage() when an order is placed
    - per-user and first-time checks look at the shopper's PAID orders
    """

    TYPE_PERCENTAGE = "percentage"
    TYPE_FIXED = "fixed"

    TYPE_CHOICES = [
        (TYPE_PERCENTAGE, "Percentage"),
        (TYPE_FIXED, "Fixed amount"),
    ]

    APPLIES_ALL = "all"
    APPLIES_PRODUCTS = "products"
    APPLIES_CATEGORIES = "categories"

    APPLIES_CHOICES = [
        (APPLIES_ALL, "All products"),
        (APPLIES_PRODUCTS, "Selected products"),
        (APPLIES_CATEGORIES, "Selected categories"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    code = models.CharField(
        max_length=50,
        unique=True,
        validators=[
            MinLengthValidator(3),
            RegexValidator(r"^[A-Z0-9_-]+$", "Code may only contain A-Z, 0-9, '_' and '-'"),
        ],
    )
    name = models.CharField(max_length=120)
    description = models.TextField(blank=True, default="")

    type = models.CharField(max_length=16, choices=TYPE_CHOICES, default=TYPE_PERCENTAGE)
    value = models.DecimalField(max_digits=12, decimal_places=2)
    min_purchase_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    max_discount_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    applicable_to = models.CharField(max_length=16, choices=APPLIES_CHOICES, default=APPLIES_ALL)
    applicable_products = models.ManyToManyField(
        "products.Product",
        blank=True,
        related_name="coupons",
    )
    applicable_categories = models.ManyToManyField(
        "products.Category",
        blank=True,
        related_name="coupons",
    )
    exclude_products = models.ManyToManyField(
        "products.Product",
        blank=True,
        related_name="excluded_from_coupons",
    )

    usage_limit = models.PositiveIntegerField(null=True, blank=True)
    usage_limit_per_user = models.PositiveIntegerField(null=True, blank=True, default=1)
    used_count = models.PositiveIntegerField(default=0)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()

    is_active = models.BooleanField(default=True)
    first_time_only = models.BooleanField(default=False)
    stackable = models.BooleanField(default=False)

    user_specific = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="private_coupons",
    )

    total_discount_given = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    total_orders = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.code

    def clean(self):
        if self.value is None or self.value < 0:
            raise ValidationError({"value": "value must be non-negative"})
        if self.type == self.TYPE_PERCENTAGE and self.value > 100:
            raise ValidationError({"value": "A percentage cannot exceed 100"})
        if self.start_date and self.end_date and self.start_date >= self.end_date:
            raise ValidationError({"end_date": "end_date must be after start_date"})

    def save(self, *args, **kwargs):
        self.code = (self.code or "").strip().upper()
        super().save(*args, **kwargs)
