# orders/models/order.py

import random
import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models
from django.utils import timezone


def generate_order_number(now=None) -> str:
    """GC{yymmdd}-{1000..9999}"""
    now = now or timezone.localtime()
    return f"GC{now:%y%m%d}-{random.randint(1000, 9999)}"


class Order(models.Model):
    """
    A placed order.

    MONEY (all server computed, see orders.services.totals):
    - subtotal_amount  = sum(unit_price * quantity)
    - shipping_amount  = shipping method cost (free over its threshold)
    - discount_amount  = coupon discount on the subtotal
    - total_amount     = max(subtotal - discount + shipping, 0)

    Ownership:
    - user is NULL for guest checkouts; guests find orders by id or
      via the email + phone lookup
    """

    PAYMENT_PENDING = "pending"
    PAYMENT_PAID = "paid"
    PAYMENT_FAILED = "failed"

    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PENDING, "Pending"),
        (PAYMENT_PAID, "Paid"),
        (PAYMENT_FAILED, "Failed"),
    ]

    FULFILLMENT_PENDING = "pending"
    FULFILLMENT_ASSIGNED = "assigned"
    FULFILLMENT_DELIVERED = "delivered"
    FULFILLMENT_REFUNDED = "refunded"

    FULFILLMENT_STATUS_CHOICES = [
        (FULFILLMENT_PENDING, "Pending"),
        (FULFILLMENT_ASSIGNED, "Assigned"),
        (FULFILLMENT_DELIVERED, "Delivered"),
        (FULFILLMENT_REFUNDED, "Refunded"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=32, unique=True, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    # Customer
    customer_name = models.CharField(max_length=255, blank=True, default="")
    customer_email = models.EmailField()
    customer_phone = models.CharField(max_length=15, validators=[MinLengthValidator(10)])
    shipping_address = models.JSONField(default=dict, blank=True)

    # Money
    subtotal_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    shipping_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    discount_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    coupon_code = models.CharField(max_length=50, blank=True, default="", db_index=True)

    # Payment
    payment_method = models.CharField(max_length=32, default="online")
    payment_status = models.CharField(
        max_length=16,
        choices=PAYMENT_STATUS_CHOICES,
        default=PAYMENT_PENDING,
        db_index=True,
    )
    payment_reference = models.CharField(max_length=255, blank=True, default="")

    # Fulfillment
    fulfillment_status = models.CharField(
        max_length=16,
        choices=FULFILLMENT_STATUS_CHOICES,
        default=FULFILLMENT_PENDING,
        db_index=True,
    )
    delivery_info = models.JSONField(default=dict, blank=True)
    delivery_credentials = models.TextField(blank=True, default="")

    shipping_method = models.JSONField(null=True, blank=True)
    shipping_preferences = models.JSONField(default=dict, blank=True)
    note = models.TextField(blank=True, default="")

    customer_acknowledged = models.BooleanField(default=False)
    customer_acknowledged_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer_email", "customer_phone"], name="order_customer_lookup_idx"),
        ]

    def __str__(self):
        return self.order_number

    def save(self, *args, **kwargs):
        if not self.order_number:
            candidate = generate_order_number()
            while Order.objects.filter(order_number=candidate).exists():
                candidate = generate_order_number()
            self.order_number = candidate
        super().save(*args, **kwargs)


class OrderItem(models.Model):
    """
    Frozen order line: title + unit_price are snapshots at checkout time.
    """

    WARRANTY_ACTIVE = "active"
    WARRANTY_EXPIRED = "expired"
    WARRANTY_VOIDED = "voided"

    WARRANTY_STATUS_CHOICES = [
        (WARRANTY_ACTIVE, "Active"),
        (WARRANTY_EXPIRED, "Expired"),
        (WARRANTY_VOIDED, "Voided"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )

    title = models.CharField(max_length=255)
    variant_id = models.CharField(max_length=64, blank=True, default="")
    selected_options = models.JSONField(default=dict, blank=True)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()

    position = models.PositiveIntegerField(default=0)

    # {"status", "start_date", "end_date", "description"}
    warranty = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ["position"]

    def __str__(self):
        return f"{self.title} x {self.quantity}"

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity
