# products/models/price_alert.py

import uuid

from django.conf import settings
from django.db import models


class PriceAlert(models.Model):
    """
    "Tell me when this drops to X".

    Fired (and deactivated) by products.services.price_alerts when a product's
    effective price falls to or below target_price.
    """

    CHANNEL_EMAIL = "email"
    CHANNEL_TELEGRAM = "telegram"

    CHANNEL_CHOICES = [
        (CHANNEL_EMAIL, "Email"),
        (CHANNEL_TELEGRAM, "Telegram"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="price_alerts",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="price_alerts",
    )

    target_price = models.DecimalField(max_digits=12, decimal_places=2)
    channel = models.CharField(max_length=16, choices=CHANNEL_CHOICES, default=CHANNEL_EMAIL)
    destination = models.CharField(max_length=255)

    active = models.BooleanField(default=True, db_index=True)
    triggered_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["product", "active"], name="pricealert_product_active_idx"),
        ]

    def __str__(self):
        return f"{self.product_id} <= {self.target_price} ({self.channel})"
