# shipping/models/shipping_method.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class ShippingMethod(models.Model):
    """
    A delivery option offered at checkout (courier, post, express, ...).

    free_threshold: when set, subtotals at or above it ship for free.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=120)
    price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    price_label = models.CharField(max_length=120, blank=True, default="")
    eta = models.CharField(max_length=120, blank=True, default="")
    badge = models.CharField(max_length=60, blank=True, default="")
    icon = models.CharField(max_length=64, blank=True, default="")
    perks = models.JSONField(default=list, blank=True)
    free_threshold = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    is_active = models.BooleanField(default=True)
    order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order", "created_at"]

    def __str__(self):
        return self.name

    def clean(self):
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "price must be non-negative"})
        if self.free_threshold is not None and self.free_threshold < 0:
            raise ValidationError({"free_threshold": "free_threshold must be non-negative"})

    def shipping_cost_for(self, subtotal) -> Decimal:
        if self.free_threshold is not None and Decimal(str(subtotal)) >= self.free_threshold:
            return Decimal("0.00")
        return self.price

    def snapshot(self) -> dict:
        """Frozen copy stored on orders."""
        return {
            "id": str(self.id),
            "name": self.name,
            "price": str(self.price),
            "price_label": self.price_label,
            "eta": self.eta,
            "badge": self.badge,
            "icon": self.icon,
            "perks": list(self.perks or []),
            "free_threshold": str(self.free_threshold) if self.free_threshold is not None else None,
        }
