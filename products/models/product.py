# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify

from .category import Category


class Product(models.Model):
    """
    Represents a sellable home-goods product.

    PRICING MODEL (IMPORTANT):
    - base_price is the list price
    - sale_price applies only while on_sale is set
    - variants may carry their own price / sale_price (see services.pricing)

    INVENTORY MODEL:
    - Tracking is opt-in (track_inventory)
    - available = quantity - reserved (or the variant's own stock)

    Options / variants are stored as JSON:
        options  = [{"id": "color", "name": "Color", "values": ["Red", "Blue"]}]
        variants = [{"id": "red-l", "selected_options": {"color": "Red"},
                     "price": 1200000, "sale_price": null, "on_sale": false, "stock": 4}]
    """

    TYPE_PHYSICAL = "physical_product"
    TYPE_DIGITAL = "digital_product"
    TYPE_SERVICE = "service"

    TYPE_CHOICES = [
        (TYPE_PHYSICAL, "Physical product"),
        (TYPE_DIGITAL, "Digital product"),
        (TYPE_SERVICE, "Service"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=280, unique=True, allow_unicode=True)

    description = models.TextField(blank=True, default="")
    detailed_description = models.TextField(blank=True, default="")
    tags = models.JSONField(default=list, blank=True)

    categories = models.ManyToManyField(
        Category,
        blank=True,
        related_name="products",
    )

    base_price = models.DecimalField(max_digits=12, decimal_places=2)
    sale_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    on_sale = models.BooleanField(default=False)
    featured = models.BooleanField(default=False)
    rating = models.DecimalField(max_digits=2, decimal_places=1, default=Decimal("0.0"))

    product_type = models.CharField(max_length=32, choices=TYPE_CHOICES, default=TYPE_PHYSICAL)
    custom_fields = models.JSONField(default=dict, blank=True)

    cover_url = models.CharField(max_length=500, blank=True, default="")
    gallery = models.JSONField(default=list, blank=True)

    # Inventory
    track_inventory = models.BooleanField(default=False)
    quantity = models.PositiveIntegerField(default=0)
    reserved = models.PositiveIntegerField(default=0)
    low_stock_threshold = models.PositiveIntegerField(default=5)
    sku = models.CharField(max_length=128, unique=True, null=True, blank=True)

    # Shipping
    requires_shipping = models.BooleanField(default=True)
    weight = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    dimensions = models.JSONField(default=dict, blank=True)
    shipping_cost = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    free_shipping_threshold = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    # Options / variants
    options = models.JSONField(default=list, blank=True)
    variants = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active", "created_at"], name="product_active_created_idx"),
            models.Index(fields=["on_sale", "featured"], name="product_sale_featured_idx"),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if self.base_price is None or Decimal(self.base_price) < 0:
            raise ValidationError({"base_price": "base_price must be non-negative"})

        if self.sale_price is not None and Decimal(self.sale_price) < 0:
            raise ValidationError({"sale_price": "sale_price must be non-negative"})

        if self.rating is not None and not (Decimal("0") <= Decimal(self.rating) <= Decimal("5")):
            raise ValidationError({"rating": "rating must be between 0 and 5"})

        if self.reserved > self.quantity:
            raise ValidationError({"reserved": "reserved cannot exceed quantity"})

        if not isinstance(self.variants, list):
            raise ValidationError({"variants": "variants must be a list"})

        seen = set()
        for v in self.variants:
            vid = str((v or {}).get("id") or "").strip()
            if not vid:
                raise ValidationError({"variants": "every variant needs an id"})
            if vid in seen:
                raise ValidationError({"variants": f"duplicate variant id: {vid}"})
            seen.add(vid)

    def save(self, *args, **kwargs):
        if self.sku is not None:
            self.sku = self.sku.strip().upper() or None
        if not self.slug:
            base = slugify(self.title or "", allow_unicode=True) or f"product-{uuid.uuid4().hex[:8]}"
            candidate = base
            i = 1
            while Product.objects.filter(slug=candidate).exclude(pk=self.pk).exists():
                i += 1
                candidate = f"{base}-{i}"
            self.slug = candidate
        super().save(*args, **kwargs)

    def get_variant(self, variant_id):
        if not variant_id:
            return None
        for v in self.variants or []:
            if str(v.get("id")) == str(variant_id):
                return v
        return None

    def available_quantity(self, variant_id=None) -> int | None:
        """None means "not tracked" (unlimited)."""
        if not self.track_inventory:
            return None
        variant = self.get_variant(variant_id)
        if variant is not None and variant.get("stock") is not None:
            return max(int(variant.get("stock") or 0), 0)
        return max(int(self.quantity or 0) - int(self.reserved or 0), 0)

    @property
    def is_low_stock(self) -> bool:
        if not self.track_inventory:
            return False
        return (self.available_quantity() or 0) <= int(self.low_stock_threshold or 0)
