# products/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Canonical Product serializer for both admin and the public storefront.
- Pricing fields (effective_price, discount_percent) are derived server-side
  by products.services.pricing; clients never send them.
"""

from decimal import Decimal

from rest_framework import serializers

from products.models import Category, Product
from products.services.pricing import discount_percent, effective_price


class ProductCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug"]
        read_only_fields = fields


def _validate_option_list(value):
    if not isinstance(value, list):
        raise serializers.ValidationError("options must be a list")
    for idx, opt in enumerate(value):
        if not isinstance(opt, dict):
            raise serializers.ValidationError(f"options[{idx}] must be an object")
        if not str(opt.get("id") or "").strip() or not str(opt.get("name") or "").strip():
            raise serializers.ValidationError(f"options[{idx}] needs id and name")
        if not isinstance(opt.get("values", []), list):
            raise serializers.ValidationError(f"options[{idx}].values must be a list")
    return value


def _validate_variant_list(value):
    if not isinstance(value, list):
        raise serializers.ValidationError("variants must be a list")

    seen = set()
    for idx, variant in enumerate(value):
        if not isinstance(variant, dict):
            raise serializers.ValidationError(f"variants[{idx}] must be an object")

        vid = str(variant.get("id") or "").strip()
        if not vid:
            raise serializers.ValidationError(f"variants[{idx}] needs an id")
        if vid in seen:
            raise serializers.ValidationError(f"duplicate variant id: {vid}")
        seen.add(vid)

        for key in ("price", "sale_price"):
            raw = variant.get(key)
            if raw in (None, ""):
                continue
            try:
                if Decimal(str(raw)) < 0:
                    raise serializers.ValidationError(f"variants[{idx}].{key} must be non-negative")
            except (ArithmeticError, ValueError):
                raise serializers.ValidationError(f"variants[{idx}].{key} must be a number")

        stock = variant.get("stock")
        if stock not in (None, "") and (isinstance(stock, bool) or not str(stock).isdigit()):
            raise serializers.ValidationError(f"variants[{idx}].stock must be a whole number")
    return value


class ProductSerializer(serializers.ModelSerializer):
    """
    GUARANTEES:
    - effective_price / discount_percent are computed, never written
    - slug is optional on write (derived from title)
    - categories are written as a list of ids, read back as {id, name, slug}
    """

    category_ids = serializers.PrimaryKeyRelatedField(
        source="categories",
        queryset=Category.objects.all(),
        many=True,
        required=False,
        write_only=True,
    )
    categories = ProductCategorySerializer(many=True, read_only=True)

    slug = serializers.SlugField(required=False, allow_blank=True, allow_unicode=True, max_length=280)

    effective_price = serializers.SerializerMethodField()
    discount_percent = serializers.SerializerMethodField()
    available_quantity = serializers.SerializerMethodField()
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "title",
            "slug",
            "description",
            "detailed_description",
            "tags",
            "categories",
            "category_ids",
            "base_price",
            "sale_price",
            "on_sale",
            "featured",
            "rating",
            "effective_price",
            "discount_percent",
            "product_type",
            "custom_fields",
            "cover_url",
            "gallery",
            "track_inventory",
            "quantity",
            "reserved",
            "low_stock_threshold",
            "available_quantity",
            "is_low_stock",
            "sku",
            "requires_shipping",
            "weight",
            "dimensions",
            "shipping_cost",
            "free_shipping_threshold",
            "options",
            "variants",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "rating",
            "effective_price",
            "discount_percent",
            "available_quantity",
            "is_low_stock",
            "created_at",
            "updated_at",
        ]

    def get_effective_price(self, obj) -> str:
        return str(effective_price(obj))

    def get_discount_percent(self, obj) -> int:
        return discount_percent(obj.base_price, obj.sale_price if obj.on_sale else None)

    def get_available_quantity(self, obj):
        return obj.available_quantity()

    def validate_title(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("title is required")
        return v

    def validate_slug(self, value):
        v = (value or "").strip().lower()
        if v:
            qs = Product.objects.filter(slug=v)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError("Product slug already exists")
        return v

    def validate_sku(self, value):
        v = (value or "").strip().upper()
        return v or None

    def validate_base_price(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("base_price must be non-negative")
        return value

    def validate_sale_price(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("sale_price must be non-negative")
        return value

    def validate_tags(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("tags must be a list")
        return [str(t).strip() for t in value if str(t).strip()]

    def validate_gallery(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("gallery must be a list")
        return value

    def validate_options(self, value):
        return _validate_option_list(value)

    def validate_variants(self, value):
        return _validate_variant_list(value)

    def validate(self, attrs):
        quantity = attrs.get("quantity", getattr(self.instance, "quantity", 0))
        reserved = attrs.get("reserved", getattr(self.instance, "reserved", 0))
        if reserved > quantity:
            raise serializers.ValidationError({"reserved": "reserved cannot exceed quantity"})
        return attrs
