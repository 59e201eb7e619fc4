# coupons/serializers/__init__.py

import re

from django.contrib.auth import get_user_model
from rest_framework import serializers

from coupons.models import Coupon
from products.models import Category, Product

CODE_RE = re.compile(r"^[A-Z0-9_-]+$")


class CouponSerializer(serializers.ModelSerializer):
    """
    Admin coupon serializer.

    - code is upper-cased before validation
    - duplicate code => "Coupon code already exists"
    - usage counters are read-only
    """

    code = serializers.CharField(min_length=3, max_length=50)
    applicable_products = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(), many=True, required=False
    )
    applicable_categories = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(), many=True, required=False
    )
    exclude_products = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(), many=True, required=False
    )
    user_specific = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), many=True, required=False
    )

    class Meta:
        model = Coupon
        fields = [
            "id",
            "code",
            "name",
            "description",
            "type",
            "value",
            "min_purchase_amount",
            "max_discount_amount",
            "applicable_to",
            "applicable_products",
            "applicable_categories",
            "exclude_products",
            "usage_limit",
            "usage_limit_per_user",
            "used_count",
            "start_date",
            "end_date",
            "is_active",
            "first_time_only",
            "stackable",
            "user_specific",
            "total_discount_given",
            "total_orders",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "used_count",
            "total_discount_given",
            "total_orders",
            "created_at",
            "updated_at",
        ]

    def validate_code(self, value):
        code = (value or "").strip().upper()
        if not CODE_RE.match(code):
            raise serializers.ValidationError("Code may only contain A-Z, 0-9, '_' and '-'")

        qs = Coupon.objects.filter(code=code)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Coupon code already exists")
        return code

    def validate_value(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("value must be non-negative")
        return value

    def validate(self, attrs):
        ctype = attrs.get("type", getattr(self.instance, "type", Coupon.TYPE_PERCENTAGE))
        value = attrs.get("value", getattr(self.instance, "value", None))
        if ctype == Coupon.TYPE_PERCENTAGE and value is not None and value > 100:
            raise serializers.ValidationError({"value": "A percentage cannot exceed 100"})

        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and start >= end:
            raise serializers.ValidationError({"end_date": "end_date must be after start_date"})
        return attrs


class CouponValidateSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=50)
    cart_total = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0)
    product_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
