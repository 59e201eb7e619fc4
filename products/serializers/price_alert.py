# products/serializers/price_alert.py

from rest_framework import serializers

from products.models import PriceAlert, Product


class PriceAlertSerializer(serializers.ModelSerializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.filter(is_active=True))
    product_title = serializers.CharField(source="product.title", read_only=True)
    destination = serializers.CharField(required=False, allow_blank=True, max_length=255)

    class Meta:
        model = PriceAlert
        fields = [
            "id",
            "product",
            "product_title",
            "target_price",
            "channel",
            "destination",
            "active",
            "triggered_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "product_title", "triggered_at", "created_at", "updated_at"]

    def validate_target_price(self, value):
        if value is None or value <= 0:
            raise serializers.ValidationError("target_price must be greater than zero")
        return value

    def validate(self, attrs):
        # product is fixed once the alert exists
        if self.instance is not None:
            attrs.pop("product", None)
        return attrs


class DiscountPreviewSerializer(serializers.Serializer):
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    percent = serializers.DecimalField(max_digits=5, decimal_places=2, required=False, allow_null=True)
    sale_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True, min_value=0
    )

    def validate(self, attrs):
        if attrs.get("percent") is None and attrs.get("sale_price") is None:
            raise serializers.ValidationError("percent or sale_price is required")
        return attrs
