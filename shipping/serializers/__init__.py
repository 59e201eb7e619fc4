# shipping/serializers/__init__.py

from rest_framework import serializers

from shipping.models import ShippingMethod


class ShippingMethodSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShippingMethod
        fields = [
            "id",
            "name",
            "price",
            "price_label",
            "eta",
            "badge",
            "icon",
            "perks",
            "free_threshold",
            "is_active",
            "order",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name is required")
        return v

    def validate_price(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("price must be non-negative")
        return value

    def validate_perks(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("perks must be a list")
        return [str(p).strip() for p in value if str(p).strip()]


class ReorderEntrySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    order = serializers.IntegerField()


class ReorderSerializer(serializers.Serializer):
    methods = ReorderEntrySerializer(many=True, allow_empty=False)
