# orders/serializers/checkout.py

"""
CHECKOUT INPUT

Totals are deliberately absent: the server computes them.
Legacy flat address fields on customer_info are still accepted.
"""

from rest_framework import serializers

from orders.models import Order, OrderItem


class ShippingAddressSerializer(serializers.Serializer):
    province = serializers.CharField(required=False, allow_blank=True, default="", max_length=120)
    city = serializers.CharField(min_length=2, max_length=120)
    address = serializers.CharField(min_length=5, max_length=500)
    postal_code = serializers.CharField(required=False, allow_blank=True, default="", max_length=15)
    recipient_name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    recipient_phone = serializers.CharField(required=False, allow_blank=True, default="", max_length=15)

    def validate_postal_code(self, value):
        v = (value or "").strip()
        if v and not (5 <= len(v) <= 15):
            raise serializers.ValidationError("postal_code must be 5-15 characters")
        return v


class CustomerInfoSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(min_length=10, max_length=15)

    shipping_address = ShippingAddressSerializer(required=False)

    # legacy flat address
    province = serializers.CharField(required=False, allow_blank=True, max_length=120)
    city = serializers.CharField(required=False, allow_blank=True, max_length=120)
    address = serializers.CharField(required=False, allow_blank=True, max_length=500)
    postal_code = serializers.CharField(required=False, allow_blank=True, max_length=15)
    recipient_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    recipient_phone = serializers.CharField(required=False, allow_blank=True, max_length=15)

    def validate(self, attrs):
        if "shipping_address" in attrs:
            return attrs

        legacy = {k: attrs.get(k) for k in ("province", "city", "address", "postal_code")}
        if any(legacy.values()):
            # run the legacy fields through the same address rules
            nested = ShippingAddressSerializer(data={k: v or "" for k, v in legacy.items()})
            nested.is_valid(raise_exception=True)
        return attrs


class CheckoutItemSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    variant_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)
    selected_options = serializers.DictField(required=False, default=dict)
    quantity = serializers.IntegerField(min_value=1)


class ShippingPreferencesSerializer(serializers.Serializer):
    delivery_date = serializers.CharField(required=False, allow_blank=True, max_length=64)
    instructions = serializers.CharField(required=False, allow_blank=True, max_length=1000)


class CheckoutSerializer(serializers.Serializer):
    customer_info = CustomerInfoSerializer()
    items = CheckoutItemSerializer(many=True, allow_empty=False)
    shipping_method_id = serializers.UUIDField(required=False, allow_null=True)
    coupon_code = serializers.CharField(required=False, allow_blank=True, max_length=50)
    payment_method = serializers.CharField(required=False, allow_blank=True, max_length=32)
    shipping_preferences = ShippingPreferencesSerializer(required=False)
    note = serializers.CharField(required=False, allow_blank=True, max_length=2000)


class OrderLookupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    phone = serializers.CharField(min_length=10, max_length=15)


class OrderStatusUpdateSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=Order.PAYMENT_STATUS_CHOICES, required=False)
    fulfillment_status = serializers.ChoiceField(choices=Order.FULFILLMENT_STATUS_CHOICES, required=False)
    payment_reference = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Nothing to update")
        return attrs


class OrderNotifySerializer(serializers.Serializer):
    subject = serializers.CharField(required=False, allow_blank=True, max_length=255)
    message = serializers.CharField(required=False, allow_blank=True)


class OrderDeliverySerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True)
    credentials = serializers.CharField(required=False, allow_blank=True)
    tracking_code = serializers.CharField(required=False, allow_blank=True, max_length=120)
    delivered_at = serializers.DateTimeField(required=False, allow_null=True)


class WarrantySerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderItem.WARRANTY_STATUS_CHOICES)
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, max_length=1000)

    def validate(self, attrs):
        start, end = attrs.get("start_date"), attrs.get("end_date")
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": "end_date must not be before start_date"})
        return attrs
