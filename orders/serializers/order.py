# orders/serializers/order.py

from rest_framework import serializers

from orders.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    product_slug = serializers.CharField(source="product.slug", read_only=True, default=None)
    cover_url = serializers.CharField(source="product.cover_url", read_only=True, default="")
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product",
            "product_slug",
            "cover_url",
            "title",
            "variant_id",
            "selected_options",
            "unit_price",
            "quantity",
            "line_total",
            "warranty",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """
    Read serializer for orders.

    delivery_credentials are only rendered for the owner / admin views
    (the view decides via context["include_credentials"]).
    """

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "user",
            "customer_name",
            "customer_email",
            "customer_phone",
            "shipping_address",
            "items",
            "subtotal_amount",
            "shipping_amount",
            "discount_amount",
            "total_amount",
            "coupon_code",
            "payment_method",
            "payment_status",
            "payment_reference",
            "fulfillment_status",
            "delivery_info",
            "delivery_credentials",
            "shipping_method",
            "shipping_preferences",
            "note",
            "customer_acknowledged",
            "customer_acknowledged_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get("include_credentials", False):
            data.pop("delivery_credentials", None)
        return data
