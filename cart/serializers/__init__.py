# cart/serializers/__init__.py

from decimal import Decimal

from rest_framework import serializers

from cart.models import Cart, CartItem


class CartItemSerializer(serializers.ModelSerializer):
    product_title = serializers.CharField(source="product.title", read_only=True)
    product_slug = serializers.CharField(source="product.slug", read_only=True)
    cover_url = serializers.CharField(source="product.cover_url", read_only=True)
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = CartItem
        fields = [
            "id",
            "product",
            "product_title",
            "product_slug",
            "cover_url",
            "variant_id",
            "selected_options",
            "quantity",
            "price_at_add",
            "line_total",
            "created_at",
        ]
        read_only_fields = fields


class CartSerializer(serializers.Serializer):
    """
    Renders a cart (or the empty cart when none exists yet).
    """

    id = serializers.UUIDField(allow_null=True)
    items = CartItemSerializer(many=True)
    item_count = serializers.IntegerField()
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)

    @classmethod
    def for_cart(cls, cart: Cart | None):
        if cart is None:
            return cls({"id": None, "items": [], "item_count": 0, "subtotal": Decimal("0.00")})
        return cls(
            {
                "id": cart.id,
                "items": cart.items.all(),
                "item_count": cart.item_count,
                "subtotal": cart.subtotal,
            }
        )


class AddCartItemSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    variant_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)
    selected_options = serializers.DictField(required=False, default=dict)


class UpdateCartItemSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=0)
