# product_requests/serializers/__init__.py

from rest_framework import serializers

from product_requests.models import ProductRequest


class ProductRequestSerializer(serializers.ModelSerializer):
    user_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = ProductRequest
        fields = [
            "id",
            "user",
            "user_email",
            "product_name",
            "category",
            "brand",
            "description",
            "status",
            "admin_note",
            "responded_at",
            "created_at",
        ]
        read_only_fields = fields


class ProductRequestCreateSerializer(serializers.Serializer):
    product_name = serializers.CharField(max_length=200)
    category = serializers.CharField(max_length=120)
    brand = serializers.CharField(max_length=120)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")
