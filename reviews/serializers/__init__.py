# reviews/serializers/__init__.py

from rest_framework import serializers

from reviews.models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.name", read_only=True)
    product_title = serializers.CharField(source="product.title", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "product",
            "product_title",
            "user",
            "user_name",
            "rating",
            "comment",
            "status",
            "admin_note",
            "reviewed_by",
            "reviewed_at",
            "created_at",
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(min_length=10, max_length=1000)


class ReviewModerationSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[Review.STATUS_APPROVED, Review.STATUS_REJECTED])
    admin_note = serializers.CharField(required=False, allow_blank=True, default="", max_length=1000)
