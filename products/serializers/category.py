# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer.

    Rules:
    - slug is optional on write (derived from name_en / name)
    - product_count is maintained by the catalog service, never by clients
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=120)
    slug = serializers.SlugField(required=False, allow_blank=True, allow_unicode=True, max_length=140)
    parent = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "name_en",
            "slug",
            "description",
            "seo_description",
            "seo_keywords",
            "image_url",
            "icon",
            "order",
            "is_active",
            "parent",
            "show_on_home",
            "product_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "product_count", "created_at", "updated_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_slug(self, value: str):
        v = (value or "").strip().lower()
        if v:
            qs = Category.objects.filter(slug=v)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError("Category slug already exists")
        return v

    def validate_seo_keywords(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("seo_keywords must be a list")
        return [str(k).strip() for k in value if str(k).strip()]

    def validate(self, attrs):
        parent = attrs.get("parent")
        if parent is not None and self.instance is not None and parent.pk == self.instance.pk:
            raise serializers.ValidationError({"parent": "A category cannot be its own parent"})
        return attrs
