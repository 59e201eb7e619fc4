# pages/serializers/__init__.py

from rest_framework import serializers

from pages.models import HomeContent, Page


class PageSectionSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    type = serializers.ChoiceField(choices=Page.SECTION_TYPES)
    title = serializers.CharField(max_length=255)
    content = serializers.CharField(allow_blank=True)
    items = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False, default=list)
    order = serializers.IntegerField(required=False, default=0)


class PageSeoSerializer(serializers.Serializer):
    meta_title = serializers.CharField(max_length=255, allow_blank=True, required=False, default="")
    meta_description = serializers.CharField(max_length=500, allow_blank=True, required=False, default="")


class PageSerializer(serializers.ModelSerializer):
    sections = PageSectionSerializer(many=True, required=False)
    seo = PageSeoSerializer(required=False)

    class Meta:
        model = Page
        fields = [
            "id",
            "slug",
            "title",
            "subtitle",
            "sections",
            "seo",
            "is_active",
            "updated_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "updated_by", "created_at", "updated_at"]

    def validate_slug(self, value):
        return (value or "").strip().lower()

    def validate_sections(self, value):
        return sorted(value, key=lambda s: s.get("order", 0))

    # sections / seo are stored as JSON, not related rows
    def create(self, validated_data):
        return Page.objects.create(**validated_data)

    def update(self, instance, validated_data):
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        return instance


class HomeContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = HomeContent
        fields = ["id", "hero", "hero_slides", "spotlights", "trust_signals", "testimonials", "updated_at"]
        read_only_fields = ["id", "updated_at"]

    def validate_hero(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("hero must be an object")
        return value

    def _validate_list(self, value, name):
        if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
            raise serializers.ValidationError(f"{name} must be a list of objects")
        return value

    def validate_hero_slides(self, value):
        return self._validate_list(value, "hero_slides")

    def validate_spotlights(self, value):
        return self._validate_list(value, "spotlights")

    def validate_trust_signals(self, value):
        return self._validate_list(value, "trust_signals")

    def validate_testimonials(self, value):
        return self._validate_list(value, "testimonials")
