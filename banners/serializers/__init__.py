# banners/serializers/__init__.py

from rest_framework import serializers

from banners.models import Banner
from permissions.roles import normalize_role

AUDIENCES = {"all", "authenticated", "guest"}


class BannerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Banner
        fields = [
            "id",
            "name",
            "type",
            "layout",
            "active",
            "priority",
            "display_on",
            "background",
            "elements",
            "container_style",
            "entrance_animation",
            "exit_animation",
            "hover_effects",
            "mobile_settings",
            "display_rules",
            "views",
            "clicks",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "views", "clicks", "created_at", "updated_at"]

    def validate_display_on(self, value):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise serializers.ValidationError("display_on must be a list of page names")
        return [v.strip().lower() for v in value if v.strip()] or ["home"]

    def validate_background(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("background must be an object")
        if value.get("type") not in Banner.BACKGROUND_TYPES:
            raise serializers.ValidationError(
                f"background.type must be one of: {', '.join(Banner.BACKGROUND_TYPES)}"
            )
        return value

    def validate_elements(self, value):
        if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
            raise serializers.ValidationError("elements must be a list of objects")
        return value

    def validate_display_rules(self, value):
        if value in (None, ""):
            return {}
        if not isinstance(value, dict):
            raise serializers.ValidationError("display_rules must be an object")

        audiences = value.get("show_to_users") or []
        if not isinstance(audiences, list) or not set(audiences) <= AUDIENCES:
            raise serializers.ValidationError("show_to_users may contain: all, authenticated, guest")

        roles = value.get("show_to_roles") or []
        if not isinstance(roles, list) or any(normalize_role(r) is None for r in roles):
            raise serializers.ValidationError("show_to_roles may contain: user, customer, admin")
        if "show_to_roles" in value:
            value["show_to_roles"] = sorted({normalize_role(r) for r in roles})

        for key in ("max_views", "max_clicks"):
            cap = value.get(key)
            if cap is None:
                continue
            if isinstance(cap, bool) or not isinstance(cap, int) or cap < 0:
                raise serializers.ValidationError(f"{key} must be a non-negative integer")

        for key in ("start_date", "end_date"):
            raw = value.get(key)
            if raw:
                value[key] = serializers.DateTimeField().to_internal_value(raw).isoformat()
        return value
