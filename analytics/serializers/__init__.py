# analytics/serializers/__init__.py

from rest_framework import serializers

from analytics.models import AnalyticsEvent


class AnalyticsEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnalyticsEvent
        exclude = ["user_agent"]
        read_only_fields = [f.name for f in AnalyticsEvent._meta.fields]


class TrackingSerializer(serializers.Serializer):
    """Fields every hit carries."""

    url = serializers.CharField(max_length=2000)
    path = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    session_id = serializers.CharField(max_length=128)
    screen_width = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    screen_height = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class PageViewSerializer(TrackingSerializer):
    title = serializers.CharField(max_length=500, required=False, allow_blank=True)
    referrer = serializers.CharField(max_length=2000, required=False, allow_blank=True)
    load_time = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class ClickSerializer(TrackingSerializer):
    element_type = serializers.CharField(max_length=64, required=False, allow_blank=True)
    element_text = serializers.CharField(max_length=500, required=False, allow_blank=True)
    element_id = serializers.CharField(max_length=255, required=False, allow_blank=True)
    element_class = serializers.CharField(max_length=500, required=False, allow_blank=True)

    def validate_element_text(self, value):
        return value.strip()[:500]


class CustomEventSerializer(TrackingSerializer):
    event_name = serializers.CharField(max_length=120)
    event_data = serializers.DictField(required=False, default=dict)
