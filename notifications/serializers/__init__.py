# notifications/serializers/__init__.py

from rest_framework import serializers

from notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    order_number = serializers.CharField(source="order.order_number", read_only=True, default=None)

    class Meta:
        model = Notification
        fields = [
            "id",
            "type",
            "subject",
            "message",
            "read",
            "order",
            "order_number",
            "created_at",
        ]
        read_only_fields = fields
