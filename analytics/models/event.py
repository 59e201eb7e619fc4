# analytics/models/event.py

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class AnalyticsEvent(models.Model):
    """
    One fire-and-forget tracking hit from the storefront.

    - pageview: url/path/title/referrer/load_time
    - click:    element_* describe the clicked node
    - event:    free-form event_name + event_data

    The raw client IP is never stored; only its SHA-256 (ip_hash).
    """

    TYPE_PAGEVIEW = "pageview"
    TYPE_CLICK = "click"
    TYPE_EVENT = "event"

    TYPE_CHOICES = [
        (TYPE_PAGEVIEW, "Page view"),
        (TYPE_CLICK, "Click"),
        (TYPE_EVENT, "Custom event"),
    ]

    DEVICE_MOBILE = "mobile"
    DEVICE_TABLET = "tablet"
    DEVICE_DESKTOP = "desktop"
    DEVICE_UNKNOWN = "unknown"

    DEVICE_CHOICES = [
        (DEVICE_MOBILE, "Mobile"),
        (DEVICE_TABLET, "Tablet"),
        (DEVICE_DESKTOP, "Desktop"),
        (DEVICE_UNKNOWN, "Unknown"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    url = models.CharField(max_length=2000)
    path = models.CharField(max_length=1000, blank=True, default="", db_index=True)
    title = models.CharField(max_length=500, blank=True, default="")
    referrer = models.CharField(max_length=2000, blank=True, default="")

    element_type = models.CharField(max_length=64, blank=True, default="")
    element_text = models.CharField(max_length=500, blank=True, default="")
    element_id = models.CharField(max_length=255, blank=True, default="")
    element_class = models.CharField(max_length=500, blank=True, default="")

    event_name = models.CharField(max_length=120, blank=True, default="")
    event_data = models.JSONField(default=dict, blank=True)

    session_id = models.CharField(max_length=128, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="analytics_events",
    )
    is_authenticated = models.BooleanField(default=False)

    user_agent = models.CharField(max_length=1000, blank=True, default="")
    device_type = models.CharField(max_length=16, choices=DEVICE_CHOICES, default=DEVICE_UNKNOWN)
    browser = models.CharField(max_length=32, blank=True, default="")
    os = models.CharField(max_length=32, blank=True, default="")
    screen_width = models.PositiveIntegerField(null=True, blank=True)
    screen_height = models.PositiveIntegerField(null=True, blank=True)
    ip_hash = models.CharField(max_length=64, blank=True, default="")
    load_time = models.PositiveIntegerField(null=True, blank=True)

    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-timestamp"]
        indexes = [
            models.Index(fields=["type", "timestamp"], name="analytics_type_ts_idx"),
        ]

    def __str__(self):
        return f"{self.type} {self.path or self.url}"
