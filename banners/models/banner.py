# banners/models/banner.py

import uuid

from django.db import models


def default_display_on():
    return ["home"]


class Banner(models.Model):
    """
    Banner-builder document.

    Visual blocks (background, elements, styles, animations) are stored as
    JSON and rendered by the storefront as-is.

    display_rules = {
        "start_date": ISO-8601 | null,
        "end_date":   ISO-8601 | null,
        "show_to_users": ["authenticated" | "guest" | "all"],
        "show_to_roles": ["user" | "admin"],
        "max_views": int | null,
        "max_clicks": int | null,
    }
    """

    TYPE_CHOICES = [
        ("hero", "Hero"),
        ("promotional", "Promotional"),
        ("announcement", "Announcement"),
        ("cta", "Call to action"),
        ("testimonial", "Testimonial"),
        ("custom", "Custom"),
    ]

    LAYOUT_CHOICES = [
        ("centered", "Centered"),
        ("split", "Split"),
        ("overlay", "Overlay"),
        ("card", "Card"),
        ("full-width", "Full width"),
        ("floating", "Floating"),
    ]

    BACKGROUND_TYPES = ("gradient", "solid", "image", "video")
    DISPLAY_ALL = "all"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    layout = models.CharField(max_length=20, choices=LAYOUT_CHOICES)

    active = models.BooleanField(default=True, db_index=True)
    priority = models.IntegerField(default=0)
    display_on = models.JSONField(default=default_display_on, blank=True)

    background = models.JSONField(default=dict)
    elements = models.JSONField(default=list, blank=True)
    container_style = models.JSONField(default=dict, blank=True)

    entrance_animation = models.CharField(max_length=20, blank=True, default="")
    exit_animation = models.CharField(max_length=20, blank=True, default="")
    hover_effects = models.JSONField(default=dict, blank=True)
    mobile_settings = models.JSONField(default=dict, blank=True)

    display_rules = models.JSONField(default=dict, blank=True)

    views = models.PositiveIntegerField(default=0)
    clicks = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-priority", "-created_at"]

    def __str__(self):
        return self.name
