# pages/models/home_content.py

import uuid

from django.db import models


class HomeContent(models.Model):
    """
    Singleton holding the storefront home page blocks.

    Always accessed through pages.services.home_content, which creates the
    row from defaults on first read.
    """

    EDITABLE_KEYS = ("hero", "hero_slides", "spotlights", "trust_signals", "testimonials")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    hero = models.JSONField(default=dict, blank=True)
    hero_slides = models.JSONField(default=list, blank=True)
    spotlights = models.JSONField(default=list, blank=True)
    trust_signals = models.JSONField(default=list, blank=True)
    testimonials = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "home content"
        verbose_name_plural = "home content"

    def __str__(self):
        return "Home content"
