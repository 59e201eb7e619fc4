# pages/models/page.py

import uuid

from django.conf import settings
from django.db import models


class Page(models.Model):
    """
    Editable CMS page (about, faq, shipping-policy, ...).

    sections = [{"id", "type", "title", "content", "items": [], "order"}]
    seo      = {"meta_title", "meta_description"}
    """

    SECTION_TEXT = "text"
    SECTION_LIST = "list"
    SECTION_FAQ = "faq"
    SECTION_CONTACT_INFO = "contact-info"
    SECTION_STEPS = "steps"

    SECTION_TYPES = (SECTION_TEXT, SECTION_LIST, SECTION_FAQ, SECTION_CONTACT_INFO, SECTION_STEPS)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    slug = models.SlugField(max_length=120, unique=True)
    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=500, blank=True, default="")

    sections = models.JSONField(default=list, blank=True)
    seo = models.JSONField(default=dict, blank=True)

    is_active = models.BooleanField(default=True)
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["slug"]

    def __str__(self):
        return self.slug

    def save(self, *args, **kwargs):
        self.slug = (self.slug or "").strip().lower()
        super().save(*args, **kwargs)
