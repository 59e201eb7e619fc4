# products/models/category.py

import re
import uuid

from django.core.exceptions import ValidationError
from django.db import models

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def category_slug_base(value: str) -> str:
    """Lowercase, collapse every non [a-z0-9] run into '-', trim dashes."""
    return _SLUG_STRIP.sub("-", (value or "").strip().lower()).strip("-")


class Category(models.Model):
    """
    Storefront category (kitchen, bedding, lighting, ...).

    - slug is derived from name_en (falls back to name) when not supplied
    - product_count is denormalized and refreshed by the catalog service
    - parent allows one level of nesting in menus
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=120)
    name_en = models.CharField(max_length=120, blank=True, default="")
    slug = models.SlugField(max_length=140, unique=True, allow_unicode=True)

    description = models.TextField(blank=True, default="")
    seo_description = models.CharField(max_length=300, blank=True, default="")
    seo_keywords = models.JSONField(default=list, blank=True)

    image_url = models.CharField(max_length=500, blank=True, default="")
    icon = models.CharField(max_length=64, blank=True, default="")

    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    show_on_home = models.BooleanField(default=False)

    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="children",
    )

    product_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order", "name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError({"name": "name is required"})
        if self.parent_id and self.parent_id == self.id:
            raise ValidationError({"parent": "A category cannot be its own parent"})
        if not isinstance(self.seo_keywords, list):
            raise ValidationError({"seo_keywords": "seo_keywords must be a list"})

    def _unique_slug(self, base: str) -> str:
        candidate = base
        i = 1
        while Category.objects.filter(slug=candidate).exclude(pk=self.pk).exists():
            i += 1
            candidate = f"{base}-{i}"
        return candidate

    def save(self, *args, **kwargs):
        if self.slug:
            self.slug = self.slug.strip().lower()
        else:
            base = category_slug_base(self.name_en or self.name)
            if not base:
                base = f"category-{uuid.uuid4().hex[:6]}"
            self.slug = self._unique_slug(base)
        super().save(*args, **kwargs)
