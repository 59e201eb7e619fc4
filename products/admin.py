# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Catalog admin.

- Category product_count is read-only (recounted by the catalog service).
- Saving a Product here goes through the same recount + price alert path
  as the API so back-office edits behave identically.
"""

from __future__ import annotations

from django.contrib import admin

from products.models import Category, PriceAlert, Product
from products.services.catalog import recount_categories
from products.services.price_alerts import trigger_price_alerts
from products.services.pricing import effective_price


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "order", "is_active", "show_on_home", "product_count")
    list_filter = ("is_active", "show_on_home")
    search_fields = ("name", "name_en", "slug")
    ordering = ("order", "name")
    readonly_fields = ("product_count", "created_at", "updated_at")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "sku",
        "base_price",
        "sale_price",
        "on_sale",
        "featured",
        "track_inventory",
        "quantity",
        "is_active",
        "created_at",
    )
    list_filter = ("is_active", "on_sale", "featured", "product_type", "categories")
    search_fields = ("title", "sku", "slug")
    ordering = ("-created_at",)
    readonly_fields = ("rating", "created_at", "updated_at")
    filter_horizontal = ("categories",)

    def save_model(self, request, obj, form, change):
        old_price = None
        if change:
            previous = Product.objects.filter(pk=obj.pk).first()
            if previous is not None:
                old_price = effective_price(previous)
        super().save_model(request, obj, form, change)
        obj._admin_old_price = old_price

    def save_related(self, request, form, formsets, change):
        obj = form.instance
        before = set(obj.categories.values_list("id", flat=True)) if change else set()
        super().save_related(request, form, formsets, change)
        after = set(obj.categories.values_list("id", flat=True))
        recount_categories(before | after)

        old_price = getattr(obj, "_admin_old_price", None)
        if old_price is not None and obj.is_active and effective_price(obj) < old_price:
            trigger_price_alerts(obj)


@admin.register(PriceAlert)
class PriceAlertAdmin(admin.ModelAdmin):
    list_display = ("product", "user", "target_price", "channel", "active", "triggered_at", "created_at")
    list_filter = ("active", "channel")
    search_fields = ("product__title", "user__email", "destination")
    readonly_fields = ("triggered_at", "created_at", "updated_at")
