# shipping/admin.py

from django.contrib import admin

from shipping.models import ShippingMethod


@admin.register(ShippingMethod)
class ShippingMethodAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "free_threshold", "eta", "is_active", "order")
    list_filter = ("is_active",)
    list_editable = ("order", "is_active")
    search_fields = ("name",)
    ordering = ("order", "created_at")
