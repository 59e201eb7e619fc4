# product_requests/admin.py

from django.contrib import admin

from product_requests.models import ProductRequest


@admin.register(ProductRequest)
class ProductRequestAdmin(admin.ModelAdmin):
    list_display = ("product_name", "brand", "category", "user", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("product_name", "brand", "category", "user__email")
    readonly_fields = ("responded_at", "created_at", "updated_at")
