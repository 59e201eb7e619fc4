# coupons/admin.py

from django.contrib import admin

from coupons.models import Coupon


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = (
        "code",
        "name",
        "type",
        "value",
        "used_count",
        "usage_limit",
        "start_date",
        "end_date",
        "is_active",
    )
    list_filter = ("is_active", "type", "applicable_to", "first_time_only")
    search_fields = ("code", "name")
    ordering = ("-created_at",)
    readonly_fields = ("used_count", "total_discount_given", "total_orders", "created_at", "updated_at")
    filter_horizontal = ("applicable_products", "applicable_categories", "exclude_products", "user_specific")
