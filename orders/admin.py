# orders/admin.py

from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "title", "variant_id", "selected_options", "unit_price", "quantity")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        "order_number",
        "customer_email",
        "customer_phone",
        "total_amount",
        "payment_status",
        "fulfillment_status",
        "created_at",
    )
    list_filter = ("payment_status", "fulfillment_status", "payment_method")
    search_fields = ("order_number", "customer_name", "customer_email", "customer_phone")
    ordering = ("-created_at",)
    readonly_fields = (
        "order_number",
        "subtotal_amount",
        "shipping_amount",
        "discount_amount",
        "total_amount",
        "coupon_code",
        "created_at",
        "updated_at",
    )
    inlines = [OrderItemInline]
