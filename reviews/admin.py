# reviews/admin.py

from django.contrib import admin

from reviews.models import Review
from reviews.services import recompute_product_rating


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("product", "user", "rating", "status", "created_at")
    list_filter = ("status", "rating")
    search_fields = ("product__title", "user__email", "comment")
    readonly_fields = ("reviewed_by", "reviewed_at", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        recompute_product_rating(obj.product_id)
