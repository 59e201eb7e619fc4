# banners/admin.py

from django.contrib import admin

from banners.models import Banner


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "layout", "active", "priority", "views", "clicks", "updated_at")
    list_filter = ("active", "type", "layout")
    search_fields = ("name",)
    readonly_fields = ("views", "clicks", "created_at", "updated_at")
