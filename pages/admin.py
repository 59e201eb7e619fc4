# pages/admin.py

from django.contrib import admin

from pages.models import HomeContent, Page


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("slug", "title", "is_active", "updated_by", "updated_at")
    list_filter = ("is_active",)
    search_fields = ("slug", "title")
    readonly_fields = ("created_at", "updated_at")


@admin.register(HomeContent)
class HomeContentAdmin(admin.ModelAdmin):
    list_display = ("__str__", "updated_at")
    readonly_fields = ("created_at", "updated_at")
