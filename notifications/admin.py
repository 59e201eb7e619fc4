# notifications/admin.py

from django.contrib import admin

from notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("subject", "user", "type", "read", "created_at")
    list_filter = ("type", "read")
    search_fields = ("subject", "user__email")
    readonly_fields = ("created_at", "updated_at")
