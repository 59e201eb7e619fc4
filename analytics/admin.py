# analytics/admin.py

from django.contrib import admin

from analytics.models import AnalyticsEvent


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):
    list_display = ("type", "path", "device_type", "browser", "session_id", "timestamp")
    list_filter = ("type", "device_type", "browser", "os")
    search_fields = ("path", "url", "event_name", "session_id")
    date_hierarchy = "timestamp"

    def has_add_permission(self, request):
        return False
