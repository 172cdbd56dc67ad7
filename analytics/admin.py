"""
Site Analytics Django Admin Configuration
"""
from django.contrib import admin
from .models import AnalyticsEvent


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):
    """Read-only view of recorded events."""

    list_display = [
        'event', 'page', 'device', 'referrer', 'session_id', 'timestamp'
    ]

    list_filter = [
        'event', 'device', 'timestamp'
    ]

    search_fields = [
        'page', 'session_id', 'referrer'
    ]

    date_hierarchy = 'timestamp'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
