"""
Contact Management Django Admin Configuration
"""
from django.contrib import admin
from .models import ContactSubmission, ContactNote, ContactFormRateLimit


class ContactNoteInline(admin.TabularInline):
    model = ContactNote
    extra = 0
    fields = ['text', 'author', 'created_at']
    readonly_fields = ['created_at']


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    """Admin interface for contact submissions."""

    list_display = [
        'name', 'email', 'subject', 'budget', 'status',
        'priority', 'created_at'
    ]

    list_filter = [
        'status', 'priority', 'budget', 'source', 'created_at'
    ]

    search_fields = [
        'name', 'email', 'subject', 'message', 'company'
    ]

    readonly_fields = [
        'id', 'tags', 'ip_address', 'user_agent',
        'responded_at', 'created_at', 'updated_at'
    ]

    fieldsets = (
        ('Contact Information', {
            'fields': ('name', 'email', 'phone', 'company')
        }),
        ('Inquiry', {
            'fields': ('subject', 'message', 'budget', 'source', 'tags')
        }),
        ('Workflow', {
            'fields': ('status', 'priority')
        }),
        ('Response', {
            'fields': ('response_message', 'responded_by', 'responded_at')
        }),
        ('Security & Tracking', {
            'fields': ('ip_address', 'user_agent'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    inlines = [ContactNoteInline]


@admin.register(ContactFormRateLimit)
class ContactFormRateLimitAdmin(admin.ModelAdmin):
    """Admin interface for rate limiting."""

    list_display = [
        'identifier', 'identifier_type', 'count',
        'window_start', 'last_submission'
    ]

    list_filter = [
        'identifier_type', 'window_start'
    ]

    search_fields = [
        'identifier'
    ]

    readonly_fields = [
        'identifier', 'identifier_type', 'count',
        'window_start', 'last_submission'
    ]

    def has_add_permission(self, request):
        """Disable manual creation."""
        return False
