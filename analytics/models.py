"""
Site Analytics Models
"""
import uuid
from django.db import models
from django.utils import timezone


class AnalyticsEventQuerySet(models.QuerySet):

    def in_range(self, start, end):
        """Events whose ``timestamp`` falls in ``[start, end]``."""
        return self.filter(timestamp__gte=start, timestamp__lte=end)

    def page_views(self):
        return self.filter(event=AnalyticsEvent.PAGE_VIEW)


class AnalyticsEvent(models.Model):
    """
    One client interaction (page view, click, form event, ...).

    Events are write-once: nothing in the API updates or deletes them.
    """

    PAGE_VIEW = 'page_view'

    DEVICE_CHOICES = [
        ('desktop', 'Desktop'),
        ('mobile', 'Mobile'),
        ('tablet', 'Tablet'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    event = models.CharField(max_length=100, help_text="e.g. page_view, click")

    page = models.CharField(max_length=500, help_text="Path of the page the event happened on")

    # Provenance, taken from the request
    user_agent = models.TextField()
    ip_address = models.CharField(max_length=64)

    referrer = models.CharField(max_length=500, default='direct')

    country = models.CharField(max_length=100, default='Unknown')
    city = models.CharField(max_length=100, default='Unknown')

    device = models.CharField(
        max_length=10,
        choices=DEVICE_CHOICES,
        default='desktop'
    )

    browser = models.CharField(max_length=100, default='Unknown')
    os = models.CharField(max_length=100, default='Unknown')
    screen_resolution = models.CharField(max_length=20, default='Unknown')
    language = models.CharField(max_length=20, default='en')

    session_id = models.CharField(max_length=100, db_index=True)
    user_id = models.CharField(max_length=100, null=True, blank=True)

    metadata = models.JSONField(
        default=dict,
        blank=True,
        help_text="Free-form event properties (JSON object)"
    )

    timestamp = models.DateTimeField(default=timezone.now)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AnalyticsEventQuerySet.as_manager()

    class Meta:
        db_table = 'analytics_events'
        ordering = ['-timestamp']
        verbose_name = 'Analytics Event'
        verbose_name_plural = 'Analytics Events'
        indexes = [
            models.Index(fields=['event', '-timestamp'], name='analytics_event_ts_idx'),
            models.Index(fields=['page', '-timestamp'], name='analytics_page_ts_idx'),
            models.Index(fields=['ip_address', '-timestamp'], name='analytics_ip_ts_idx'),
        ]

    def __str__(self):
        return f"{self.event} on {self.page} ({self.timestamp:%Y-%m-%d %H:%M})"
