"""
Admin Dashboard Service

Combines contact statistics with site analytics for the admin dashboard.

Every report is computed for one explicit range ``{start, end, days}``:
the dashboard builds it from ``days`` back from now, the analytics report
from ``days`` or ``startDate``/``endDate``. All aggregates in a report use
the same range.
"""
import logging
import math
from datetime import timedelta

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from analytics.services.event_stats import EventStatsService
from contact.filters import parse_date_bound
from contact.models import ContactSubmission
from contact.serializers import ContactSummarySerializer

logger = logging.getLogger(__name__)


DEFAULT_PERIOD_DAYS = 30
MAX_PERIOD_DAYS = 3650
RECENT_CONTACTS = 5


def parse_days(value, default=DEFAULT_PERIOD_DAYS):
    """Positive number of days from a query value; blank means ``default``."""
    if value in (None, ''):
        return default
    try:
        days = int(value)
    except (TypeError, ValueError):
        raise ValidationError({'days': ['A positive whole number of days is required.']})
    if days < 1 or days > MAX_PERIOD_DAYS:
        raise ValidationError({'days': [f'Must be between 1 and {MAX_PERIOD_DAYS}.']})
    return days


def resolve_range(params, now=None):
    """
    Build the report range from query parameters.

    ``startDate``/``endDate`` win over ``days``. A missing ``endDate``
    means now; a missing ``startDate`` means ``days`` before the end. A
    bare date as ``endDate`` covers that whole day.

    Returns:
        dict: ``{'start': datetime, 'end': datetime, 'days': int}``
    """
    now = now or timezone.now()
    days = parse_days(params.get('days'))
    start_param = params.get('startDate')
    end_param = params.get('endDate')

    if not start_param and not end_param:
        return {'start': now - timedelta(days=days), 'end': now, 'days': days}

    end = parse_date_bound(end_param, 'endDate', end_of_day=True) if end_param else now
    start = parse_date_bound(start_param, 'startDate') if start_param else end - timedelta(days=days)

    if start > end:
        raise ValidationError({'startDate': ['startDate must not be after endDate.']})

    days = max(math.ceil((end - start).total_seconds() / 86400), 1)
    return {'start': start, 'end': end, 'days': days}


class AdminDashboardService:
    """
    Service for admin dashboard data aggregation.

    ``now`` pins the reference time (tests); it defaults to the current
    time at construction.
    """

    def __init__(self, now=None):
        self.now = now or timezone.now()

    def period_range(self, days):
        return {'start': self.now - timedelta(days=days), 'end': self.now, 'days': days}

    def get_recent_contacts(self, limit=RECENT_CONTACTS):
        contacts = ContactSubmission.objects.order_by('-created_at', '-id')[:limit]
        return ContactSummarySerializer(contacts, many=True).data

    def get_conversion_rate(self, report_range):
        """
        Contacts created in the range per 100 contact-page views.

        Returns 0 when the contact page had no views.
        """
        page_views = EventStatsService(
            report_range['start'], report_range['end']
        ).count_contact_page_views()
        if page_views == 0:
            return 0

        submissions = ContactSubmission.objects.filter(
            created_at__gte=report_range['start'],
            created_at__lte=report_range['end']
        ).count()
        return round(submissions / page_views * 100, 2)

    def get_dashboard(self, days=DEFAULT_PERIOD_DAYS):
        """
        Dashboard overview for the last ``days`` days.

        Returns:
            dict: contactStats, recentContacts, pageViews, deviceStats,
            dailyStats, conversionRate and the period used
        """
        report_range = self.period_range(days)
        stats = EventStatsService(report_range['start'], report_range['end'])

        logger.debug(f"Building admin dashboard for the last {days} days")

        return {
            'contactStats': ContactSubmission.objects.get_stats(),
            'recentContacts': self.get_recent_contacts(),
            'pageViews': stats.get_page_views(),
            'deviceStats': stats.get_device_stats(),
            'dailyStats': stats.get_daily_stats(),
            'conversionRate': self.get_conversion_rate(report_range),
            'period': report_range,
        }

    def get_analytics(self, report_range):
        """
        Detailed analytics for an explicit range.

        Read-only: the same range on unchanged data gives the same result.
        """
        stats = EventStatsService(report_range['start'], report_range['end'])

        return {
            'pageViews': stats.get_page_views(),
            'deviceStats': stats.get_device_stats(),
            'trafficSources': stats.get_traffic_sources(),
            'dailyStats': stats.get_daily_stats(),
            'eventStats': stats.get_event_stats(),
            'contactStats': ContactSubmission.objects.get_stats(),
            'period': report_range,
        }
