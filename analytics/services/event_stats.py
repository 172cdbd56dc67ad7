"""
Analytics Event Statistics

Aggregations over AnalyticsEvent for the admin dashboard. Every figure is
computed for one explicit ``[start, end]`` window, and ties in the sort
order are broken by the grouping key so repeated calls return identical
results.
"""
from django.db.models import Count
from django.db.models.functions import TruncDate

from analytics.models import AnalyticsEvent


CONTACT_PAGES = ('contact', '/contact', '/contact.html')


class EventStatsService:
    """
    Service for analytics aggregation within a time window.

    Usage:
        stats = EventStatsService(start, end)
        stats.get_page_views()
    """

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def _events(self):
        return AnalyticsEvent.objects.in_range(self.start, self.end)

    def _page_views(self):
        return self._events().page_views()

    def get_page_views(self):
        """
        Page views per page.

        Returns:
            list: ``{page, views, uniqueViews}`` sorted by views descending
        """
        rows = (
            self._page_views()
            .values('page')
            .annotate(views=Count('id'), uniqueViews=Count('session_id', distinct=True))
            .order_by('-views', 'page')
        )
        return [
            {'page': row['page'], 'views': row['views'], 'uniqueViews': row['uniqueViews']}
            for row in rows
        ]

    def get_device_stats(self):
        """Page views per device class, most common first."""
        rows = (
            self._page_views()
            .values('device')
            .annotate(count=Count('id'))
            .order_by('-count', 'device')
        )
        return [{'device': row['device'], 'count': row['count']} for row in rows]

    def get_traffic_sources(self):
        """Page views per referrer, most common first."""
        rows = (
            self._page_views()
            .values('referrer')
            .annotate(count=Count('id'))
            .order_by('-count', 'referrer')
        )
        return [{'referrer': row['referrer'], 'count': row['count']} for row in rows]

    def get_daily_stats(self):
        """
        Page views per calendar day (in the site time zone).

        Returns:
            list: ``{date, views, uniqueViews}`` sorted by date ascending
        """
        rows = (
            self._page_views()
            .annotate(date=TruncDate('timestamp'))
            .values('date')
            .annotate(views=Count('id'), uniqueViews=Count('session_id', distinct=True))
            .order_by('date')
        )
        return [
            {'date': row['date'], 'views': row['views'], 'uniqueViews': row['uniqueViews']}
            for row in rows
        ]

    def get_event_stats(self):
        """Events of every type per label, most common first."""
        rows = (
            self._events()
            .values('event')
            .annotate(count=Count('id'))
            .order_by('-count', 'event')
        )
        return [{'event': row['event'], 'count': row['count']} for row in rows]

    def count_contact_page_views(self):
        """Page views of the contact page under any of its paths."""
        return self._page_views().filter(page__in=CONTACT_PAGES).count()
