"""
Tests for analytics event tracking and aggregation.
"""
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework import status

from analytics.models import AnalyticsEvent
from analytics.services.event_stats import EventStatsService


TRACK_URL = '/api/analytics/track'


@pytest.mark.django_db
class TestTrackEvent:

    def test_track_page_view(self, api_client):
        response = api_client.post(
            TRACK_URL,
            {'event': 'page_view', 'page': '/services', 'sessionId': 'abc-123'},
            format='json',
            HTTP_USER_AGENT='Mozilla/5.0 (X11; Linux x86_64)',
            REMOTE_ADDR='198.51.100.4'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True

        event = AnalyticsEvent.objects.get(id=response.data['data']['id'])
        assert event.event == 'page_view'
        assert event.page == '/services'
        assert event.session_id == 'abc-123'
        assert event.ip_address == '198.51.100.4'
        assert event.user_agent == 'Mozilla/5.0 (X11; Linux x86_64)'

    def test_defaults(self, api_client):
        api_client.post(TRACK_URL, {'event': 'click', 'page': '/'}, format='json')

        event = AnalyticsEvent.objects.get()
        assert event.referrer == 'direct'
        assert event.country == 'Unknown'
        assert event.city == 'Unknown'
        assert event.device == 'desktop'
        assert event.browser == 'Unknown'
        assert event.os == 'Unknown'
        assert event.screen_resolution == 'Unknown'
        assert event.language == 'en'
        assert event.user_id is None
        assert event.metadata == {}
        assert event.timestamp is not None

    @pytest.mark.parametrize('missing', ['event', 'page'])
    def test_missing_required_field(self, api_client, missing):
        payload = {'event': 'page_view', 'page': '/'}
        del payload[missing]

        response = api_client.post(TRACK_URL, payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert missing in response.data['errors']
        assert AnalyticsEvent.objects.count() == 0

    def test_malformed_optional_fields_are_coerced(self, api_client):
        response = api_client.post(
            TRACK_URL,
            {
                'event': 'page_view',
                'page': '/',
                'device': 'smartwatch',
                'metadata': ['not', 'an', 'object'],
                'timestamp': 'last tuesday',
                'browser': {'name': 'Firefox'},
                'language': 'x' * 50,
                'referrer': '',
            },
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        event = AnalyticsEvent.objects.get()
        assert event.device == 'desktop'
        assert event.metadata == {}
        assert event.browser == 'Unknown'
        assert event.language == 'x' * 20
        assert event.referrer == 'direct'
        assert abs(event.timestamp - timezone.now()) < timedelta(minutes=1)

    def test_metadata_is_stored(self, api_client):
        api_client.post(
            TRACK_URL,
            {
                'event': 'contact_form_success',
                'page': '/contact',
                'metadata': {'budget': 'medium', 'step': 2},
            },
            format='json'
        )

        assert AnalyticsEvent.objects.get().metadata == {'budget': 'medium', 'step': 2}

    def test_referrer_from_metadata(self, api_client):
        api_client.post(
            TRACK_URL,
            {
                'event': 'page_view',
                'page': '/',
                'metadata': {'title': 'Home', 'referrer': 'https://www.google.com/'},
            },
            format='json'
        )

        assert AnalyticsEvent.objects.get().referrer == 'https://www.google.com/'

    def test_session_id_from_header(self, api_client):
        api_client.post(
            TRACK_URL,
            {'event': 'page_view', 'page': '/'},
            format='json',
            HTTP_X_SESSION_ID='header-session'
        )

        assert AnalyticsEvent.objects.get().session_id == 'header-session'

    def test_session_id_generated_when_absent(self, api_client):
        api_client.post(TRACK_URL, {'event': 'page_view', 'page': '/'}, format='json')
        api_client.post(TRACK_URL, {'event': 'page_view', 'page': '/'}, format='json')

        session_ids = list(AnalyticsEvent.objects.values_list('session_id', flat=True))
        assert all(session_ids)
        assert len(set(session_ids)) == 2

    def test_missing_device_defaults_to_desktop(self, api_client):
        api_client.post(
            TRACK_URL,
            {'event': 'page_view', 'page': '/'},
            format='json',
            HTTP_USER_AGENT='Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148'
        )

        assert AnalyticsEvent.objects.get().device == 'desktop'

    def test_reported_device_is_kept(self, api_client):
        api_client.post(TRACK_URL, {'event': 'page_view', 'page': '/', 'device': 'Tablet'}, format='json')

        assert AnalyticsEvent.objects.get().device == 'tablet'

    def test_long_page_is_truncated(self, api_client):
        response = api_client.post(
            TRACK_URL, {'event': 'page_view', 'page': '/' + 'a' * 600}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert len(AnalyticsEvent.objects.get().page) == 500

    def test_client_timestamp_is_kept(self, api_client):
        api_client.post(
            TRACK_URL,
            {'event': 'page_view', 'page': '/', 'timestamp': '2024-03-01T10:00:00Z'},
            format='json'
        )

        event = AnalyticsEvent.objects.get()
        assert event.timestamp.isoformat().startswith('2024-03-01T10:00:00')


@pytest.mark.django_db
class TestEventStatsService:

    @pytest.fixture
    def window(self):
        # Ends after the events the test body creates
        end = timezone.now() + timedelta(minutes=1)
        return end - timedelta(days=7), end

    def test_page_views_with_unique_sessions(self, make_event, window):
        make_event(page='/', session_id='s1')
        make_event(page='/', session_id='s1')
        make_event(page='/', session_id='s2')
        make_event(page='/about', session_id='s1')
        make_event(page='/about', event='click', session_id='s3')

        stats = EventStatsService(*window).get_page_views()

        assert stats == [
            {'page': '/', 'views': 3, 'uniqueViews': 2},
            {'page': '/about', 'views': 1, 'uniqueViews': 1},
        ]

    def test_ties_broken_by_key(self, make_event, window):
        make_event(page='/b')
        make_event(page='/a')
        make_event(device='tablet')
        make_event(device='mobile')

        service = EventStatsService(*window)
        assert [row['page'] for row in service.get_page_views()] == ['/', '/a', '/b']
        assert [row['device'] for row in service.get_device_stats()] == ['desktop', 'mobile', 'tablet']

    def test_device_stats_and_traffic_sources(self, make_event, window):
        make_event(device='mobile', referrer='https://google.com')
        make_event(device='mobile')
        make_event(device='desktop')

        service = EventStatsService(*window)

        assert service.get_device_stats() == [
            {'device': 'mobile', 'count': 2},
            {'device': 'desktop', 'count': 1},
        ]
        assert service.get_traffic_sources() == [
            {'referrer': 'direct', 'count': 2},
            {'referrer': 'https://google.com', 'count': 1},
        ]

    def test_event_stats_count_every_type(self, make_event, window):
        make_event(event='click')
        make_event(event='click')
        make_event(event='page_view')

        assert EventStatsService(*window).get_event_stats() == [
            {'event': 'click', 'count': 2},
            {'event': 'page_view', 'count': 1},
        ]

    def test_events_outside_window_are_ignored(self, make_event, window):
        start, end = window
        make_event(timestamp=start - timedelta(seconds=1))
        make_event(timestamp=end + timedelta(hours=1))
        make_event(timestamp=start + timedelta(hours=1))

        service = EventStatsService(start, end)
        assert service.get_page_views() == [{'page': '/', 'views': 1, 'uniqueViews': 1}]
        assert sum(row['count'] for row in service.get_event_stats()) == 1

    def test_daily_stats_ascending_within_window(self, make_event):
        now = timezone.now()
        for days_ago, session in [(0, 'a'), (0, 'b'), (2, 'a'), (5, 'c'), (40, 'd')]:
            make_event(timestamp=now - timedelta(days=days_ago), session_id=session)

        start = now - timedelta(days=7)
        stats = EventStatsService(start, now).get_daily_stats()

        dates = [row['date'] for row in stats]
        assert dates == sorted(dates)
        assert all(start.date() <= date <= now.date() for date in dates)
        assert sum(row['views'] for row in stats) == 4
        today = [row for row in stats if row['date'] == timezone.localdate(now)][0]
        assert today['views'] == 2
        assert today['uniqueViews'] == 2

    def test_contact_page_aliases(self, make_event, window):
        for page in ['contact', '/contact', '/contact.html', '/contact-us']:
            make_event(page=page)
        make_event(page='/contact', event='click')

        assert EventStatsService(*window).count_contact_page_views() == 3
