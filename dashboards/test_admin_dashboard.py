"""
Tests for the admin dashboard, analytics report and settings endpoints.
"""
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework import status

from dashboards.services.admin_dashboard import AdminDashboardService, resolve_range


DASHBOARD_URL = '/api/admin/dashboard'
ANALYTICS_URL = '/api/admin/analytics'
SETTINGS_URL = '/api/admin/settings'


@pytest.mark.django_db
class TestDashboardEndpoint:

    def test_requires_token(self, api_client):
        response = api_client.get(DASHBOARD_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Unauthorized access'

    def test_dashboard_payload(self, admin_api_client, seeded_site):
        response = admin_api_client.get(DASHBOARD_URL, {'days': 7})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        data = response.data['data']

        assert data['contactStats'] == {
            'total': 3, 'new': 1, 'inProgress': 0, 'responded': 1, 'closed': 1,
        }
        assert [c['name'] for c in data['recentContacts']] == ['Ana Gomez', 'Ben Ode', 'Cara Lee']
        assert data['pageViews'] == [
            {'page': '/', 'views': 2, 'uniqueViews': 2},
            {'page': '/contact', 'views': 2, 'uniqueViews': 2},
            {'page': '/contact.html', 'views': 1, 'uniqueViews': 1},
            {'page': 'contact', 'views': 1, 'uniqueViews': 1},
        ]
        assert data['deviceStats'] == [
            {'device': 'desktop', 'count': 5},
            {'device': 'mobile', 'count': 1},
        ]
        assert sum(day['views'] for day in data['dailyStats']) == 6
        assert data['period']['days'] == 7

    def test_conversion_rate_counts_every_contact_path(self, admin_api_client, seeded_site):
        response = admin_api_client.get(DASHBOARD_URL, {'days': 7})

        # 2 contacts in the period / 4 contact-page views
        assert response.data['data']['conversionRate'] == 50.0

    def test_conversion_rate_zero_without_contact_views(self, admin_api_client, make_contact):
        make_contact()
        response = admin_api_client.get(DASHBOARD_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['conversionRate'] == 0

    def test_default_period(self, admin_api_client, db):
        response = admin_api_client.get(DASHBOARD_URL)
        assert response.data['data']['period']['days'] == 30

    def test_recent_contacts_limited_to_five(self, admin_api_client, make_contact):
        for i in range(7):
            make_contact(name=f'Person {i}', created_at=timezone.now() - timedelta(minutes=i))

        response = admin_api_client.get(DASHBOARD_URL)

        names = [c['name'] for c in response.data['data']['recentContacts']]
        assert names == [f'Person {i}' for i in range(5)]

    @pytest.mark.parametrize('days', ['abc', '0', '-3'])
    def test_invalid_days(self, admin_api_client, db, days):
        response = admin_api_client.get(DASHBOARD_URL, {'days': days})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'days' in response.data['errors']


@pytest.mark.django_db
class TestAnalyticsEndpoint:

    def test_analytics_payload(self, admin_api_client, seeded_site):
        response = admin_api_client.get(ANALYTICS_URL, {'days': 7})

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert set(data) == {
            'pageViews', 'deviceStats', 'trafficSources', 'dailyStats',
            'eventStats', 'contactStats', 'period',
        }
        assert data['eventStats'] == [
            {'event': 'page_view', 'count': 6},
            {'event': 'click', 'count': 1},
        ]
        assert data['trafficSources'] == [
            {'referrer': 'direct', 'count': 5},
            {'referrer': 'https://google.com', 'count': 1},
        ]

    def test_explicit_range(self, admin_api_client, seeded_site):
        now = seeded_site['now']
        response = admin_api_client.get(ANALYTICS_URL, {
            'startDate': (now - timedelta(days=46)).date().isoformat(),
            'endDate': (now - timedelta(days=44)).date().isoformat(),
        })

        data = response.data['data']
        assert data['pageViews'] == [{'page': '/', 'views': 1, 'uniqueViews': 1}]
        assert data['period']['days'] == 3
        assert len(data['dailyStats']) == 1

    def test_repeated_calls_are_identical(self, admin_api_client, seeded_site):
        params = {
            'startDate': (seeded_site['now'] - timedelta(days=10)).isoformat(),
            'endDate': seeded_site['now'].isoformat(),
        }

        first = admin_api_client.get(ANALYTICS_URL, params)
        second = admin_api_client.get(ANALYTICS_URL, params)

        assert first.data == second.data

    def test_start_after_end(self, admin_api_client, db):
        response = admin_api_client.get(ANALYTICS_URL, {
            'startDate': '2024-05-10',
            'endDate': '2024-05-01',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'startDate' in response.data['errors']

    def test_invalid_date(self, admin_api_client, db):
        response = admin_api_client.get(ANALYTICS_URL, {'startDate': 'soon'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestResolveRange:

    def test_days_back_from_now(self):
        now = timezone.now()
        report_range = resolve_range({'days': '14'}, now=now)

        assert report_range == {'start': now - timedelta(days=14), 'end': now, 'days': 14}

    def test_start_only_runs_to_now(self):
        now = timezone.now().replace(microsecond=500000)
        start = (now - timedelta(days=2)).replace(microsecond=0)
        report_range = resolve_range({'startDate': start.isoformat()}, now=now)

        assert report_range['start'] == start
        assert report_range['end'] == now
        assert report_range['days'] == 3

    def test_end_only_uses_days(self):
        report_range = resolve_range({'endDate': '2024-01-31', 'days': '10'})

        assert report_range['end'].date().isoformat() == '2024-01-31'
        assert report_range['end'] - report_range['start'] == timedelta(days=10)
        assert report_range['days'] == 10


@pytest.mark.django_db
class TestAdminDashboardService:

    def test_daily_stats_stay_inside_period(self, make_event):
        now = timezone.now()
        for days_ago in (0, 1, 3, 9, 31):
            make_event(timestamp=now - timedelta(days=days_ago))

        data = AdminDashboardService(now=now).get_dashboard(days=7)

        dates = [row['date'] for row in data['dailyStats']]
        assert dates == sorted(dates)
        assert all((now - timedelta(days=7)).date() <= d <= now.date() for d in dates)
        assert sum(row['views'] for row in data['dailyStats']) == 3

    def test_contacts_outside_period_do_not_convert(self, make_contact, make_event):
        now = timezone.now()
        make_contact(created_at=now - timedelta(days=20))
        make_event(page='/contact', timestamp=now - timedelta(days=1))

        data = AdminDashboardService(now=now).get_dashboard(days=7)

        assert data['conversionRate'] == 0.0


@pytest.mark.django_db
class TestSettingsEndpoint:

    def test_settings(self, admin_api_client, settings):
        settings.EMAIL_HOST_USER = 'mailer'
        settings.EMAIL_HOST_PASSWORD = 'secret'

        response = admin_api_client.get(SETTINGS_URL)

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['emailService']['configured'] is True
        assert data['database']['type'] == 'sqlite'
        assert data['features']['contactForm'] is True
        assert 'secret' not in str(response.data)

    def test_requires_token(self, api_client):
        response = api_client.get(SETTINGS_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
