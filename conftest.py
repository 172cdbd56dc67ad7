"""
Shared pytest fixtures.
"""
import pytest
from django.conf import settings
from django.utils import timezone
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def admin_api_client():
    """API client carrying the admin bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {settings.ADMIN_TOKEN}')
    return client


@pytest.fixture
def make_contact(db):
    """
    Factory for stored contact submissions.

    ``created_at`` can be backdated; it is written after the insert
    because the column is ``auto_now_add``.
    """
    def _make(created_at=None, **overrides):
        from contact.models import ContactSubmission

        data = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'subject': 'Project inquiry',
            'message': 'We would like to talk about a project.',
            'ip_address': '127.0.0.1',
            'user_agent': 'pytest',
        }
        data.update(overrides)
        contact = ContactSubmission.objects.create(**data)
        if created_at is not None:
            ContactSubmission.objects.filter(pk=contact.pk).update(created_at=created_at)
            contact.refresh_from_db()
        return contact
    return _make


@pytest.fixture
def make_event(db):
    """Factory for stored analytics events."""
    def _make(**overrides):
        from analytics.models import AnalyticsEvent

        data = {
            'event': 'page_view',
            'page': '/',
            'user_agent': 'pytest',
            'ip_address': '127.0.0.1',
            'session_id': 'session-1',
            'timestamp': timezone.now(),
        }
        data.update(overrides)
        return AnalyticsEvent.objects.create(**data)
    return _make
