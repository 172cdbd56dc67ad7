"""
Shared pytest fixtures for dashboards tests.
"""
from datetime import timedelta

import pytest
from django.utils import timezone


@pytest.fixture
def seeded_site(make_contact, make_event):
    """
    A small, fixed data set: three contacts and a week of page views.

    Two contacts fall inside the last 7 days, one is 60 days old.
    """
    now = timezone.now()

    contacts = [
        make_contact(name='Ana Gomez', status='new', created_at=now - timedelta(days=1)),
        make_contact(name='Ben Ode', status='responded', created_at=now - timedelta(days=3)),
        make_contact(name='Cara Lee', status='closed', created_at=now - timedelta(days=60)),
    ]

    events = [
        make_event(page='/', session_id='s1', timestamp=now - timedelta(hours=2)),
        make_event(page='/', session_id='s2', device='mobile', timestamp=now - timedelta(days=2)),
        make_event(page='/contact', session_id='s1', timestamp=now - timedelta(days=1)),
        make_event(page='contact', session_id='s3', timestamp=now - timedelta(days=4)),
        make_event(page='/contact.html', session_id='s4', timestamp=now - timedelta(days=5)),
        make_event(page='/contact', session_id='s5', referrer='https://google.com',
                   timestamp=now - timedelta(days=6)),
        make_event(event='click', page='/', session_id='s1', timestamp=now - timedelta(hours=1)),
        make_event(page='/', session_id='old', timestamp=now - timedelta(days=45)),
    ]

    return {'now': now, 'contacts': contacts, 'events': events}
