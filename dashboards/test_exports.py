"""
Tests for the contacts CSV export.
"""
import re
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone
from rest_framework import status

from contact.services.contact_queries import csv_cell, format_timestamp


EXPORT_URL = '/api/admin/export/contacts'
HEADER = 'Name,Email,Subject,Message,Budget,Company,Phone,Status,Priority,Created At'


def csv_lines(response):
    return response.content.decode().rstrip('\n').split('\n')


class TestCsvHelpers:

    def test_quotes_are_doubled(self):
        assert csv_cell('He said "hi"', always_quote=True) == '"He said ""hi"""'

    def test_plain_values_are_not_quoted(self):
        assert csv_cell('Acme') == 'Acme'

    def test_values_with_separators_are_quoted(self):
        assert csv_cell('Acme, Inc.') == '"Acme, Inc."'
        assert csv_cell('line\nbreak') == '"line\nbreak"'

    def test_none_is_empty(self):
        assert csv_cell(None) == ''

    def test_timestamp_format(self):
        value = datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=dt_timezone.utc)
        assert format_timestamp(value) == '2024-03-05T14:07:09.123Z'


@pytest.mark.django_db
class TestExportContacts:

    def test_requires_token(self, api_client):
        response = api_client.get(EXPORT_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_headers_and_empty_export(self, admin_api_client):
        response = admin_api_client.get(EXPORT_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'text/csv'
        assert response['Content-Disposition'] == 'attachment; filename=contacts.csv'
        assert csv_lines(response) == [HEADER]

    def test_row_layout(self, admin_api_client, make_contact):
        make_contact(
            name='Ana Gomez',
            email='ana@x.com',
            subject='AI app',
            message='He said "hi"',
            budget='medium',
            company='Gomez, Ltd',
            phone='+1 555 0100',
            priority='high',
        )

        lines = csv_lines(admin_api_client.get(EXPORT_URL))

        assert lines[0] == HEADER
        fields = lines[1].split(',"He said ""hi""",')
        assert fields[0] == 'Ana Gomez,ana@x.com,AI app'
        assert fields[1].startswith(
            'Medium Project ($20K - $100K),"Gomez, Ltd",+1 555 0100,new,high,'
        )
        assert re.search(r',\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$', lines[1])

    def test_message_always_quoted(self, admin_api_client, make_contact):
        make_contact(message='Simple message')

        lines = csv_lines(admin_api_client.get(EXPORT_URL))

        assert ',"Simple message",' in lines[1]

    def test_newest_first(self, admin_api_client, make_contact):
        now = timezone.now()
        make_contact(name='Old', created_at=now - timedelta(days=2))
        make_contact(name='New', created_at=now)
        make_contact(name='Middle', created_at=now - timedelta(days=1))

        lines = csv_lines(admin_api_client.get(EXPORT_URL))

        assert [line.split(',')[0] for line in lines[1:]] == ['New', 'Middle', 'Old']

    def test_filters(self, admin_api_client, make_contact):
        now = timezone.now()
        make_contact(name='Closed', status='closed', created_at=now)
        make_contact(name='Old closed', status='closed', created_at=now - timedelta(days=30))
        make_contact(name='Open', status='new', created_at=now)

        response = admin_api_client.get(EXPORT_URL, {
            'status': 'closed',
            'dateFrom': (now - timedelta(days=1)).date().isoformat(),
        })

        lines = csv_lines(response)
        assert len(lines) == 2
        assert lines[1].startswith('Closed,')

    def test_search_filter(self, admin_api_client, make_contact):
        make_contact(name='Ana Gomez')
        make_contact(name='Bob Stone')

        lines = csv_lines(admin_api_client.get(EXPORT_URL, {'search': 'ANA'}))

        assert len(lines) == 2
        assert lines[1].startswith('Ana Gomez,')

    def test_invalid_date_returns_json_error(self, admin_api_client):
        response = admin_api_client.get(EXPORT_URL, {'dateTo': 'not-a-date'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert 'dateTo' in response.data['errors']
