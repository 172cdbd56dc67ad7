"""
Tests for the contact submission flow and the admin contact endpoints.
"""
import math
import smtplib
import uuid
from datetime import timedelta
from unittest.mock import patch, MagicMock

import pytest
from django.core import mail
from django.utils import timezone
from rest_framework import status

from contact.models import ContactSubmission, ContactNote, ContactFormRateLimit, budget_display
from contact.services.notifications import NotificationDispatcher
from contact.services.tag_classifier import classify
from contact.tasks import send_submitter_confirmation


SUBMIT_URL = '/api/contact'
CONTACTS_URL = '/api/admin/contacts'


def contact_url(contact_id):
    return f'{CONTACTS_URL}/{contact_id}'


@pytest.fixture
def valid_payload():
    return {
        'name': 'Ana Gomez',
        'email': 'ana@x.com',
        'subject': 'AI app for my shop',
        'message': 'I want an AI powered mobile app using machine learning',
        'budget': 'medium',
    }


class TestTagClassifier:

    def test_multiple_labels_in_fixed_order(self):
        message = 'Need a website with a cloud data pipeline and a mobile app'
        assert classify(message) == ['Cloud', 'Data Science', 'Mobile', 'Web Development']

    def test_case_insensitive(self):
        assert classify('SECURITY review for AWS') == ['Cloud', 'Security']

    def test_substring_matching(self):
        # "email" contains "ai"
        assert classify('Please email me') == ['AI/ML']

    def test_no_keywords(self):
        assert classify('Hello there, how do you do?') == []

    def test_empty_message(self):
        assert classify('') == []


@pytest.mark.django_db
class TestContactModel:

    def test_tags_computed_on_creation(self, make_contact):
        contact = make_contact(message='Looking for compliance and security help')
        assert contact.tags == ['Security']

    def test_tags_not_recomputed_on_update(self, make_contact):
        contact = make_contact(message='Cloud migration')
        contact.message = 'Mobile app'
        contact.save()
        contact.refresh_from_db()
        assert contact.tags == ['Cloud']

    def test_defaults(self, make_contact):
        contact = make_contact()
        assert contact.status == 'new'
        assert contact.priority == 'medium'
        assert contact.budget == 'discuss'
        assert contact.source == 'website'
        assert contact.response is None

    def test_mark_responded(self, make_contact):
        contact = make_contact()
        contact.mark_responded("Thanks, we'll follow up")
        contact.refresh_from_db()
        assert contact.status == 'responded'
        assert contact.response['message'] == "Thanks, we'll follow up"
        assert contact.response['respondedBy'] == 'admin'
        assert contact.response['respondedAt'] is not None

    def test_add_note_keeps_order(self, make_contact):
        contact = make_contact()
        contact.add_note('first')
        contact.add_note('second')
        assert [note.text for note in contact.notes.all()] == ['first', 'second']
        assert all(note.author == 'admin' for note in contact.notes.all())

    def test_get_stats(self, make_contact):
        make_contact()
        make_contact(status='in_progress')
        make_contact(status='closed')
        make_contact(status='closed')
        assert ContactSubmission.objects.get_stats() == {
            'total': 4,
            'new': 1,
            'inProgress': 1,
            'responded': 0,
            'closed': 2,
        }

    def test_budget_display(self):
        assert budget_display('large') == 'Large Project ($100K+)'
        assert budget_display('discuss') == "Let's Discuss"
        assert budget_display('unknown') == 'Not specified'


@pytest.mark.django_db
class TestContactFormSubmission:
    """Test public contact form submission."""

    def test_submit_valid_contact_form(self, api_client, valid_payload):
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        data = response.data['data']
        assert data['status'] == 'new'
        assert data['budget'] == 'medium'
        assert 'AI/ML' in data['tags']
        assert 'Mobile' in data['tags']
        assert data['response'] is None
        assert data['notes'] == []
        assert ContactSubmission.objects.count() == 1

    def test_tags_equal_classifier_output(self, api_client, valid_payload):
        valid_payload['message'] = 'Our analytics website needs a security audit'
        api_client.post(SUBMIT_URL, valid_payload, format='json')

        contact = ContactSubmission.objects.get()
        assert contact.tags == classify(valid_payload['message'])

    def test_input_is_trimmed_and_email_lowercased(self, api_client, valid_payload):
        valid_payload['name'] = '  Ana Gomez  '
        valid_payload['email'] = '  Ana@X.COM '
        api_client.post(SUBMIT_URL, valid_payload, format='json')

        contact = ContactSubmission.objects.get()
        assert contact.name == 'Ana Gomez'
        assert contact.email == 'ana@x.com'

    def test_optional_fields_default(self, api_client, valid_payload):
        del valid_payload['budget']
        api_client.post(SUBMIT_URL, valid_payload, format='json')

        contact = ContactSubmission.objects.get()
        assert contact.budget == 'discuss'
        assert contact.phone == ''
        assert contact.company == ''

    def test_provenance_taken_from_request(self, api_client, valid_payload):
        valid_payload['ip_address'] = '6.6.6.6'
        valid_payload['status'] = 'closed'
        api_client.post(
            SUBMIT_URL,
            valid_payload,
            format='json',
            HTTP_X_FORWARDED_FOR='203.0.113.7, 10.0.0.1',
            HTTP_USER_AGENT='Mozilla/5.0'
        )

        contact = ContactSubmission.objects.get()
        assert contact.ip_address == '203.0.113.7'
        assert contact.user_agent == 'Mozilla/5.0'
        assert contact.status == 'new'

    @pytest.mark.parametrize('missing', ['name', 'email', 'subject', 'message'])
    def test_missing_required_field(self, api_client, valid_payload, missing):
        del valid_payload[missing]
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'] == 'Validation failed'
        assert missing in response.data['errors']
        assert ContactSubmission.objects.count() == 0

    @pytest.mark.parametrize('field,length', [
        ('name', 101),
        ('subject', 201),
        ('message', 2001),
        ('phone', 21),
        ('company', 101),
    ])
    def test_length_bounds(self, api_client, valid_payload, field, length):
        valid_payload[field] = 'x' * length
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data['errors']
        assert ContactSubmission.objects.count() == 0

    def test_invalid_email(self, api_client, valid_payload):
        valid_payload['email'] = 'invalid-email'
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data['errors']

    def test_invalid_budget(self, api_client, valid_payload):
        valid_payload['budget'] = 'enormous'
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'budget' in response.data['errors']

    def test_sends_operator_and_confirmation_emails(self, api_client, valid_payload):
        api_client.post(SUBMIT_URL, valid_payload, format='json')

        subjects = sorted(message.subject for message in mail.outbox)
        assert subjects == [
            'New Contact Form Submission: AI app for my shop',
            'Thank you for contacting TekLegion',
        ]
        confirmation = next(m for m in mail.outbox if m.to == ['ana@x.com'])
        assert 'AI app for my shop' in confirmation.body

    def test_email_failure_does_not_fail_submission(self, api_client, valid_payload):
        with patch(
            'contact.tasks.EmailMultiAlternatives.send',
            side_effect=smtplib.SMTPException('connection refused')
        ):
            response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert ContactSubmission.objects.count() == 1

    def test_broker_failure_does_not_fail_submission(self, api_client, valid_payload):
        with patch(
            'contact.tasks.send_operator_notification.delay',
            side_effect=ConnectionError('broker down')
        ):
            response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert ContactSubmission.objects.count() == 1
        # The confirmation still goes out
        assert [m.to for m in mail.outbox] == [['ana@x.com']]

    def test_disable_email_sends_nothing(self, api_client, valid_payload, settings):
        settings.DISABLE_EMAIL = True
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert mail.outbox == []


@pytest.mark.django_db
class TestRateLimiting:
    """Test rate limiting for contact form."""

    def test_rate_limit_per_hour(self, api_client, valid_payload, settings):
        settings.CONTACT_FORM_RATE_LIMIT_PER_HOUR = 2

        for i in range(2):
            valid_payload['email'] = f'user{i}@example.com'
            response = api_client.post(SUBMIT_URL, valid_payload, format='json')
            assert response.status_code == status.HTTP_201_CREATED

        valid_payload['email'] = 'user3@example.com'
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.data['success'] is False
        assert response.data['retry_after'] > 0
        assert ContactSubmission.objects.count() == 2

    def test_rate_limit_per_email(self, api_client, valid_payload, settings):
        settings.CONTACT_FORM_RATE_LIMIT_PER_DAY = 1

        response = api_client.post(SUBMIT_URL, valid_payload, format='json')
        assert response.status_code == status.HTTP_201_CREATED

        valid_payload['email'] = 'ANA@x.com'
        response = api_client.post(
            SUBMIT_URL, valid_payload, format='json', REMOTE_ADDR='10.1.1.1'
        )
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_invalid_submissions_do_not_count(self, api_client, valid_payload, settings):
        settings.CONTACT_FORM_RATE_LIMIT_PER_HOUR = 1

        api_client.post(SUBMIT_URL, {'name': 'x'}, format='json')
        response = api_client.post(SUBMIT_URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert ContactFormRateLimit.objects.get(identifier_type='ip').count == 1


class TestNotificationDispatcher:

    def test_queues_both_notifications(self):
        operator_task, confirmation_task = MagicMock(), MagicMock()
        dispatcher = NotificationDispatcher(operator_task, confirmation_task)
        contact = MagicMock(pk=uuid.uuid4())

        assert dispatcher.notify_operator(contact) is True
        assert dispatcher.confirm_to_submitter(contact, 'Custom body', subject='Re: Hi') is True

        operator_task.delay.assert_called_once_with(str(contact.pk))
        confirmation_task.delay.assert_called_once_with(
            str(contact.pk), message='Custom body', subject='Re: Hi'
        )

    def test_failures_are_swallowed(self, caplog):
        failing = MagicMock()
        failing.delay.side_effect = RuntimeError('broker unreachable')
        dispatcher = NotificationDispatcher(failing, failing)

        assert dispatcher.notify_operator(MagicMock(pk='abc')) is False
        assert 'operator notification for contact abc failed' in caplog.text

    def test_disabled_dispatcher_queues_nothing(self):
        task = MagicMock()
        dispatcher = NotificationDispatcher(task, task, enabled=False)

        assert dispatcher.notify_operator(MagicMock(pk='abc')) is False
        task.delay.assert_not_called()


@pytest.mark.django_db
class TestEmailTasks:

    def test_confirmation_with_override(self, make_contact):
        contact = make_contact(email='client@example.com')
        send_submitter_confirmation(str(contact.id), message='Our answer', subject='Re: Hello')

        assert len(mail.outbox) == 1
        assert mail.outbox[0].subject == 'Re: Hello'
        assert 'Our answer' in mail.outbox[0].body
        assert mail.outbox[0].alternatives[0][1] == 'text/html'

    def test_missing_contact_is_skipped(self):
        result = send_submitter_confirmation(str(uuid.uuid4()))
        assert 'not found' in result
        assert mail.outbox == []


@pytest.mark.django_db
class TestAdminAuthentication:

    def test_missing_token(self, api_client):
        response = api_client.get(CONTACTS_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'success': False, 'message': 'Unauthorized access'}

    def test_wrong_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer nope')
        response = api_client.get(CONTACTS_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unset_secret_rejects_everything(self, api_client, settings):
        settings.ADMIN_TOKEN = ''
        api_client.credentials(HTTP_AUTHORIZATION='Bearer ')
        response = api_client.get(CONTACTS_URL)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unauthorized_delete_touches_nothing(self, api_client, make_contact):
        contact = make_contact()
        response = api_client.delete(contact_url(contact.id))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert ContactSubmission.objects.filter(id=contact.id).exists()


@pytest.mark.django_db
class TestContactList:

    def test_pagination_arithmetic(self, admin_api_client, make_contact):
        for i in range(25):
            make_contact(name=f'Person {i}')

        response = admin_api_client.get(CONTACTS_URL, {'page': 3, 'limit': 10})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['pagination'] == {
            'current': 3,
            'pages': math.ceil(25 / 10),
            'total': 25,
            'limit': 10,
        }
        assert len(response.data['data']) == 5

    def test_pages_cover_everything_once(self, admin_api_client, make_contact):
        now = timezone.now()
        for i in range(7):
            # Identical timestamps exercise the id tie-breaker
            make_contact(name=f'Person {i}', created_at=now - timedelta(minutes=i // 2))

        seen = []
        for page in range(1, 4):
            response = admin_api_client.get(CONTACTS_URL, {'page': page, 'limit': 3})
            seen.extend(item['id'] for item in response.data['data'])

        assert len(seen) == 7
        assert len(set(seen)) == 7

    def test_default_and_max_limit(self, admin_api_client, make_contact):
        make_contact()
        response = admin_api_client.get(CONTACTS_URL)
        assert response.data['pagination']['limit'] == 20

        response = admin_api_client.get(CONTACTS_URL, {'limit': 1000})
        assert response.data['pagination']['limit'] == 100

    def test_empty_result(self, admin_api_client, db):
        response = admin_api_client.get(CONTACTS_URL)
        assert response.data['data'] == []
        assert response.data['pagination']['pages'] == 0
        assert response.data['pagination']['total'] == 0

    def test_search_is_case_insensitive_across_fields(self, admin_api_client, make_contact):
        by_name = make_contact(name='Ana Gomez', email='gomez@example.com')
        by_email = make_contact(name='Bob', email='banana@example.com')
        by_company = make_contact(name='Carl', email='carl@example.com', company='MontANA Ltd')
        make_contact(name='Dora', email='dora@example.com', subject='Hi', message='Nothing')

        response = admin_api_client.get(CONTACTS_URL, {'search': 'ana'})

        ids = {item['id'] for item in response.data['data']}
        assert ids == {str(by_name.id), str(by_email.id), str(by_company.id)}

    def test_search_combines_with_filters(self, admin_api_client, make_contact):
        make_contact(name='Ana', status='new')
        closed = make_contact(name='Anabel', status='closed')

        response = admin_api_client.get(CONTACTS_URL, {'search': 'ana', 'status': 'closed'})

        assert [item['id'] for item in response.data['data']] == [str(closed.id)]

    def test_exact_filters(self, admin_api_client, make_contact):
        make_contact(priority='low', budget='small')
        urgent = make_contact(priority='urgent', budget='large')

        response = admin_api_client.get(CONTACTS_URL, {'priority': 'urgent', 'budget': 'large'})

        assert [item['id'] for item in response.data['data']] == [str(urgent.id)]

    def test_date_range_is_inclusive(self, admin_api_client, make_contact):
        day = timezone.now().replace(hour=12, minute=0, second=0, microsecond=0) - timedelta(days=3)
        before = make_contact(created_at=day - timedelta(days=2))
        on_day = make_contact(created_at=day.replace(hour=23, minute=30))
        make_contact(created_at=day + timedelta(days=2))

        response = admin_api_client.get(CONTACTS_URL, {
            'dateFrom': (day - timedelta(days=2)).date().isoformat(),
            'dateTo': day.date().isoformat(),
        })

        ids = {item['id'] for item in response.data['data']}
        assert ids == {str(before.id), str(on_day.id)}

    def test_invalid_date_is_rejected(self, admin_api_client, db):
        response = admin_api_client.get(CONTACTS_URL, {'dateFrom': 'yesterday'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'dateFrom' in response.data['errors']

    def test_sorting(self, admin_api_client, make_contact):
        make_contact(name='Charlie')
        make_contact(name='Alice')
        make_contact(name='Bob')

        response = admin_api_client.get(CONTACTS_URL, {'sortBy': 'name', 'sortOrder': 'asc'})
        assert [item['name'] for item in response.data['data']] == ['Alice', 'Bob', 'Charlie']

        response = admin_api_client.get(CONTACTS_URL, {'sortBy': 'name'})
        assert [item['name'] for item in response.data['data']] == ['Charlie', 'Bob', 'Alice']

    @pytest.mark.parametrize('sort_by', ['message', 'phone'])
    def test_sorting_by_any_column(self, admin_api_client, make_contact, sort_by):
        make_contact(name='B', message='bbb', phone='2')
        make_contact(name='A', message='aaa', phone='1')
        make_contact(name='C', message='ccc', phone='3')

        response = admin_api_client.get(CONTACTS_URL, {'sortBy': sort_by, 'sortOrder': 'asc'})

        assert [item['name'] for item in response.data['data']] == ['A', 'B', 'C']

    def test_sorting_by_camel_case_alias(self, admin_api_client, make_contact):
        make_contact(name='First', ip_address='10.0.0.2')
        make_contact(name='Second', ip_address='10.0.0.1')

        response = admin_api_client.get(CONTACTS_URL, {'sortBy': 'ipAddress', 'sortOrder': 'asc'})

        assert [item['name'] for item in response.data['data']] == ['Second', 'First']

    def test_default_sort_newest_first(self, admin_api_client, make_contact):
        now = timezone.now()
        old = make_contact(created_at=now - timedelta(days=1))
        new = make_contact(created_at=now)

        response = admin_api_client.get(CONTACTS_URL, {'sortBy': 'bogus'})
        assert [item['id'] for item in response.data['data']] == [str(new.id), str(old.id)]


@pytest.mark.django_db
class TestContactDetail:

    def test_get_contact(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.get(contact_url(contact.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['id'] == str(contact.id)
        assert response.data['data']['budgetDisplay'] == "Let's Discuss"

    def test_unknown_contact(self, admin_api_client, db):
        response = admin_api_client.get(contact_url(uuid.uuid4()))
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'success': False, 'message': 'Contact not found'}

    @pytest.mark.parametrize('method', ['get', 'put', 'delete'])
    def test_malformed_id_is_not_found(self, admin_api_client, db, method):
        response = getattr(admin_api_client, method)(contact_url('not-a-uuid'))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response['Content-Type'] == 'application/json'
        assert response.data == {'success': False, 'message': 'Contact not found'}

    def test_respond_malformed_id_is_not_found(self, admin_api_client, db):
        response = admin_api_client.post(
            f"{contact_url('not-a-uuid')}/respond", {'message': 'Hi'}, format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Contact not found'

    def test_update_status_and_priority(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.put(
            contact_url(contact.id),
            {'status': 'in_progress', 'priority': 'high'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        contact.refresh_from_db()
        assert contact.status == 'in_progress'
        assert contact.priority == 'high'

    def test_update_with_response_forces_responded(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.put(
            contact_url(contact.id),
            {'response': "Thanks, we'll follow up", 'status': 'closed'},
            format='json'
        )

        data = response.data['data']
        assert data['status'] == 'responded'
        assert data['response']['message'] == "Thanks, we'll follow up"
        assert data['response']['respondedBy'] == 'admin'

    def test_update_appends_note(self, admin_api_client, make_contact):
        contact = make_contact()
        admin_api_client.patch(contact_url(contact.id), {'notes': 'Called back'}, format='json')
        response = admin_api_client.patch(contact_url(contact.id), {'notes': 'Sent quote'}, format='json')

        notes = response.data['data']['notes']
        assert [note['text'] for note in notes] == ['Called back', 'Sent quote']
        assert notes[0]['author'] == 'admin'
        assert notes[0]['timestamp']
        assert ContactNote.objects.filter(contact=contact).count() == 2

    def test_update_bumps_updated_at(self, admin_api_client, make_contact):
        contact = make_contact()
        before = contact.updated_at
        admin_api_client.patch(contact_url(contact.id), {'notes': 'Note'}, format='json')
        contact.refresh_from_db()
        assert contact.updated_at > before

    def test_update_rejects_invalid_enum(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.put(contact_url(contact.id), {'status': 'archived'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'status' in response.data['errors']

    def test_responded_requires_response(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.put(contact_url(contact.id), {'status': 'responded'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        contact.refresh_from_db()
        assert contact.status == 'new'

    def test_update_unknown_contact(self, admin_api_client, db):
        response = admin_api_client.put(contact_url(uuid.uuid4()), {'status': 'closed'}, format='json')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, admin_api_client, make_contact):
        contact = make_contact()
        contact.add_note('to be removed')

        response = admin_api_client.delete(contact_url(contact.id))
        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert not ContactSubmission.objects.filter(id=contact.id).exists()
        assert ContactNote.objects.count() == 0

        response = admin_api_client.delete(contact_url(contact.id))
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestContactRespond:

    def test_respond_sends_email(self, admin_api_client, make_contact):
        contact = make_contact(subject='Website rebuild', email='client@example.com')

        response = admin_api_client.post(
            f'{contact_url(contact.id)}/respond',
            {'message': 'We can start next week.'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['status'] == 'responded'
        assert response.data['data']['response']['message'] == 'We can start next week.'

        assert len(mail.outbox) == 1
        email = mail.outbox[0]
        assert email.subject == 'Re: Website rebuild'
        assert email.to == ['client@example.com']
        assert "Here's our response:\n\nWe can start next week." in email.body

    def test_respond_without_email(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.post(
            f'{contact_url(contact.id)}/respond',
            {'message': 'Noted', 'sendEmail': False},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert mail.outbox == []

    def test_respond_email_failure_is_swallowed(self, admin_api_client, make_contact):
        contact = make_contact()
        with patch(
            'contact.tasks.EmailMultiAlternatives.send',
            side_effect=smtplib.SMTPException('boom')
        ):
            response = admin_api_client.post(
                f'{contact_url(contact.id)}/respond',
                {'message': 'Noted'},
                format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        contact.refresh_from_db()
        assert contact.status == 'responded'

    def test_respond_requires_message(self, admin_api_client, make_contact):
        contact = make_contact()
        response = admin_api_client.post(f'{contact_url(contact.id)}/respond', {}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data['errors']

    def test_respond_unknown_contact(self, admin_api_client, db):
        response = admin_api_client.post(
            f'{contact_url(uuid.uuid4())}/respond', {'message': 'Hi'}, format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Contact not found'
