"""
Contact Management Views

API endpoints for contact form submission and admin management.
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from core.permissions import HasAdminToken
from core.request_context import get_client_ip, get_user_agent
from .models import ContactSubmission
from .serializers import (
    ContactFormSubmitSerializer,
    ContactSubmissionSerializer,
    ContactUpdateSerializer,
    ContactRespondSerializer,
)
from .rate_limiting import rate_limit_contact_form
from .services.contact_queries import list_contacts
from .services.notifications import NotificationDispatcher

logger = logging.getLogger(__name__)


def get_dispatcher():
    return NotificationDispatcher(enabled=not settings.DISABLE_EMAIL)


class ContactFormSubmitView(APIView):
    """
    Public endpoint for contact form submissions.

    POST /api/contact

    No authentication required. Rate limited to prevent spam.
    """

    permission_classes = [AllowAny]

    @rate_limit_contact_form()
    def post(self, request):
        """Submit a contact form."""
        serializer = ContactFormSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contact = serializer.save(
            ip_address=get_client_ip(request),
            user_agent=get_user_agent(request)
        )
        logger.info(f"New contact submission {contact.id} from {contact.email}")

        # Best effort; failures are logged by the dispatcher
        dispatcher = get_dispatcher()
        dispatcher.notify_operator(contact)
        dispatcher.confirm_to_submitter(contact)

        return Response(
            {
                'success': True,
                'message': "Thank you for your message! We'll get back to you within 24 hours.",
                'data': ContactSubmissionSerializer(contact).data
            },
            status=status.HTTP_201_CREATED
        )


class AdminContactMixin:
    permission_classes = [HasAdminToken]
    not_found_message = 'Contact not found'

    def get_contact(self, id):
        try:
            return get_object_or_404(ContactSubmission, id=id)
        except ValidationError:
            # Malformed UUID
            raise Http404


class ContactListView(AdminContactMixin, APIView):
    """
    List contact submissions (admin only).

    GET /api/admin/contacts

    Query Parameters:
    - status, priority, budget: exact match
    - search: substring of name, email, subject, message or company
    - dateFrom, dateTo: created_at range (inclusive)
    - sortBy: field name, camelCase or snake_case (default: createdAt)
    - sortOrder: asc or desc (default: desc)
    - page: Page number (default: 1)
    - limit: Items per page (default: 20, max: 100)
    """

    def get(self, request):
        result = list_contacts(
            request.query_params,
            page_size=settings.CONTACT_PAGE_SIZE,
            max_limit=settings.CONTACT_MAX_PAGE_SIZE
        )
        return Response({
            'success': True,
            'data': ContactSubmissionSerializer(result['items'], many=True).data,
            'pagination': result['pagination']
        })


class ContactDetailView(AdminContactMixin, APIView):
    """
    GET /api/admin/contacts/:id
    PUT|PATCH /api/admin/contacts/:id
    DELETE /api/admin/contacts/:id
    """

    def get(self, request, id):
        contact = self.get_contact(id)
        return Response({
            'success': True,
            'data': ContactSubmissionSerializer(contact).data
        })

    def put(self, request, id):
        contact = self.get_contact(id)

        serializer = ContactUpdateSerializer(contact, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        contact = serializer.save()
        logger.info(f"Contact {contact.id} updated (status={contact.status}, priority={contact.priority})")

        return Response({
            'success': True,
            'message': 'Contact updated successfully',
            'data': ContactSubmissionSerializer(contact).data
        })

    patch = put

    def delete(self, request, id):
        contact = self.get_contact(id)
        contact.delete()
        logger.info(f"Contact {id} deleted")

        return Response({
            'success': True,
            'message': 'Contact deleted successfully'
        })


class ContactRespondView(AdminContactMixin, APIView):
    """
    Record a response to a contact and optionally e-mail it.

    POST /api/admin/contacts/:id/respond
    """

    def post(self, request, id):
        contact = self.get_contact(id)

        serializer = ContactRespondSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = serializer.validated_data['message']

        contact.mark_responded(message)
        logger.info(f"Response recorded for contact {contact.id}")

        if serializer.validated_data['sendEmail']:
            get_dispatcher().confirm_to_submitter(
                contact,
                override_message=(
                    f"Thank you for contacting {settings.SITE_NAME}. "
                    f"Here's our response:\n\n{message}"
                ),
                subject=f"Re: {contact.subject}"
            )

        return Response({
            'success': True,
            'message': 'Response sent successfully',
            'data': ContactSubmissionSerializer(contact).data
        })
