"""
Admin Export Views
"""
import logging

from django.http import HttpResponse
from rest_framework.views import APIView

from contact.services.contact_queries import filter_contacts, iter_contacts_csv
from core.permissions import HasAdminToken

logger = logging.getLogger(__name__)


class ExportContactsCsvView(APIView):
    """
    GET /api/admin/export/contacts

    Download every contact matching the filters as CSV, newest first.

    Query Parameters:
    - status, priority, budget: exact match
    - search: substring of name, email, subject, message or company
    - dateFrom, dateTo: created_at range (inclusive)
    """

    permission_classes = [HasAdminToken]

    def get(self, request):
        # Filtering runs before the response exists so bad dates give a 400
        contacts = filter_contacts(request.query_params)

        response = HttpResponse(content_type='text/csv')
        response['Content-Disposition'] = 'attachment; filename=contacts.csv'
        for line in iter_contacts_csv(contacts):
            response.write(line)

        return response
