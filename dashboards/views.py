"""
Admin Dashboard Views

Read-only reporting endpoints. All of them require the admin token.
"""
import logging

from django.conf import settings
from django.db import connection
from rest_framework.views import APIView
from rest_framework.response import Response

from core.permissions import HasAdminToken
from .services.admin_dashboard import AdminDashboardService, parse_days, resolve_range

logger = logging.getLogger(__name__)


class BaseAdminView(APIView):
    """Base view with common functionality for admin endpoints."""

    permission_classes = [HasAdminToken]

    def get_service(self):
        return AdminDashboardService()


class DashboardView(BaseAdminView):
    """
    GET /api/admin/dashboard

    Query Parameters:
    - days: Reporting period in days (default: 30)
    """

    def get(self, request):
        days = parse_days(request.query_params.get('days'))
        data = self.get_service().get_dashboard(days)
        return Response({'success': True, 'data': data})


class AdminAnalyticsView(BaseAdminView):
    """
    GET /api/admin/analytics

    Query Parameters:
    - days: Reporting period in days (default: 30)
    - startDate, endDate: Explicit range; takes precedence over days
    """

    def get(self, request):
        service = self.get_service()
        report_range = resolve_range(request.query_params, now=service.now)
        data = service.get_analytics(report_range)
        return Response({'success': True, 'data': data})


class AdminSettingsView(BaseAdminView):
    """
    GET /api/admin/settings

    Reports how the backend is configured. Secrets are never included.
    """

    def get(self, request):
        email_configured = bool(settings.EMAIL_HOST_USER and settings.EMAIL_HOST_PASSWORD)
        return Response({
            'success': True,
            'data': {
                'emailService': {
                    'configured': email_configured,
                    'backend': settings.EMAIL_BACKEND,
                    'host': settings.EMAIL_HOST,
                    'disabled': settings.DISABLE_EMAIL,
                },
                'database': {
                    'type': connection.vendor,
                },
                'features': {
                    'analytics': True,
                    'emailNotifications': not settings.DISABLE_EMAIL,
                    'contactForm': True,
                    'adminPanel': True,
                },
                'rateLimits': {
                    'perIpPerHour': settings.CONTACT_FORM_RATE_LIMIT_PER_HOUR,
                    'perEmailPerDay': settings.CONTACT_FORM_RATE_LIMIT_PER_DAY,
                },
            }
        })
