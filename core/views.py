"""
Status endpoints: liveness check and API index.
"""
import time

from django.conf import settings
from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


API_VERSION = '1.0.0'

_started_at = time.monotonic()


class HealthView(APIView):
    """GET /health"""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            'status': 'OK',
            'timestamp': timezone.now(),
            'uptime': round(time.monotonic() - _started_at, 3),
            'environment': settings.ENVIRONMENT,
        })


class ApiInfoView(APIView):
    """GET /api"""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            'message': f'{settings.SITE_NAME} API Server',
            'version': API_VERSION,
            'status': 'Running',
            'endpoints': {
                'health': '/health',
                'contact': '/api/contact',
                'analytics': '/api/analytics/track',
                'admin': '/api/admin',
            },
        })
