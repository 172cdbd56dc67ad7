"""
Site Analytics Views
"""
import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from .serializers import TrackEventSerializer

logger = logging.getLogger(__name__)


class TrackEventView(APIView):
    """
    Record one analytics event from the public site.

    POST /api/analytics/track

    Only ``event`` and ``page`` are required; everything else is coerced
    to its default when missing or malformed.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = TrackEventSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        event = serializer.save()
        logger.debug(f"Tracked {event.event} on {event.page} (session {event.session_id})")

        return Response(
            {
                'success': True,
                'data': {'id': str(event.id)}
            },
            status=status.HTTP_201_CREATED
        )
