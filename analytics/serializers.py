"""
Site Analytics Serializers

Tracking is best effort: apart from ``event`` and ``page``, malformed
values are replaced by their defaults instead of failing the request.
"""
import uuid
from datetime import datetime, timezone as dt_timezone

from django.utils import timezone
from rest_framework import serializers

from core.request_context import get_client_ip, get_user_agent
from .models import AnalyticsEvent


class LenientCharField(serializers.Field):
    """
    Optional text value that never fails validation.

    Strings are trimmed and truncated to ``max_length``; numbers are
    stringified; anything else (or blank) becomes ``fallback``.
    """

    def __init__(self, max_length, fallback=None, **kwargs):
        self.max_length = max_length
        self.fallback = fallback
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is serializers.empty or data is None:
            return True, self.fallback
        return False, data

    def to_internal_value(self, data):
        if isinstance(data, bool):
            return self.fallback
        if isinstance(data, (int, float)):
            data = str(data)
        if not isinstance(data, str):
            return self.fallback
        data = data.strip()
        if not data:
            return self.fallback
        return data[:self.max_length]

    def to_representation(self, value):
        return value


class LenientChoiceField(LenientCharField):
    """Known choice, or ``fallback`` when missing or unrecognised."""

    def __init__(self, choices, **kwargs):
        self.choices = [value for value, _label in choices]
        super().__init__(max_length=max(len(value) for value in self.choices), **kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            return self.fallback
        data = data.strip().lower()
        return data if data in self.choices else self.fallback


class MetadataField(serializers.Field):
    """JSON object with string keys; anything else is stored as ``{}``."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is serializers.empty or data is None:
            return True, {}
        return False, data

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            return {}
        return {str(key): value for key, value in data.items()}

    def to_representation(self, value):
        return value


class LenientDateTimeField(serializers.Field):
    """
    Client event time. ISO-8601 strings or epoch milliseconds are
    accepted; unparsable values fall back to the ingestion time.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is serializers.empty or data is None:
            return True, timezone.now()
        return False, data

    def to_internal_value(self, data):
        if isinstance(data, bool):
            return timezone.now()
        if isinstance(data, (int, float)):
            try:
                return datetime.fromtimestamp(data / 1000, tz=dt_timezone.utc)
            except (OverflowError, OSError, ValueError):
                return timezone.now()
        try:
            return serializers.DateTimeField().to_internal_value(data)
        except serializers.ValidationError:
            return timezone.now()

    def to_representation(self, value):
        return value.isoformat()


class TrackEventSerializer(serializers.Serializer):
    """
    Payload sent by the site's tracking script.

    Field names follow the script (camelCase). ``ip_address`` and
    ``user_agent`` are added from the request passed in the context.
    """

    event = serializers.CharField(required=True)
    page = serializers.CharField(required=True)

    referrer = LenientCharField(max_length=500)
    country = LenientCharField(max_length=100, fallback='Unknown')
    city = LenientCharField(max_length=100, fallback='Unknown')
    device = LenientChoiceField(AnalyticsEvent.DEVICE_CHOICES, fallback='desktop')
    browser = LenientCharField(max_length=100, fallback='Unknown')
    os = LenientCharField(max_length=100, fallback='Unknown')
    screenResolution = LenientCharField(max_length=20, fallback='Unknown', source='screen_resolution')
    language = LenientCharField(max_length=20, fallback='en')
    sessionId = LenientCharField(max_length=100, source='session_id')
    userId = LenientCharField(max_length=100, source='user_id')
    metadata = MetadataField()
    timestamp = LenientDateTimeField()

    def validate_event(self, value):
        return value[:100]

    def validate_page(self, value):
        return value[:500]

    def validate(self, attrs):
        request = self.context['request']
        attrs['ip_address'] = get_client_ip(request)
        attrs['user_agent'] = get_user_agent(request)

        if not attrs.get('session_id'):
            header = request.META.get('HTTP_X_SESSION_ID', '').strip()
            attrs['session_id'] = header[:100] or uuid.uuid4().hex

        if not attrs.get('referrer'):
            # The tracking script reports document.referrer inside metadata
            referrer = attrs['metadata'].get('referrer')
            if isinstance(referrer, str) and referrer.strip():
                attrs['referrer'] = referrer.strip()[:500]
            else:
                attrs['referrer'] = 'direct'

        return attrs

    def create(self, validated_data):
        return AnalyticsEvent.objects.create(**validated_data)
