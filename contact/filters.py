"""
Filter sets for the admin contact list and CSV export.
"""
from datetime import datetime, time, timedelta

import django_filters
from django.db.models import Q
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework.exceptions import ValidationError

from .models import ContactSubmission


def parse_date_bound(value, field_name, end_of_day=False):
    """
    Parse a ``dateFrom``/``dateTo`` query value into an aware datetime.

    Accepts a full ISO-8601 datetime or a bare ``YYYY-MM-DD`` date. A bare
    date used as an upper bound covers the whole day.
    """
    value = value.strip()
    try:
        day = parse_date(value)
    except ValueError:
        day = None

    if day is not None:
        if end_of_day:
            parsed = datetime.combine(day + timedelta(days=1), time.min) - timedelta(microseconds=1)
        else:
            parsed = datetime.combine(day, time.min)
    else:
        try:
            parsed = parse_datetime(value)
        except ValueError:
            parsed = None
        if parsed is None:
            raise ValidationError({field_name: ['Enter a valid date or datetime.']})

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


class ContactSubmissionFilter(django_filters.FilterSet):
    """
    Query parameters:
    - status, priority, budget: exact match
    - search: case-insensitive substring over name, email, subject,
      message and company
    - dateFrom, dateTo: inclusive bounds on created_at
    """

    status = django_filters.CharFilter(field_name='status', lookup_expr='exact')
    priority = django_filters.CharFilter(field_name='priority', lookup_expr='exact')
    budget = django_filters.CharFilter(field_name='budget', lookup_expr='exact')
    search = django_filters.CharFilter(method='filter_search')
    dateFrom = django_filters.CharFilter(method='filter_date_from')
    dateTo = django_filters.CharFilter(method='filter_date_to')

    class Meta:
        model = ContactSubmission
        fields = ['status', 'priority', 'budget']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(email__icontains=value) |
            Q(subject__icontains=value) |
            Q(message__icontains=value) |
            Q(company__icontains=value)
        )

    def filter_date_from(self, queryset, name, value):
        return queryset.filter(created_at__gte=parse_date_bound(value, name))

    def filter_date_to(self, queryset, name, value):
        return queryset.filter(created_at__lte=parse_date_bound(value, name, end_of_day=True))
