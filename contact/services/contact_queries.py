"""
Admin queries over contact submissions.

Filtering, sorting and pagination for the admin list, plus the CSV
rendering used by the export endpoint.
"""
import logging
import math
from datetime import timezone as dt_timezone

from contact.filters import ContactSubmissionFilter
from contact.models import ContactSubmission

logger = logging.getLogger(__name__)


DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _camel_case(name):
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


# Accepted ``sortBy`` values: every stored column, by model field name or
# by its camelCase alias as sent by the admin UI.
SORT_FIELDS = {}
for _field in ContactSubmission._meta.concrete_fields:
    SORT_FIELDS[_field.name] = _field.name
    SORT_FIELDS[_camel_case(_field.name)] = _field.name


CSV_HEADER = [
    'Name', 'Email', 'Subject', 'Message', 'Budget',
    'Company', 'Phone', 'Status', 'Priority', 'Created At',
]


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def filter_contacts(params, queryset=None):
    """Apply the admin filter parameters (status, priority, budget, search, dateFrom, dateTo)."""
    if queryset is None:
        queryset = ContactSubmission.objects.all()
    return ContactSubmissionFilter(params, queryset=queryset).qs


def order_contacts(queryset, sort_by=None, sort_order=None):
    """
    Order by ``sort_by`` (unknown names fall back to ``createdAt``).

    ``sort_order`` is ``asc`` or ``desc`` (default). The primary key is
    always the final ordering key so that pages never overlap.
    """
    field = SORT_FIELDS.get(sort_by or '', 'created_at')
    descending = (sort_order or 'desc').lower() != 'asc'
    prefix = '-' if descending else ''
    return queryset.order_by(f'{prefix}{field}', f'{prefix}id')


def paginate(queryset, page=None, limit=None, default_limit=DEFAULT_PAGE_SIZE, max_limit=MAX_PAGE_SIZE):
    """
    Slice a queryset into one 1-indexed page.

    Returns:
        tuple: (items, pagination) where pagination is
        ``{current, pages, total, limit}``
    """
    page = _positive_int(page, 1)
    limit = min(_positive_int(limit, default_limit), max_limit)

    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit])

    return items, {
        'current': page,
        'pages': math.ceil(total / limit),
        'total': total,
        'limit': limit,
    }


def list_contacts(params, page_size=DEFAULT_PAGE_SIZE, max_limit=MAX_PAGE_SIZE):
    """
    Filtered, sorted, paginated contact list for the admin dashboard.

    Args:
        params: Query parameters (a QueryDict or plain dict)
        page_size: ``limit`` used when none is given
        max_limit: Upper bound for ``limit``

    Returns:
        dict: ``{'items': [...], 'pagination': {...}}``
    """
    queryset = filter_contacts(params)
    queryset = order_contacts(queryset, params.get('sortBy'), params.get('sortOrder'))
    items, pagination = paginate(
        queryset.prefetch_related('notes'),
        params.get('page'),
        params.get('limit'),
        default_limit=page_size,
        max_limit=max_limit,
    )
    return {'items': items, 'pagination': pagination}


def format_timestamp(value):
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    value = value.astimezone(dt_timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def csv_cell(value, always_quote=False):
    """
    Render one CSV field.

    Fields are quoted when they contain a separator, a quote or a line
    break, or when ``always_quote`` is set. Embedded quotes are doubled.
    """
    text = '' if value is None else str(value)
    if always_quote or any(char in text for char in ',"\r\n'):
        return '"' + text.replace('"', '""') + '"'
    return text


def contact_csv_row(contact):
    return [
        csv_cell(contact.name),
        csv_cell(contact.email),
        csv_cell(contact.subject),
        csv_cell(contact.message, always_quote=True),
        csv_cell(contact.budget_display),
        csv_cell(contact.company),
        csv_cell(contact.phone),
        csv_cell(contact.status),
        csv_cell(contact.priority),
        csv_cell(format_timestamp(contact.created_at)),
    ]


def iter_contacts_csv(queryset):
    """
    Yield CSV lines for the given contacts, newest first.

    The first line is the fixed header.
    """
    queryset = queryset.order_by('-created_at', '-id')
    logger.info(f"Exporting {queryset.count()} contacts to CSV")

    yield ','.join(CSV_HEADER) + '\n'
    for contact in queryset.iterator():
        yield ','.join(contact_csv_row(contact)) + '\n'
