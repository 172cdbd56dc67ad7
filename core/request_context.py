"""
Helpers for reading client provenance off a request.

Provenance always comes from the request itself, never from the payload.
"""


def get_client_ip(request):
    """Get client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or 'unknown'


def get_user_agent(request):
    """Browser user agent, truncated for storage."""
    return request.META.get('HTTP_USER_AGENT', '')[:500] or 'Unknown'
