"""
Admin API permission.

The admin surface is protected by a single shared secret sent as
``Authorization: Bearer <token>``. There are no user accounts behind it.
"""
import hmac

from django.conf import settings
from rest_framework import permissions

from .exceptions import Unauthorized


def get_bearer_token(request):
    """Extract the token from an ``Authorization: Bearer`` header, or None."""
    header = request.META.get('HTTP_AUTHORIZATION', '')
    if not header.startswith('Bearer '):
        return None
    token = header[len('Bearer '):].strip()
    return token or None


class HasAdminToken(permissions.BasePermission):
    """
    Grant access when the bearer token equals ``settings.ADMIN_TOKEN``.

    Raises ``Unauthorized`` (401) instead of returning False so the
    response never turns into a 403.
    """

    def __init__(self, admin_token=None):
        self.admin_token = admin_token

    def has_permission(self, request, view):
        expected = self.admin_token if self.admin_token is not None else settings.ADMIN_TOKEN
        token = get_bearer_token(request)

        if not expected or not token:
            raise Unauthorized()
        if not hmac.compare_digest(token.encode(), expected.encode()):
            raise Unauthorized()
        return True
