"""
API error envelope.

Every error leaving the API is rendered as ``{"success": false, "message": ...}``.
Validation errors keep their per-field detail under ``errors``; persistence
and unexpected failures are logged server-side and sanitized for the caller.
"""
import logging

from django.core.exceptions import PermissionDenied
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Unauthorized(exceptions.APIException):
    """Missing or wrong admin credential."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized access'
    default_code = 'unauthorized'


class PersistenceError(exceptions.APIException):
    """Storage failure; the caller only ever sees the generic message."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An internal error occurred. Please try again later.'
    default_code = 'persistence_error'


def _message_from_detail(detail):
    if isinstance(detail, (list, tuple)) and detail:
        return _message_from_detail(detail[0])
    if isinstance(detail, dict):
        return 'Validation failed'
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF exception handler producing the ``{success, message}`` envelope.

    Registered through ``REST_FRAMEWORK['EXCEPTION_HANDLER']``.
    """
    view = context.get('view')

    if isinstance(exc, DatabaseError):
        logger.exception(
            "Database error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        exc = PersistenceError()

    if isinstance(exc, Http404):
        message = getattr(view, 'not_found_message', None) or 'Resource not found'
        exc = exceptions.NotFound(message)
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        # Not an API exception: Django's 500 handling takes over.
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'success': False,
            'message': 'Validation failed',
            'errors': exc.detail if isinstance(exc.detail, dict) else {'non_field_errors': exc.detail},
        }
        return response

    if isinstance(exc, exceptions.NotFound) and getattr(view, 'not_found_message', None):
        message = view.not_found_message
    else:
        message = _message_from_detail(exc.detail)

    data = {'success': False, 'message': message}
    wait = getattr(exc, 'wait', None)
    if wait:
        data['retry_after'] = int(wait)
    response.data = data
    return response
