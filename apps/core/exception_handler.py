"""
DRF exception handler producing the ``{success, message, ...}`` envelope.
"""
import logging

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from apps.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = 'Internal server error'


def _message_from(detail):
    """Flatten a DRF error detail into a single message string."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _message_from(value)
        return ''
    if isinstance(detail, list):
        return _message_from(detail[0]) if detail else ''
    return str(detail)


def envelope_exception_handler(exc, context):
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'

    response = exception_handler(exc, context)

    if response is not None:
        payload = {'success': False, 'message': _message_from(response.data)}
        if isinstance(exc, ValidationError):
            if exc.errors:
                payload['errors'] = exc.errors
        elif isinstance(response.data, dict) and 'detail' not in response.data:
            payload['errors'] = response.data
        response.data = payload
        return response

    if isinstance(exc, DatabaseError):
        logger.error("Database failure in %s: %s", view_name, exc, exc_info=exc)
    else:
        logger.error("Unhandled error in %s: %s", view_name, exc, exc_info=exc)

    set_rollback()
    payload = {'success': False, 'message': GENERIC_FAILURE_MESSAGE}
    if settings.DEBUG:
        payload['error'] = str(exc)
    return Response(payload, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
