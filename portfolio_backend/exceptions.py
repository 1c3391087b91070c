"""
DRF exception handler producing the API's `{"error": ...}` bodies.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .camel import camelize_keys

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Map exceptions to JSON error bodies.

    400 -> {"error": "Validation failed", "details": {field: [messages]}}
    401 -> {"error": "Unauthorized"}
    other API errors -> {"error": <detail>}
    anything unexpected is logged and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}",
            exc_info=exc,
        )
        set_rollback()
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        details = response.data
        if isinstance(details, dict):
            details = camelize_keys(details)
        else:
            details = {'nonFieldErrors': details}
        response.data = {'error': 'Validation failed', 'details': details}
    elif isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.data = {'error': 'Unauthorized'}
    else:
        detail = response.data.get('detail') if isinstance(response.data, dict) else response.data
        response.data = {'error': str(detail)}

    return response
