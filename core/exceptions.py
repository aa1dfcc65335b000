"""
Core — Exception Handling

Query-layer exceptions and the DRF exception handler that renders every
error in the standard envelope.

Storage errors (django.db.DatabaseError) are not wrapped by the query
layer; they reach the handler unchanged and are reported as
STORAGE_FAILURE, never as a missing resource.

@file core/exceptions.py
"""

import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('wilayah')


# ---------------------------------------------------------------------------
# Query-layer exceptions
# ---------------------------------------------------------------------------

class InvalidFormat(APIException):
    """Raised when a code violates its fixed-width / digits-only format."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid format.'
    default_code = 'INVALID_FORMAT'

    def __init__(self, field, detail=None):
        self.field = field
        super().__init__(detail={field: [detail or self.default_detail]})


class UnsupportedSortField(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Unsupported sort field.'
    default_code = 'UNSUPPORTED_SORT_FIELD'

    def __init__(self, field, allowed=()):
        self.field = field
        self.allowed = tuple(allowed)
        super().__init__(detail={
            'sortBy': [f"'{field}' is not one of: {', '.join(self.allowed)}."],
        })


class UnsupportedSortOrder(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Unsupported sort order.'
    default_code = 'UNSUPPORTED_SORT_ORDER'

    def __init__(self, order, allowed=()):
        self.order = order
        self.allowed = tuple(allowed)
        super().__init__(detail={
            'sortOrder': [f"'{order}' is not one of: {', '.join(self.allowed)}."],
        })


class ResourceNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'RESOURCE_NOT_FOUND'


# ---------------------------------------------------------------------------
# Standard exception handler
# ---------------------------------------------------------------------------

def error_code(exc) -> str:
    """Envelope code of a DRF exception: the class's ``default_code``, upper-cased."""
    if isinstance(exc, exceptions.ValidationError):
        return 'VALIDATION_ERROR'
    return str(getattr(exc, 'default_code', 'error')).upper()


def standard_exception_handler(exc, context):
    """
    Wraps every error response in the standard envelope:
      { "success": false, "errors": {...}, "code": "ERROR_CODE" }

    ``errors`` is the exception's detail as DRF renders it; field errors
    are keyed by field name.
    """
    if isinstance(exc, DatabaseError):
        logger.exception('Storage failure while serving request: %s', exc)
        return Response(
            {'success': False, 'errors': {'detail': ['Storage unavailable.']}, 'code': 'STORAGE_FAILURE'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = exception_handler(exc, context)

    if response is None:
        logger.exception('Unhandled exception in view: %s', exc)
        return Response(
            {'success': False, 'errors': {'detail': ['Internal server error.']}, 'code': 'INTERNAL_ERROR'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(response.data, dict):
        errors = response.data
    elif isinstance(response.data, list):
        errors = {'detail': response.data}
    else:
        errors = {'detail': [str(response.data)]}

    response.data = {
        'success': False,
        'errors': errors,
        'code': error_code(exc),
    }
    return response
