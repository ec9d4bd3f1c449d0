"""
Error taxonomy shared by every app.

Each error maps to one HTTP status and is rendered into the standard
``{success: false, message}`` envelope by the exception handler.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class ValidationError(APIException):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid'

    def __init__(self, detail=None, errors=None):
        super().__init__(detail)
        self.errors = errors


class ConflictError(APIException):
    """A unique key (product EAN) already exists."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'A product with this EAN already exists'
    default_code = 'conflict'


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Product not found'
    default_code = 'not_found'


class AuthError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized. Please log in.'
    default_code = 'not_authenticated'


class ConfigError(APIException):
    """Deployment misconfiguration, e.g. a missing access code hash."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Server configuration error'
    default_code = 'config_error'
